"""
Type classification for the printing engine.

Tags every runtime type as final, sequence, mapping or compound, using
pluggable rules and a per-type cache.
"""

from .base import KindRule, TypeKind
from .registry import (
    TypeClassifier,
    get_default_classifier,
    get_global_classifier,
    reset_global_classifier,
)
from .rules import DEFAULT_FINAL_TYPES, FinalTypeRule, MappingRule, NamedTupleRule, SequenceRule

__all__ = [
    "DEFAULT_FINAL_TYPES",
    "FinalTypeRule",
    "KindRule",
    "MappingRule",
    "NamedTupleRule",
    "SequenceRule",
    "TypeClassifier",
    "TypeKind",
    "get_default_classifier",
    "get_global_classifier",
    "reset_global_classifier",
]
