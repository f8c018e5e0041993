"""
Built-in classification rules.

Final types are printed through their native text form, named tuples are
walked like records, and the remaining containers are walked as mappings
or sequences.
"""

import collections.abc
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from pathlib import PurePath
from typing import Iterable, Tuple
from uuid import UUID

from .base import KindRule, TypeKind

DEFAULT_FINAL_TYPES: Tuple[type, ...] = (
    bool,
    int,
    float,
    complex,
    Decimal,
    Fraction,
    str,
    bytes,
    bytearray,
    datetime,
    date,
    time,
    timedelta,
    UUID,
    Enum,
    PurePath,
)


class FinalTypeRule(KindRule):
    """Claims atomic leaf types and their subclasses."""

    kind = TypeKind.FINAL

    def __init__(self, final_types: Iterable[type] = DEFAULT_FINAL_TYPES) -> None:
        self.final_types = tuple(final_types)

    def can_handle(self, tp: type) -> bool:
        """Check if type is (a subclass of) a final type."""
        return issubclass(tp, self.final_types)

    def __repr__(self) -> str:
        names = ", ".join(t.__name__ for t in self.final_types)
        return f"FinalTypeRule({names})"


class NamedTupleRule(KindRule):
    """
    Claims named tuples so they print as records instead of sequences.

    Must be registered before SequenceRule, which would otherwise claim
    them as plain tuples.
    """

    kind = TypeKind.COMPOUND

    def can_handle(self, tp: type) -> bool:
        """Check if type is a named tuple."""
        return issubclass(tp, tuple) and hasattr(tp, "_fields") and hasattr(tp, "_asdict")


class MappingRule(KindRule):
    """Claims key-value containers."""

    kind = TypeKind.MAPPING

    def can_handle(self, tp: type) -> bool:
        """Check if type is a mapping."""
        return issubclass(tp, collections.abc.Mapping)


class SequenceRule(KindRule):
    """Claims ordered and unordered element containers (list, tuple, set, deque, ...)."""

    kind = TypeKind.SEQUENCE

    def can_handle(self, tp: type) -> bool:
        """Check if type is a sequence or set."""
        return issubclass(tp, (collections.abc.Sequence, collections.abc.Set, collections.deque))
