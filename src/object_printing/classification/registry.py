"""
Classifier registry for tagging runtime types.

Provides a central registry that resolves a TypeKind per type once and
caches it, so the engine never re-inspects a type it has already seen.
"""

import logging
from typing import Dict, List

from .base import KindRule, TypeKind
from .rules import FinalTypeRule, MappingRule, NamedTupleRule, SequenceRule

logger = logging.getLogger(__name__)


class TypeClassifier:
    """
    Registry of classification rules.

    Types not claimed by any rule are compound objects.
    """

    def __init__(self) -> None:
        """Initialize the classifier with an empty rule list."""
        self._rules: List[KindRule] = []
        self._kind_cache: Dict[type, TypeKind] = {}

    @property
    def rules(self) -> List[KindRule]:
        return list(self._rules)

    def register(self, rule: KindRule) -> None:
        """
        Register a classification rule.

        Args:
            rule: The rule to register
        """
        self._rules.append(rule)
        # Clear cache when registry changes
        self._kind_cache.clear()

    def classify(self, tp: type) -> TypeKind:
        """
        Resolve the kind of a runtime type.

        Args:
            tp: The type to classify

        Returns:
            Kind claimed by the first matching rule, COMPOUND otherwise
        """
        kind = self._kind_cache.get(tp)
        if kind is not None:
            return kind

        kind = TypeKind.COMPOUND
        for rule in self._rules:
            if rule.can_handle(tp):
                kind = rule.kind
                break

        logger.debug(f"Classified {tp.__qualname__} as {kind.name}")
        self._kind_cache[tp] = kind
        return kind

    def classify_value(self, value: object) -> TypeKind:
        """Resolve the kind of a value's runtime type."""
        return self.classify(type(value))


def get_default_classifier() -> TypeClassifier:
    """
    Get a classifier with all default rules registered.

    Returns:
        Classifier with all built-in rules
    """
    classifier = TypeClassifier()

    # Final types first so str and bytes never count as sequences
    classifier.register(FinalTypeRule())

    # Named tuples before sequences to keep record semantics
    classifier.register(NamedTupleRule())

    classifier.register(MappingRule())
    classifier.register(SequenceRule())

    return classifier


# Global default classifier
_default_classifier = None


def get_global_classifier() -> TypeClassifier:
    """
    Get the global default classifier (singleton).

    Returns:
        The global classifier instance
    """
    global _default_classifier
    if _default_classifier is None:
        _default_classifier = get_default_classifier()
    return _default_classifier


def reset_global_classifier() -> None:
    """Reset the global classifier (mainly for testing)."""
    global _default_classifier
    _default_classifier = None
