"""
Base classification rule interface.

Every runtime type is tagged exactly once with a TypeKind that tells the
engine whether to print it as a leaf, walk it as a collection, or walk its
members.
"""

from abc import ABC, abstractmethod
from enum import Enum


class TypeKind(Enum):
    """Closed set of rendering strategies for a runtime type."""

    FINAL = "final"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    COMPOUND = "compound"

    @property
    def is_collection(self) -> bool:
        return self in (TypeKind.SEQUENCE, TypeKind.MAPPING)


class KindRule(ABC):
    """
    Abstract base class for classification rules.

    A rule claims a type and assigns it a kind. Rules are consulted in
    registration order and the first one that claims a type wins.
    """

    kind: TypeKind

    @abstractmethod
    def can_handle(self, tp: type) -> bool:
        """
        Check if this rule claims the given type.

        Args:
            tp: The runtime type to check

        Returns:
            True if values of this type should be tagged with ``self.kind``
        """
        pass

    def __repr__(self) -> str:
        """String representation of the rule."""
        return f"{self.__class__.__name__}(kind={self.kind.name})"
