"""
Printing policy contract and its default implementation.

The engine only reads from a policy: overrides, exclusions, the depth limit
and the cycle allowance are all fixed before the first serialize call.
"""

import os
import types
import typing
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, FrozenSet, Iterator, Mapping, Optional, Tuple

from .members import MemberInfo

Formatter = Callable[[Any], str]
MemberKey = Tuple[type, str]

DEFAULT_MAX_DEPTH = 32


class PrintingPolicy(ABC):
    """
    Lookup contract consumed by the serializer.

    Implementations must not change while a serialize call is running.
    """

    @abstractmethod
    def resolve_type_formatter(self, tp: type) -> Optional[Formatter]:
        """Formatter registered for exactly this runtime type, if any."""
        pass

    @abstractmethod
    def resolve_member_formatter(self, member: MemberInfo) -> Optional[Formatter]:
        """Formatter registered for this member, if any."""
        pass

    @abstractmethod
    def is_type_excluded(self, tp: Any) -> bool:
        """Check if members declared with this type are left out."""
        pass

    @abstractmethod
    def is_member_excluded(self, member: MemberInfo) -> bool:
        """Check if this specific member is left out."""
        pass

    @property
    @abstractmethod
    def max_depth(self) -> int:
        pass

    @property
    @abstractmethod
    def allow_cycles(self) -> bool:
        pass

    @property
    def newline(self) -> str:
        return os.linesep

    @property
    def track_references_across_calls(self) -> bool:
        return False


@dataclass(frozen=True)
class SerializerSettings(PrintingPolicy):
    """
    Immutable printing policy.

    Usually produced by ``PrintingConfig.build()``. Member keys are
    ``(class, member name)``; a key registered for a base class applies to
    all of its subclasses.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    allow_cycles: bool = False
    newline: str = os.linesep
    track_references_across_calls: bool = False
    excluded_types: FrozenSet[Any] = frozenset()
    excluded_members: FrozenSet[MemberKey] = frozenset()
    # Formatter maps are compared but not hashed
    type_formatters: Mapping[type, Formatter] = field(default_factory=dict, hash=False)
    member_formatters: Mapping[MemberKey, Formatter] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")
        object.__setattr__(self, "excluded_types", frozenset(self.excluded_types))
        object.__setattr__(self, "excluded_members", frozenset(self.excluded_members))
        object.__setattr__(self, "type_formatters", MappingProxyType(dict(self.type_formatters)))
        object.__setattr__(
            self, "member_formatters", MappingProxyType(dict(self.member_formatters))
        )

    def resolve_type_formatter(self, tp: type) -> Optional[Formatter]:
        return self.type_formatters.get(tp)

    def resolve_member_formatter(self, member: MemberInfo) -> Optional[Formatter]:
        for key in _member_keys(member):
            formatter = self.member_formatters.get(key)
            if formatter is not None:
                return formatter
        return None

    def is_type_excluded(self, tp: Any) -> bool:
        if not self.excluded_types:
            return False
        return any(candidate in self.excluded_types for candidate in _type_candidates(tp))

    def is_member_excluded(self, member: MemberInfo) -> bool:
        return any(key in self.excluded_members for key in _member_keys(member))


def _member_keys(member: MemberInfo) -> Iterator[MemberKey]:
    for klass in member.owner.__mro__:
        yield (klass, member.name)


def _type_candidates(tp: Any) -> Iterator[Any]:
    """
    Types an annotation should be matched as.

    ``Optional[X]`` matches ``X``; a parameterised generic such as
    ``List[int]`` also matches its origin ``list``.
    """
    yield tp
    origin = typing.get_origin(tp)
    if origin is typing.Union or origin is getattr(types, "UnionType", None):
        args = [arg for arg in typing.get_args(tp) if arg is not type(None)]
        if len(args) == 1:
            yield from _type_candidates(args[0])
    elif origin is not None:
        yield origin
