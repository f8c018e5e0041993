"""
Recursive object-to-text serializer.

Walks an object graph depth first and renders an indented, human-readable
text block. Rendering decisions are taken in a fixed order: depth limit,
None, cycle guard, custom type formatter, final type, collection and
finally compound object.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional

from .classification import TypeClassifier, TypeKind, get_global_classifier
from .exceptions import UnexpectedCycleError
from .members import MemberInfo, describe_type
from .settings import PrintingPolicy, SerializerSettings

logger = logging.getLogger(__name__)

NULL_TOKEN = "null"
CYCLE_TOKEN = "Cycle"
EMPTY_COLLECTION_TOKEN = "[]"


@dataclass(frozen=True)
class PrintResult:
    """
    Outcome of a serialize call.

    Either ``text`` holds the rendered output, or ``error`` holds the
    cycle error that aborted the call (and ``text`` is None).
    """

    text: Optional[str] = None
    error: Optional[UnexpectedCycleError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """Return the rendered text, raising the stored error if there is one."""
        if self.error is not None:
            raise self.error
        return self.text or ""

    def text_or(self, render_error: Callable[[UnexpectedCycleError], str]) -> str:
        """Return the rendered text, or ``render_error(error)`` when the call failed."""
        if self.error is not None:
            return render_error(self.error)
        return self.text or ""


class Serializer:
    """
    Object graph printer.

    Holds the set of objects already visited, so an instance must not be
    shared between threads. By default the set is reset at the start of
    every top-level call; with ``track_references_across_calls`` it keeps
    growing for the lifetime of the instance.
    """

    def __init__(
        self,
        settings: Optional[PrintingPolicy] = None,
        classifier: Optional[TypeClassifier] = None,
    ) -> None:
        self.settings = settings or SerializerSettings()
        self.classifier = classifier or get_global_classifier()
        # id -> object; holding the object keeps its id from being reused
        self._visited: Dict[int, Any] = {}

    @property
    def visited_count(self) -> int:
        return len(self._visited)

    def reset(self) -> None:
        """Forget every object visited so far."""
        self._visited.clear()

    def serialize(self, obj: Any, nesting_level: int = 0) -> str:
        """
        Render an object as indented text.

        Args:
            obj: Root of the object graph
            nesting_level: Level the root is printed at (0 for a top-level call)

        Returns:
            Rendered text, empty if ``nesting_level`` exceeds the depth limit

        Raises:
            UnexpectedCycleError: If an object is reached twice and cycles are not allowed
            ValueError: If nesting_level is negative
        """
        return self.try_serialize(obj, nesting_level).unwrap()

    def try_serialize(self, obj: Any, nesting_level: int = 0) -> PrintResult:
        """
        Render an object, returning cycle failures as a value instead of raising.

        Args:
            obj: Root of the object graph
            nesting_level: Level the root is printed at

        Returns:
            PrintResult with either the text or the cycle error
        """
        if nesting_level < 0:
            raise ValueError(f"nesting_level must be non-negative, got {nesting_level}")

        if not self.settings.track_references_across_calls:
            self.reset()

        try:
            return PrintResult(text=self._serialize(obj, nesting_level))
        except UnexpectedCycleError as e:
            logger.debug(f"Serialization aborted: {e}")
            return PrintResult(error=e)

    def _serialize(self, obj: Any, nesting_level: int) -> str:
        if nesting_level > self.settings.max_depth:
            logger.debug(
                f"Depth limit {self.settings.max_depth} reached, truncating {type(obj).__name__}"
            )
            return ""

        if obj is None:
            return self._line(NULL_TOKEN)

        if id(obj) in self._visited:
            if self.settings.allow_cycles:
                logger.debug(f"Cycle to {type(obj).__name__} at level {nesting_level}")
                return self._line(CYCLE_TOKEN)
            raise UnexpectedCycleError(type(obj), nesting_level)

        obj_type = type(obj)

        formatter = self.settings.resolve_type_formatter(obj_type)
        if formatter is not None:
            return self._line(formatter(obj))

        kind = self.classifier.classify(obj_type)

        if kind is TypeKind.FINAL:
            return self._line(_native_text(obj))

        if kind is TypeKind.MAPPING:
            return self._print_mapping(obj, nesting_level)

        if kind is TypeKind.SEQUENCE:
            return self._print_sequence(obj, nesting_level)

        return self._print_compound(obj, nesting_level)

    def _print_compound(self, obj: Any, nesting_level: int) -> str:
        self._visited[id(obj)] = obj

        indent = "\t" * (nesting_level + 1)
        parts = [self._line(type(obj).__name__)]
        for member in describe_type(type(obj)).members_of(obj):
            if self._is_excluded(member):
                continue
            try:
                value = member.get_value(obj)
            except AttributeError:
                # Unset slot
                continue
            if member.declared_type is None and self.settings.is_type_excluded(
                member.member_type(value)
            ):
                continue
            parts.append(
                f"{indent}{member.name} = {self._print_member(member, value, nesting_level)}"
            )

        return "".join(parts)

    def _print_member(self, member: MemberInfo, value: Any, nesting_level: int) -> str:
        formatter = self.settings.resolve_member_formatter(member)
        if formatter is not None:
            return self._line(formatter(value))
        return self._serialize(value, nesting_level + 1)

    def _is_excluded(self, member: MemberInfo) -> bool:
        if self.settings.is_member_excluded(member):
            return True
        return member.declared_type is not None and self.settings.is_type_excluded(
            member.declared_type
        )

    def _print_sequence(self, collection: Any, nesting_level: int) -> str:
        if len(collection) == 0:
            return self._line(EMPTY_COLLECTION_TOKEN)

        indent = "\t" * nesting_level
        parts = [self.settings.newline, self._line(f"{indent}[")]
        for element in collection:
            parts.append(f"{indent}\t{self._serialize(element, nesting_level + 1)}")
        parts.append(self._line(f"{indent}]"))

        return "".join(parts)

    def _print_mapping(self, mapping: Mapping[Any, Any], nesting_level: int) -> str:
        if len(mapping) == 0:
            return self._line(EMPTY_COLLECTION_TOKEN)

        indent = "\t" * nesting_level
        parts = [self.settings.newline, self._line(f"{indent}[")]
        for key, value in mapping.items():
            parts.append(f"{indent}\tKey: {self._serialize(key, nesting_level + 1)}")
            parts.append(f"{indent}\tValue: {self._serialize(value, nesting_level + 1)}")
        parts.append(self._line(f"{indent}]"))

        return "".join(parts)

    def _line(self, text: str) -> str:
        return f"{text}{self.settings.newline}"


def _native_text(value: Any) -> str:
    if isinstance(value, Enum):
        return value.name
    return str(value)
