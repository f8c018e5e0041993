"""
Fluent configuration for object printing.

Every builder call returns a new PrintingConfig, so a base configuration
can be shared and specialised without side effects:

    config = (
        PrintingConfig()
        .excluding(UUID)
        .printing(float).using_format(".2f")
        .printing_member(Person, "name").trimmed_to_length(10)
        .with_depth(5)
    )
    text = config.print_to_string(person)
"""

import dataclasses
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from .exceptions import ConfigurationError
from .serializer import PrintResult, Serializer
from .settings import Formatter, MemberKey, SerializerSettings

OPTION_KEYS = (
    "max_depth",
    "allow_cycles",
    "newline",
    "track_references_across_calls",
    "excluded_types",
    "excluded_members",
    "type_formatters",
    "member_formatters",
)


class PrintingConfig:
    """Immutable builder producing SerializerSettings."""

    def __init__(self, settings: Optional[SerializerSettings] = None) -> None:
        self._settings = settings or SerializerSettings()

    @classmethod
    def from_options(cls, options: Dict[str, Any]) -> "PrintingConfig":
        """
        Build a configuration from a declarative options map.

        Args:
            options: Mapping using the keys listed in OPTION_KEYS

        Returns:
            Configuration equivalent to the options

        Raises:
            ConfigurationError: On unknown keys or invalid values
        """
        unknown = sorted(set(options) - set(OPTION_KEYS))
        if unknown:
            raise ConfigurationError(f"Unknown printing options: {', '.join(unknown)}", unknown[0])

        config = cls()
        if "max_depth" in options:
            config = config.with_depth(options["max_depth"])
        if "allow_cycles" in options:
            config = config.allow_cycling_reference(_bool_option(options, "allow_cycles"))
        if "newline" in options:
            config = config.with_newline(options["newline"])
        if "track_references_across_calls" in options:
            config = config.track_references_across_calls(
                _bool_option(options, "track_references_across_calls")
            )
        for tp in options.get("excluded_types", ()):
            config = config.excluding(tp)
        for owner, name in options.get("excluded_members", ()):
            config = config.excluding_member(owner, name)
        for tp, formatter in options.get("type_formatters", {}).items():
            config = config.printing(tp).using(formatter)
        for (owner, name), formatter in options.get("member_formatters", {}).items():
            config = config.printing_member(owner, name).using(formatter)
        return config

    @property
    def settings(self) -> SerializerSettings:
        return self._settings

    def excluding(self, tp: Any) -> "PrintingConfig":
        """Leave out every member declared with type ``tp``."""
        return self._replace(excluded_types=self._settings.excluded_types | {tp})

    def excluding_member(self, owner: type, name: str) -> "PrintingConfig":
        """Leave out member ``name`` of ``owner`` and of its subclasses."""
        key = _member_key(owner, name)
        return self._replace(excluded_members=self._settings.excluded_members | {key})

    def printing(self, tp: type) -> "TypePrintingConfig":
        """Start configuring how values of exactly type ``tp`` are printed."""
        if not isinstance(tp, type):
            raise ConfigurationError(f"Expected a type, got {tp!r}")
        return TypePrintingConfig(self, tp)

    def printing_member(self, owner: type, name: str) -> "MemberPrintingConfig":
        """Start configuring how member ``name`` of ``owner`` is printed."""
        return MemberPrintingConfig(self, _member_key(owner, name))

    def with_depth(self, max_depth: int) -> "PrintingConfig":
        if not isinstance(max_depth, int) or isinstance(max_depth, bool) or max_depth < 0:
            raise ConfigurationError(
                f"max_depth must be a non-negative integer, got {max_depth!r}", "max_depth"
            )
        return self._replace(max_depth=max_depth)

    def allow_cycling_reference(self, allow: bool = True) -> "PrintingConfig":
        return self._replace(allow_cycles=allow)

    def with_newline(self, newline: str) -> "PrintingConfig":
        if not isinstance(newline, str):
            raise ConfigurationError(f"newline must be a string, got {newline!r}", "newline")
        return self._replace(newline=newline)

    def track_references_across_calls(self, track: bool = True) -> "PrintingConfig":
        return self._replace(track_references_across_calls=track)

    def build(self) -> SerializerSettings:
        return self._settings

    def serializer(self) -> Serializer:
        """Create a fresh serializer bound to this configuration."""
        return Serializer(self._settings)

    def print_to_string(self, obj: Any) -> str:
        return self.serializer().serialize(obj)

    def try_print_to_string(self, obj: Any) -> PrintResult:
        return self.serializer().try_serialize(obj)

    def _replace(self, **changes: Any) -> "PrintingConfig":
        return PrintingConfig(dataclasses.replace(self._settings, **changes))

    def _with_type_formatter(self, tp: type, formatter: Formatter) -> "PrintingConfig":
        formatters = dict(self._settings.type_formatters)
        formatters[tp] = formatter
        return self._replace(type_formatters=formatters)

    def _with_member_formatter(self, key: MemberKey, formatter: Formatter) -> "PrintingConfig":
        formatters = dict(self._settings.member_formatters)
        formatters[key] = formatter
        return self._replace(member_formatters=formatters)

    def __repr__(self) -> str:
        return f"PrintingConfig({self._settings!r})"


class _FormatterConfig(ABC):
    """Common formatter registration steps for types and members."""

    def __init__(self, parent: PrintingConfig) -> None:
        self._parent = parent

    def using(self, formatter: Formatter) -> PrintingConfig:
        """Print with ``formatter``; the latest registration for a target wins."""
        if not callable(formatter):
            raise ConfigurationError(f"Formatter must be callable, got {formatter!r}")
        return self._register(formatter)

    def trimmed_to_length(self, max_length: int) -> PrintingConfig:
        """Print ``str(value)`` cut to at most ``max_length`` characters."""
        if not isinstance(max_length, int) or isinstance(max_length, bool) or max_length < 0:
            raise ConfigurationError(
                f"max_length must be a non-negative integer, got {max_length!r}"
            )
        return self._register(lambda value: str(value)[:max_length])

    @abstractmethod
    def _register(self, formatter: Formatter) -> PrintingConfig:
        pass


class TypePrintingConfig(_FormatterConfig):
    """Formatter registration for a single runtime type."""

    def __init__(self, parent: PrintingConfig, tp: type) -> None:
        super().__init__(parent)
        self.type = tp

    def using_format(self, format_spec: str) -> PrintingConfig:
        """Print with ``format(value, format_spec)``, e.g. ``".2f"`` or ``","``."""
        if not isinstance(format_spec, str):
            raise ConfigurationError(f"format_spec must be a string, got {format_spec!r}")
        return self._register(lambda value: format(value, format_spec))

    def _register(self, formatter: Formatter) -> PrintingConfig:
        return self._parent._with_type_formatter(self.type, formatter)


class MemberPrintingConfig(_FormatterConfig):
    """Formatter registration for a single member."""

    def __init__(self, parent: PrintingConfig, key: MemberKey) -> None:
        super().__init__(parent)
        self.key = key

    def _register(self, formatter: Formatter) -> PrintingConfig:
        return self._parent._with_member_formatter(self.key, formatter)


def _member_key(owner: type, name: str) -> MemberKey:
    if not isinstance(owner, type):
        raise ConfigurationError(f"Member owner must be a class, got {owner!r}")
    if not isinstance(name, str) or not name:
        raise ConfigurationError(f"Member name must be a non-empty string, got {name!r}")
    return (owner, name)


def _bool_option(options: Dict[str, Any], key: str) -> bool:
    value = options[key]
    if not isinstance(value, bool):
        raise ConfigurationError(f"{key} must be a boolean, got {value!r}", key)
    return value
