"""
Exceptions raised by object-printing.

Depth truncation, exclusions and missing formatters are normal control
flow and never raise. Only the conditions below are signalled as errors.
"""

from typing import Optional


class ObjectPrintingError(Exception):
    """Base class for all object-printing errors."""


class UnexpectedCycleError(ObjectPrintingError):
    """
    Raised when an object is reached a second time and cycles are not allowed.

    The whole serialize call is aborted; no partial output is returned.
    """

    def __init__(self, value_type: type, nesting_level: int) -> None:
        self.value_type = value_type
        self.nesting_level = nesting_level
        super().__init__(
            f"Unexpected cycle reference to {value_type.__name__} at nesting level {nesting_level}"
        )


class ConfigurationError(ObjectPrintingError, ValueError):
    """Raised for invalid printing configuration."""

    def __init__(self, message: str, key: Optional[str] = None) -> None:
        self.key = key
        super().__init__(message)
