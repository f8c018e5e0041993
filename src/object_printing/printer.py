"""Convenience entry points for one-off printing."""

from typing import Any, Optional

from .config import PrintingConfig
from .serializer import PrintResult


def print_to_string(obj: Any, config: Optional[PrintingConfig] = None) -> str:
    """
    Render an object with the given configuration (defaults if omitted).

    A fresh serializer is used for every call, so this is safe to call
    from multiple threads.

    Raises:
        UnexpectedCycleError: If the graph has a cycle and cycles are not allowed
    """
    return (config or PrintingConfig()).print_to_string(obj)


def try_print_to_string(obj: Any, config: Optional[PrintingConfig] = None) -> PrintResult:
    """Like print_to_string, but returns cycle failures inside the result."""
    return (config or PrintingConfig()).try_print_to_string(obj)
