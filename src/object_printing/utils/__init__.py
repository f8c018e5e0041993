"""Utility helpers for object-printing."""

from .stats import DumpStats

__all__ = ["DumpStats"]
