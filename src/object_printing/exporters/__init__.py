"""Exporters writing printed objects to files."""

from .base import BaseDumpExporter
from .text import TextDumpExporter

__all__ = ["BaseDumpExporter", "TextDumpExporter"]
