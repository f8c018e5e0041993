"""object-printing - Configurable recursive object printer for debug output."""

from importlib.metadata import PackageNotFoundError, version

from .classification import TypeClassifier, TypeKind, get_global_classifier
from .config import PrintingConfig
from .exceptions import ConfigurationError, ObjectPrintingError, UnexpectedCycleError
from .exporters import BaseDumpExporter, TextDumpExporter
from .members import MemberInfo, TypeDescriptor, describe_type
from .printer import print_to_string, try_print_to_string
from .serializer import PrintResult, Serializer
from .settings import DEFAULT_MAX_DEPTH, Formatter, PrintingPolicy, SerializerSettings
from .utils.stats import DumpStats

try:
    __version__ = version("object-printing")
except PackageNotFoundError:
    # Package is not installed
    __version__ = "0.0.0+unknown"


__all__ = [
    "BaseDumpExporter",
    "ConfigurationError",
    "DEFAULT_MAX_DEPTH",
    "DumpStats",
    "Formatter",
    "MemberInfo",
    "ObjectPrintingError",
    "PrintResult",
    "PrintingConfig",
    "PrintingPolicy",
    "Serializer",
    "SerializerSettings",
    "TextDumpExporter",
    "TypeClassifier",
    "TypeDescriptor",
    "TypeKind",
    "UnexpectedCycleError",
    "describe_type",
    "get_global_classifier",
    "print_to_string",
    "try_print_to_string",
    "__version__",
]
