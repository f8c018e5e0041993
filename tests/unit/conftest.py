"""Shared fixtures for unit tests."""

import pytest

from object_printing import PrintingConfig
from object_printing.classification import reset_global_classifier
from object_printing.members import clear_descriptor_cache


@pytest.fixture
def config():
    """Default configuration with a fixed line terminator."""
    return PrintingConfig().with_newline("\n")


@pytest.fixture(autouse=True)
def clean_caches():
    """Start every test with empty type caches."""
    clear_descriptor_cache()
    reset_global_classifier()
    yield
    clear_descriptor_cache()
    reset_global_classifier()
