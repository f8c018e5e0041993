"""
Test package surface.

What this tests:
---------------
1. Package can be imported
2. Public names are exported
3. Convenience entry points work

Why this matters:
----------------
- Verifies package structure is correct
"""

import pytest

from .models import Node, Record


class TestPackage:
    """Test basic package functionality."""

    def test_package_imports(self):
        """
        Test that the package can be imported.

        What this tests:
        ---------------
        1. Package import doesn't raise exceptions
        2. __version__ attribute exists
        3. Public API is exported

        Why this matters:
        ----------------
        - Users must be able to import the package
        - Validates pyproject.toml configuration
        """
        import object_printing

        assert hasattr(object_printing, "__version__")
        for name in object_printing.__all__:
            assert hasattr(object_printing, name)

    def test_print_to_string_defaults(self):
        from object_printing import print_to_string

        assert print_to_string(Record("Bob", 5)).splitlines() == [
            "Record",
            "\tName = Bob",
            "\tAge = 5",
        ]

    def test_print_to_string_with_config(self, config):
        from object_printing import print_to_string

        assert print_to_string(Record("Bob", 5), config.excluding(int)) == "Record\n\tName = Bob\n"

    def test_print_to_string_raises_on_cycle(self):
        from object_printing import UnexpectedCycleError, print_to_string

        node = Node("a")
        node.next = node

        with pytest.raises(UnexpectedCycleError):
            print_to_string(node)

    def test_try_print_to_string(self):
        from object_printing import try_print_to_string

        node = Node("a")
        node.next = node

        result = try_print_to_string(node)

        assert not result.ok
        assert isinstance(result.error.value_type, type)

    def test_errors_share_base_class(self):
        from object_printing import ConfigurationError, ObjectPrintingError, UnexpectedCycleError

        assert issubclass(UnexpectedCycleError, ObjectPrintingError)
        assert issubclass(ConfigurationError, ObjectPrintingError)
