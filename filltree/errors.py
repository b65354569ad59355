"""Exceptions raised by FillTree.

Every exception derives from TreeError, and additionally from the
built-in exception it refines, so callers can catch either.
"""


class TreeError(Exception):
    """Base class for all FillTree errors."""
    pass


class EmptyInputError(TreeError, ValueError):
    """Raised when a tree is built from a sequence with no elements.

    The first element becomes the root value, so an empty sequence
    leaves nothing to seed the tree with.
    """
    pass


class ValueTypeError(TreeError, TypeError):
    """Raised when a value does not match TreeConfig.value_type."""

    def __init__(self, value, expected: type):
        self.value = value
        self.expected = expected
        super().__init__(
            f"Value {value!r} is of type {type(value).__name__}, "
            f"expected {expected.__name__}"
        )
