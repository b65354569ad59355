"""Configuration system for FillTree.

This module defines how users tune the values stored in a tree:
whether payloads are copied on the way in and which type they must have.
"""

import copy
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional


class Side(Enum):
    """Which child slot of a node is meant."""
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class TreeConfig:
    """Configuration shared by every node of one tree.

    The default configuration stores values as given and accepts any
    type. A tree hands its config to each node it creates on insert,
    so the settings hold for the whole tree.
    """

    copy_values: bool = False            # Store copy.copy(value) instead of value
    value_type: Optional[type] = None    # Required type of every value

    @classmethod
    def typed(cls, value_type: type, copy_values: bool = False) -> 'TreeConfig':
        """Create config for a tree that only accepts one value type.

        Args:
            value_type: Class every value must be an instance of
            copy_values: Whether to copy values before storing them

        Returns:
            TreeConfig restricted to value_type
        """
        return cls(copy_values=copy_values, value_type=value_type)

    def accepts(self, value: Any) -> bool:
        """Check whether a value satisfies the configured type."""
        if self.value_type is None:
            return True
        return isinstance(value, self.value_type)

    def prepare(self, value: Any) -> Any:
        """Return the object that will actually be stored for value."""
        if self.copy_values:
            return copy.copy(value)
        return value

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.value_type is not None and not isinstance(self.value_type, type):
            errors.append("value_type must be a class")

        if not isinstance(self.copy_values, bool):
            errors.append("copy_values must be a bool")

        return errors


DEFAULT_CONFIG = TreeConfig()
