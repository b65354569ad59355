"""Common components shared across FillTree.

This internal package holds plain configuration types. It should NOT be
imported directly by users.

Important: This package must NEVER import from core to avoid
circular dependencies.
"""

from .config import (
    Side,
    TreeConfig,
    DEFAULT_CONFIG,
)

__all__ = [
    'Side',
    'TreeConfig',
    'DEFAULT_CONFIG',
]
