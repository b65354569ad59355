"""Configuration re-export.

Public access point for the configuration components that live in
the _common package.
"""

from ._common.config import (
    Side,
    TreeConfig,
    DEFAULT_CONFIG,
)

__all__ = [
    'Side',
    'TreeConfig',
    'DEFAULT_CONFIG',
]
