"""Testing utilities for FillTree."""

from .fixtures import build_expected_tree, level_order_values, level_sizes, is_complete

__all__ = ['build_expected_tree', 'level_order_values', 'level_sizes', 'is_complete']
