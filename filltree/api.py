"""High-level API for FillTree.

This module provides simple, functional interfaces for the tree
operations. These functions wrap the BinaryTree methods for callers who
prefer free functions over method chaining.
"""

from typing import Any, Iterable, Optional

from .core.node import BinaryTree
from .config import TreeConfig


def construct(value: Any, config: Optional[TreeConfig] = None) -> BinaryTree:
    """Create a single-node tree holding value.

    Args:
        value: Root value
        config: Optional tree configuration

    Returns:
        New BinaryTree with no children
    """
    return BinaryTree(value, config)


def build_from_sequence(values: Iterable[Any],
                        config: Optional[TreeConfig] = None) -> BinaryTree:
    """Build a complete tree by inserting values in order.

    Args:
        values: Non-empty sequence; the first element becomes the root
        config: Optional tree configuration

    Returns:
        Root of the new tree

    Raises:
        EmptyInputError: If values is empty

    Example:
        >>> tree = build_from_sequence("abc")
        >>> (tree.value, tree.left.value, tree.right.value)
        ('a', 'b', 'c')
    """
    return BinaryTree.from_values(values, config)


def insert(tree: BinaryTree, value: Any) -> None:
    """Insert value into tree at the next breadth-first slot."""
    tree.insert(value)


def attach_left(tree: BinaryTree, child: BinaryTree) -> BinaryTree:
    """Set tree's left child and return tree."""
    return tree.attach_left(child)


def attach_right(tree: BinaryTree, child: BinaryTree) -> BinaryTree:
    """Set tree's right child and return tree."""
    return tree.attach_right(child)
