"""Core components of FillTree: the node type and its traversal helper."""

from .node import BinaryTree
from .traverser import LevelOrderTraverser

__all__ = [
    'BinaryTree',
    'LevelOrderTraverser',
]
