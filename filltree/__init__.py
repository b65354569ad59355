"""FillTree - Breadth-First Filled Binary Trees.

FillTree builds binary trees whose shape is decided by insertion order
alone: each new value goes into the first free child slot found by a
breadth-first, left-to-right scan. Feeding in a sequence therefore
always yields the same complete tree.

Object style:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from filltree import BinaryTree
    tree = BinaryTree.from_values([1, 2, 3, 4])
    tree.insert(5)

Functional style:
    from filltree import build_from_sequence, insert
    tree = build_from_sequence([1, 2, 3, 4])
    insert(tree, 5)
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .core.node import BinaryTree
from .config import Side, TreeConfig
from .errors import TreeError, EmptyInputError, ValueTypeError
from .api import (
    construct,
    build_from_sequence,
    insert,
    attach_left,
    attach_right,
)

__all__ = [
    "__version__",
    # Core
    "BinaryTree",
    # Config
    "Side",
    "TreeConfig",
    # Errors
    "TreeError",
    "EmptyInputError",
    "ValueTypeError",
    # API
    "construct",
    "build_from_sequence",
    "insert",
    "attach_left",
    "attach_right",
]
