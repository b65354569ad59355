"""Test fixtures for FillTree consumers.

These helpers build and inspect trees independently of the insertion
code path, so test suites can check insertion results against them.
"""

from typing import Any, Dict, List, Optional, Sequence

from ..core.node import BinaryTree
from ..core.traverser import iter_level_order


def build_expected_tree(values: Sequence[Any]) -> Optional[BinaryTree]:
    """Build the complete tree for values using array indices.

    Node i gets children at 2i+1 and 2i+2, which is the layout a
    complete binary tree has when stored as an array. Only attach_left
    and attach_right are used, never insert.

    Args:
        values: Values in breadth-first order

    Returns:
        Root of the tree, or None if values is empty
    """
    if not values:
        return None

    nodes = [BinaryTree(value) for value in values]
    for index, node in enumerate(nodes):
        left, right = 2 * index + 1, 2 * index + 2
        if left < len(nodes):
            node.attach_left(nodes[left])
        if right < len(nodes):
            node.attach_right(nodes[right])
    return nodes[0]


def level_order_values(tree: BinaryTree) -> List[Any]:
    """Return the values of tree in breadth-first order."""
    return [node.value for node in iter_level_order(tree)]


def level_sizes(tree: BinaryTree) -> Dict[int, int]:
    """Count nodes per depth.

    Returns:
        Mapping of depth (root is 0) to number of nodes at that depth
    """
    sizes: Dict[int, int] = {}
    level = [tree]
    depth = 0
    while level:
        sizes[depth] = len(level)
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
        depth += 1
    return sizes


def is_complete(tree: BinaryTree) -> bool:
    """Check the left-filled-per-level shape.

    A tree is complete when, scanning child slots in level order, no
    present child appears after the first absent one.
    """
    seen_gap = False
    for node in iter_level_order(tree):
        for child in (node.left, node.right):
            if child is None:
                seen_gap = True
            elif seen_gap:
                return False
    return True
