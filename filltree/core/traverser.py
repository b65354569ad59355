"""Level-order traversal used by insertion.

Insertion needs two things from a walk over the tree: the nodes in
breadth-first, left-to-right order, and the first empty child slot in
that order. Both are built on the same FIFO queue.
"""

import logging
from collections import deque
from typing import Deque, Iterator, Tuple, TYPE_CHECKING

from .._common.config import Side

if TYPE_CHECKING:
    from .node import BinaryTree

logger = logging.getLogger(__name__)


class LevelOrderTraverser:
    """Breadth-first (level-order) traversal of a binary tree.

    Visits all nodes at depth N before visiting nodes at depth N+1, and
    within a level visits left before right. For a complete tree this is
    the array-index order: root at 0, children of i at 2i+1 and 2i+2.
    """

    def traverse(self, root: 'BinaryTree') -> Iterator['BinaryTree']:
        """Traverse the tree breadth-first.

        Args:
            root: Starting node for traversal

        Yields:
            Nodes in level order
        """
        queue: Deque['BinaryTree'] = deque([root])

        while queue:
            node = queue.popleft()
            yield node

            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)

    def find_open_slot(self, root: 'BinaryTree') -> Tuple['BinaryTree', Side]:
        """Find the first absent child slot in level order.

        Each dequeued node is checked left side first: an absent left
        child is the answer, otherwise the left child is queued and the
        right side is checked the same way.

        Args:
            root: Tree to search

        Returns:
            Tuple of (parent node, side) naming the slot to fill
        """
        queue: Deque['BinaryTree'] = deque([root])

        # BinaryTree._check_child refuses attachments that close a cycle,
        # so the walk reaches a leaf with a free slot before the queue empties.
        while True:
            node = queue.popleft()

            if node.left is None:
                logger.debug("Open slot: left of %r", node.value)
                return node, Side.LEFT
            queue.append(node.left)

            if node.right is None:
                logger.debug("Open slot: right of %r", node.value)
                return node, Side.RIGHT
            queue.append(node.right)


def iter_level_order(root: 'BinaryTree') -> Iterator['BinaryTree']:
    """Yield nodes of root's tree in level order."""
    return LevelOrderTraverser().traverse(root)


def find_open_slot(root: 'BinaryTree') -> Tuple['BinaryTree', Side]:
    """Return (node, side) of the next slot insertion will fill."""
    return LevelOrderTraverser().find_open_slot(root)
