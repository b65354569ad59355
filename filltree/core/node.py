"""BinaryTree node for FillTree.

A BinaryTree is one node: a value plus optional left and right subtrees.
The root node stands for the whole tree. New values are placed by a
breadth-first scan for the first free child slot, so a tree grown by
insertion is always complete: every level is full except the last,
which fills from the left.

Values are never compared to decide placement. Only slot availability
matters.
"""

import logging
from typing import Any, Iterable, Optional

from .._common.config import DEFAULT_CONFIG, Side, TreeConfig
from ..errors import EmptyInputError, ValueTypeError
from .traverser import find_open_slot, iter_level_order

logger = logging.getLogger(__name__)


class BinaryTree:
    """A binary tree node that owns its two optional children.

    Ownership is strictly downward: a node is reachable from exactly one
    parent link, or is the root. Mutating methods are not thread safe;
    callers sharing a tree across threads must hold a lock around each
    call.

    Example:
        >>> tree = BinaryTree.from_values([1, 2, 3, 4])
        >>> tree.left.left.value
        4
    """

    __slots__ = ('value', 'left', 'right', 'config')

    # Mutable container, so not hashable
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Any, config: Optional[TreeConfig] = None):
        """Create a single-node tree.

        Args:
            value: Payload stored in the node
            config: Tree configuration (default: store values as given)

        Raises:
            ValueError: If config is invalid
            ValueTypeError: If value does not match config.value_type
        """
        config = config if config is not None else DEFAULT_CONFIG
        problems = config.validate()
        if problems:
            raise ValueError(f"Invalid TreeConfig: {'; '.join(problems)}")

        self.config = config
        self.value = self._prepare(value)
        self.left: Optional['BinaryTree'] = None
        self.right: Optional['BinaryTree'] = None

    @classmethod
    def from_values(cls, values: Iterable[Any],
                    config: Optional[TreeConfig] = None) -> 'BinaryTree':
        """Build a complete tree from an ordered sequence.

        The first value becomes the root; the rest are inserted one by
        one, so they land in breadth-first order.

        Args:
            values: Values in the order they should fill the tree
            config: Tree configuration passed to every node

        Returns:
            Root of the new tree

        Raises:
            EmptyInputError: If values is empty
        """
        iterator = iter(values)
        try:
            first = next(iterator)
        except StopIteration:
            logger.debug("Refusing to build tree from empty input")
            raise EmptyInputError("Cannot build a tree from an empty sequence") from None

        root = cls(first, config)
        count = 1
        for value in iterator:
            root.insert(value)
            count += 1

        logger.debug("Built tree from %d value(s)", count)
        return root

    def insert(self, value: Any) -> None:
        """Insert value in the next available slot, breadth first.

        Exactly one new leaf is attached. Existing nodes keep their
        values and their other child. Equal values are not merged.

        Args:
            value: Payload for the new leaf

        Raises:
            ValueTypeError: If value does not match the tree's value_type
        """
        # Build the leaf first so a rejected value leaves the tree untouched
        leaf = type(self)(value, self.config)
        parent, side = find_open_slot(self)

        if side is Side.LEFT:
            parent.left = leaf
        else:
            parent.right = leaf

        logger.debug("Inserted %r as %s child of %r", leaf.value, side.value, parent.value)

    def attach_left(self, child: 'BinaryTree') -> 'BinaryTree':
        """Set the left child, replacing any existing one.

        Args:
            child: Subtree to attach

        Returns:
            self, for chaining

        Raises:
            TypeError: If child is not a BinaryTree
            ValueError: If attaching child would share or loop a node
            ValueTypeError: If child holds a value this tree rejects
        """
        self.left = self._check_child(child, Side.LEFT)
        return self

    def attach_right(self, child: 'BinaryTree') -> 'BinaryTree':
        """Set the right child, replacing any existing one.

        Args:
            child: Subtree to attach

        Returns:
            self, for chaining

        Raises:
            TypeError: If child is not a BinaryTree
            ValueError: If attaching child would share or loop a node
            ValueTypeError: If child holds a value this tree rejects
        """
        self.right = self._check_child(child, Side.RIGHT)
        return self

    def child(self, side: Side) -> Optional['BinaryTree']:
        """Return the child on the given side, or None."""
        return self.left if side is Side.LEFT else self.right

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def _prepare(self, value: Any) -> Any:
        if not self.config.accepts(value):
            logger.debug("Rejected value %r for value_type %s", value, self.config.value_type)
            raise ValueTypeError(value, self.config.value_type)
        return self.config.prepare(value)

    def _check_child(self, child: Any, side: Side) -> 'BinaryTree':
        if not isinstance(child, BinaryTree):
            raise TypeError(
                f"Child must be a BinaryTree, got {type(child).__name__}"
            )

        other = self.right if side is Side.LEFT else self.left
        if child is other:
            raise ValueError(
                f"Node {child.value!r} is already the other child of {self.value!r}"
            )

        for node in iter_level_order(child):
            if node is self:
                raise ValueError(
                    f"Attaching {child.value!r} under {self.value!r} would create a cycle"
                )
            if not self.config.accepts(node.value):
                logger.debug("Rejected subtree value %r for value_type %s",
                             node.value, self.config.value_type)
                raise ValueTypeError(node.value, self.config.value_type)

        return child

    def __len__(self) -> int:
        """Number of nodes in this tree."""
        return sum(1 for _ in iter_level_order(self))

    def __eq__(self, other: object) -> bool:
        """Trees are equal if they have the same shape and values."""
        if not isinstance(other, BinaryTree):
            return NotImplemented

        # Compare pairwise with an explicit stack to avoid deep recursion
        pending = [(self, other)]
        while pending:
            a, b = pending.pop()
            if a is b:
                continue
            if a is None or b is None:
                return False
            if a.value != b.value:
                return False
            pending.append((a.left, b.left))
            pending.append((a.right, b.right))
        return True

    def __repr__(self) -> str:
        """Detailed representation for debugging.

        Built bottom-up with an explicit stack, so deep chains made with
        the attach builders do not hit the recursion limit.
        """
        rendered = {}
        stack = [(self, False)]
        while stack:
            node, children_done = stack.pop()
            name = node.__class__.__name__
            if node.is_leaf():
                rendered[id(node)] = f"{name}(value={node.value!r})"
            elif not children_done:
                stack.append((node, True))
                stack.extend((c, False) for c in (node.left, node.right) if c is not None)
            else:
                left = rendered.pop(id(node.left)) if node.left is not None else 'None'
                right = rendered.pop(id(node.right)) if node.right is not None else 'None'
                rendered[id(node)] = (
                    f"{name}(value={node.value!r}, left={left}, right={right})"
                )
        return rendered[id(self)]
