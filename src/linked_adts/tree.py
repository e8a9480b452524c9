from __future__ import annotations

import logging
from typing import Callable, Generic, List, Optional, TypeVar

from ._common import bracketed
from .errors import MissingNodeError
from .position import Direction, Position

logger = logging.getLogger(__name__)

T = TypeVar("T")


# -----------------------------
# Binary Tree Node
# -----------------------------
class Node(Generic[T]):
    """A node in a binary tree. Each node has exactly one parent link."""

    __slots__ = ("data", "left", "right")

    def __init__(
        self,
        data: T,
        left: Optional[Node[T]] = None,
        right: Optional[Node[T]] = None,
    ) -> None:
        self.data = data
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"Node({self.data!r})"

    def __str__(self) -> str:
        return str(self.data)

    def child(self, direction: Direction) -> Optional[Node[T]]:
        if direction is Direction.LEFT:
            return self.left
        return self.right

    def set_child(self, direction: Direction, node: Optional[Node[T]]) -> None:
        if direction is Direction.LEFT:
            self.left = node
        else:
            self.right = node


# -----------------------------
# Binary Tree
# -----------------------------
class Tree(Generic[T]):
    """
    Binary tree whose nodes are addressed by Positions,
    i.e. paths of Directions starting at the root.
    """

    __slots__ = ("_root",)

    def __init__(self) -> None:
        self._root: Optional[Node[T]] = None

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Tree({self.to_string()})"

    def __len__(self) -> int:
        return self.size()

    def is_empty(self) -> bool:
        return self._root is None

    def size(self) -> int:
        def _size(node: Optional[Node[T]]) -> int:
            if node is None:
                return 0
            return 1 + _size(node.left) + _size(node.right)

        return _size(self._root)

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path, 0 if empty."""

        def _height(node: Optional[Node[T]]) -> int:
            if node is None:
                return 0
            return 1 + max(_height(node.left), _height(node.right))

        return _height(self._root)

    # -------------------------------
    # Position-addressed access
    # -------------------------------
    def get(self, pos: Position) -> T:
        """
        Returns the data at the node found by following pos from the root.
        Raises MissingNodeError if any node along the way does not exist.
        """

        def _get(node: Optional[Node[T]], index: int) -> T:
            if node is None:
                raise MissingNodeError(f"No data stored at position {pos}")
            if index == pos.size():
                return node.data
            return _get(node.child(pos.get(index)), index + 1)

        return _get(self._root, 0)

    def add_at_position(self, pos: Position, value: T) -> bool:
        """
        Adds value at the first free slot on the path towards pos.

        An empty tree always takes value as its root, whatever pos is.
        Otherwise the path is followed from the root; at the first missing
        child a new leaf is attached there and the rest of pos is ignored.
        Returns False, leaving the tree unchanged, if a node already
        exists exactly at pos.
        """
        if self._root is None:
            self._root = Node(value)
            logger.debug(f"Added {value!r} as root")
            return True

        # single path, so a loop is enough
        current = self._root
        for index in range(pos.size()):
            direction = pos.get(index)
            child = current.child(direction)
            if child is None:
                current.set_child(direction, Node(value))
                logger.debug(
                    f"Added {value!r} at depth {index + 1} towards position {pos}"
                )
                return True
            current = child
        return False

    # -------------------------------
    # Traversal
    # -------------------------------
    def inorder(self, visit: Callable[[T], None]) -> None:
        def _inorder(node: Optional[Node[T]]) -> None:
            if node:
                _inorder(node.left)
                visit(node.data)
                _inorder(node.right)

        _inorder(self._root)

    def to_list(self) -> List[T]:
        """Return all values of the tree in inorder as a list."""
        values: List[T] = []
        self.inorder(values.append)
        return values

    def to_string(self) -> str:
        return bracketed(self.to_list())
