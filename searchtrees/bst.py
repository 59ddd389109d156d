"""An unbalanced binary search tree keyed by any ordered type."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterator, Optional, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass(eq=False)
class Node(Generic[K, V]):
    """A tree node holding a key, its value and links to its neighbours."""

    key: K
    value: V
    parent: Optional["Node[K, V]"] = field(default=None, repr=False)
    left: Optional["Node[K, V]"] = field(default=None, repr=False)
    right: Optional["Node[K, V]"] = field(default=None, repr=False)

    @property
    def item(self) -> Tuple[K, V]:
        """The (key, value) pair stored in this node."""
        return (self.key, self.value)


class BinarySearchTree(Generic[K, V]):
    """A map from keys to values stored in an unbalanced binary search tree."""

    def __init__(self) -> None:
        self._root: Optional[Node[K, V]] = None

    @property
    def root(self) -> Optional[Node[K, V]]:
        """The root node, or None for an empty tree."""
        return self._root

    def insert(self, key: K, value: V) -> None:
        """Insert key with value, overwriting the value if key is present."""
        if self._root is None:
            self._root = Node(key, value)
            return
        current = self._root
        while True:
            if key < current.key:
                if current.left is None:
                    current.left = Node(key, value, parent=current)
                    return
                current = current.left
            elif key > current.key:
                if current.right is None:
                    current.right = Node(key, value, parent=current)
                    return
                current = current.right
            else:
                current.value = value
                return

    def remove(self, key: K) -> None:
        """Remove key from the tree; a missing key is ignored.

        A node with two children is first swapped with its predecessor.
        """
        node = self._internal_find(key)
        if node is None:
            return
        if node.left is not None and node.right is not None:
            self._swap_nodes(node, self._rightmost(node.left))

        child = node.left if node.left is not None else node.right
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self._root = child
        elif node is parent.left:
            parent.left = child
        else:
            parent.right = child
        node.parent = node.left = node.right = None

    def clear(self) -> None:
        """Remove every item from the tree."""
        self._root = None

    def is_balanced(self) -> bool:
        """True if every node's subtrees differ in height by at most one."""
        if self._root is None:
            return True
        heights: dict[int, int] = {}
        stack: list[tuple[Node[K, V], bool]] = [(self._root, False)]
        while stack:
            node, visited = stack.pop()
            if not visited:
                stack.append((node, True))
                for child in (node.left, node.right):
                    if child is not None:
                        stack.append((child, False))
                continue
            left = heights.pop(id(node.left), -1) if node.left else -1
            right = heights.pop(id(node.right), -1) if node.right else -1
            if abs(left - right) > 1:
                return False
            heights[id(node)] = 1 + max(left, right)
        return True

    def is_empty(self) -> bool:
        """True if the tree holds no items."""
        return self._root is None

    def find(self, key: K) -> Optional[Node[K, V]]:
        """Return the node holding key, or None if it is absent."""
        return self._internal_find(key)

    @staticmethod
    def predecessor(node: Optional[Node[K, V]]) -> Optional[Node[K, V]]:
        """Return the in-order predecessor of node, or None if it has none."""
        if node is None:
            return None
        if node.left is not None:
            return BinarySearchTree._rightmost(node.left)
        parent = node.parent
        while parent is not None and node is parent.left:
            node, parent = parent, parent.parent
        return parent

    def __iter__(self) -> Iterator[Tuple[K, V]]:
        node = self._smallest_node()
        while node is not None:
            yield node.item
            node = self._successor(node)

    def __getitem__(self, key: K) -> V:
        node = self._internal_find(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def __contains__(self, key: Any) -> bool:
        return self._internal_find(key) is not None

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def _internal_find(self, key: K) -> Optional[Node[K, V]]:
        current = self._root
        while current is not None:
            if key < current.key:
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                return current
        return None

    def _smallest_node(self) -> Optional[Node[K, V]]:
        current = self._root
        if current is None:
            return None
        while current.left is not None:
            current = current.left
        return current

    @staticmethod
    def _rightmost(node: Node[K, V]) -> Node[K, V]:
        while node.right is not None:
            node = node.right
        return node

    @staticmethod
    def _successor(node: Node[K, V]) -> Optional[Node[K, V]]:
        if node.right is not None:
            node = node.right
            while node.left is not None:
                node = node.left
            return node
        parent = node.parent
        while parent is not None and node is parent.right:
            node, parent = parent, parent.parent
        return parent

    def _swap_nodes(self, n1: Optional[Node[K, V]], n2: Optional[Node[K, V]]) -> None:
        """Exchange the positions of two nodes in the tree, keeping their items."""
        if n1 is n2 or n1 is None or n2 is None:
            return
        n1p, n1r, n1l = n1.parent, n1.right, n1.left
        n1_is_left = n1p is not None and n1 is n1p.left
        n2p, n2r, n2l = n2.parent, n2.right, n2.left
        n2_is_left = n2p is not None and n2 is n2p.left

        n1.parent, n2.parent = n2.parent, n1.parent
        n1.left, n2.left = n2.left, n1.left
        n1.right, n2.right = n2.right, n1.right

        if n1r is n2:
            n2.right = n1
            n1.parent = n2
        elif n2r is n1:
            n1.right = n2
            n2.parent = n1
        elif n1l is n2:
            n2.left = n1
            n1.parent = n2
        elif n2l is n1:
            n1.left = n2
            n2.parent = n1

        if n1p is not None and n1p is not n2:
            if n1_is_left:
                n1p.left = n2
            else:
                n1p.right = n2
        if n1r is not None and n1r is not n2:
            n1r.parent = n2
        if n1l is not None and n1l is not n2:
            n1l.parent = n2

        if n2p is not None and n2p is not n1:
            if n2_is_left:
                n2p.left = n1
            else:
                n2p.right = n1
        if n2r is not None and n2r is not n1:
            n2r.parent = n1
        if n2l is not None and n2l is not n1:
            n2l.parent = n1

        if self._root is n1:
            self._root = n2
        elif self._root is n2:
            self._root = n1