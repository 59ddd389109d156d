"""A self-balancing AVL tree built on the binary search tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TypeVar

from .bst import BinarySearchTree, Node

K = TypeVar("K")
V = TypeVar("V")


@dataclass(eq=False)
class AVLNode(Node[K, V]):
    """A tree node that also records its balance: right height minus left height."""

    balance: int = 0


class AVLTree(BinarySearchTree[K, V]):
    """A map from keys to values kept height-balanced by AVL rotations."""

    def insert(self, key: K, value: V) -> None:
        """Insert key with value, overwriting the value if key is present."""
        if self._root is None:
            self._root = AVLNode(key, value)
            return
        current = self._root
        while True:
            if key < current.key:
                if current.left is None:
                    node = AVLNode(key, value, parent=current)
                    current.left = node
                    break
                current = current.left
            elif key > current.key:
                if current.right is None:
                    node = AVLNode(key, value, parent=current)
                    current.right = node
                    break
                current = current.right
            else:
                current.value = value
                return
        self._rebalance_after_insert(current, node)

    def remove(self, key: K) -> None:
        """Remove key from the tree and rebalance; a missing key is ignored.

        A node with two children is first swapped with its predecessor.
        """
        node = self._internal_find(key)
        if node is None:
            return
        if node.left is not None and node.right is not None:
            self._swap_nodes(node, self.predecessor(node))

        child = node.left if node.left is not None else node.right
        parent = node.parent
        if child is not None:
            child.parent = parent

        diff = 0
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
            diff = 1
        else:
            parent.right = child
            diff = -1
        node.parent = node.left = node.right = None

        self._rebalance_after_remove(parent, diff)

    def _rebalance_after_insert(self, parent: Optional[AVLNode], child: AVLNode) -> None:
        while parent is not None:
            parent.balance += -1 if parent.left is child else 1

            if parent.balance == 0:
                return
            if parent.balance in (1, -1):
                child, parent = parent, parent.parent
                continue

            if parent.balance == -2:
                if child.balance == -1:
                    self._rotate_right(parent)
                    parent.balance = 0
                    child.balance = 0
                    return
                grandchild = child.right
                self._rotate_left(child)
                self._rotate_right(parent)
                if grandchild is None:
                    return
                if grandchild.balance == 0:
                    parent.balance, child.balance = 0, 0
                elif grandchild.balance == 1:
                    parent.balance, child.balance = 0, -1
                else:
                    parent.balance, child.balance = 1, 0
                grandchild.balance = 0
                return

            # parent.balance == 2
            if child.balance == 1:
                self._rotate_left(parent)
                parent.balance = 0
                child.balance = 0
                return
            grandchild = child.left
            self._rotate_right(child)
            self._rotate_left(parent)
            if grandchild is None:
                return
            if grandchild.balance == 0:
                parent.balance, child.balance = 0, 0
            elif grandchild.balance == -1:
                parent.balance, child.balance = 0, 1
            else:
                parent.balance, child.balance = -1, 0
            grandchild.balance = 0
            return

    def _rebalance_after_remove(self, node: Optional[AVLNode], diff: int) -> None:
        while node is not None:
            parent = node.parent
            parent_diff = 0
            if parent is not None:
                parent_diff = 1 if parent.left is node else -1
            node.balance += diff

            if node.balance in (1, -1):
                return
            if node.balance == 2:
                right = node.right
                right_balance = right.balance if right is not None else 0
                if right_balance >= 0:
                    self._rotate_left(node)
                    if right_balance == 0:
                        node.balance = 1
                        right.balance = -1
                        return
                    node.balance = 0
                    right.balance = 0
                else:
                    grandchild = right.left
                    grand_balance = grandchild.balance if grandchild is not None else 0
                    self._rotate_right(right)
                    self._rotate_left(node)
                    if grand_balance == 0:
                        node.balance, right.balance = 0, 0
                    elif grand_balance == -1:
                        node.balance, right.balance = 0, 1
                    else:
                        node.balance, right.balance = -1, 0
                    if grandchild is not None:
                        grandchild.balance = 0
            elif node.balance == -2:
                left = node.left
                left_balance = left.balance if left is not None else 0
                if left_balance <= 0:
                    self._rotate_right(node)
                    if left_balance == 0:
                        node.balance = -1
                        left.balance = 1
                        return
                    node.balance = 0
                    left.balance = 0
                else:
                    grandchild = left.right
                    grand_balance = grandchild.balance if grandchild is not None else 0
                    self._rotate_left(left)
                    self._rotate_right(node)
                    if grand_balance == 0:
                        node.balance, left.balance = 0, 0
                    elif grand_balance == 1:
                        node.balance, left.balance = 0, -1
                    else:
                        node.balance, left.balance = 1, 0
                    if grandchild is not None:
                        grandchild.balance = 0
            node, diff = parent, parent_diff

    def _swap_nodes(self, n1: Optional[AVLNode], n2: Optional[AVLNode]) -> None:
        """Exchange two nodes' positions along with their balances."""
        if n1 is None or n2 is None or n1 is n2:
            return
        super()._swap_nodes(n1, n2)
        n1.balance, n2.balance = n2.balance, n1.balance

    def _replace_child(self, old: AVLNode, new: AVLNode) -> None:
        parent = old.parent
        new.parent = parent
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def _rotate_right(self, x: AVLNode) -> None:
        y = x.left
        x.left = y.right
        if y.right is not None:
            y.right.parent = x
        self._replace_child(x, y)
        y.right = x
        x.parent = y

    def _rotate_left(self, x: AVLNode) -> None:
        y = x.right
        x.right = y.left
        if y.left is not None:
            y.left.parent = x
        self._replace_child(x, y)
        y.left = x
        x.parent = y