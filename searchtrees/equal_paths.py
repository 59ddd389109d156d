"""Check whether every leaf of a binary tree lies at the same depth."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class PathNode:
    """A plain binary tree node with an integer key."""

    key: int
    left: Optional["PathNode"] = None
    right: Optional["PathNode"] = None


def _leaf_height(node: Optional[PathNode]) -> Optional[int]:
    """Height of node if all its leaves share one depth, otherwise None."""
    if node is None:
        return 0
    left = _leaf_height(node.left)
    right = _leaf_height(node.right)
    if left is None or right is None:
        return None
    if node.left is not None and node.right is not None and left != right:
        return None
    return max(left, right) + 1


def equal_paths(root: Optional[PathNode]) -> bool:
    """True if all paths from the root to a leaf have the same length."""
    return _leaf_height(root) is not None