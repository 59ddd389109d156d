"""Draw a binary search tree as ASCII-art boxes with a placeholder legend."""

from __future__ import annotations

import sys
from typing import Any, Dict, List, Optional, TextIO

from .bst import BinarySearchTree, Node

MAX_HEIGHT = 6
"""Deepest level of the tree that is drawn."""

_BOX_WIDTH = 4
_PADDING = 2
_ELEMENT_WIDTH = _BOX_WIDTH + _PADDING

_EMPTY = "<empty tree>\n"
_CLIPPED = "(deeper levels omitted due to space limitations)\n"
_LEGEND_HEADER = "Tree Placeholders:------------------\n"


def _subtree_height(node: Optional[Node], depth: int, limit: int) -> int:
    if node is None or depth > limit:
        return 0
    return 1 + max(
        _subtree_height(node.left, depth + 1, limit),
        _subtree_height(node.right, depth + 1, limit),
    )


def _placeholders(root: Node) -> Dict[Any, int]:
    """Number the keys of the drawn levels in sorted order, starting at 1."""
    numbers: Dict[Any, int] = {}

    def visit(node: Optional[Node], depth: int) -> None:
        if node is None or depth > MAX_HEIGHT:
            return
        visit(node.left, depth + 1)
        numbers[node.key] = (len(numbers) + 1) % 256
        visit(node.right, depth + 1)

    visit(root, 1)
    return numbers


def _branch(present: bool, opening: str, closing: str, padding: int) -> str:
    if not present:
        return " " * (padding // 2 + 3)
    return opening + "\u2500" * (padding // 2 - 1) + closing + "  "


def render_tree(tree: BinarySearchTree) -> str:
    """Return the drawing of tree, up to MAX_HEIGHT levels, with its legend."""
    root = tree.root
    if root is None:
        return _EMPTY

    height = _subtree_height(root, 1, MAX_HEIGHT + 1)
    clipped = height > MAX_HEIGHT
    height = min(height, MAX_HEIGHT)

    final_row_width = _ELEMENT_WIDTH * 2 ** (height - 1) - _PADDING
    margin = final_row_width // 2 - _BOX_WIDTH // 2
    padding = final_row_width - 2
    numbers = _placeholders(root)

    out: List[str] = []
    row: List[Optional[Node]] = [root]
    for level in range(height):
        boxes = (
            "    " if node is None else f"[{numbers[node.key]:02d}]" for node in row
        )
        out.append(" " * margin + (" " * padding).join(boxes) + "\n")

        padding = (padding - _BOX_WIDTH) // 2
        margin -= padding // 2 + 2

        previous = row
        row = [
            child
            for node in previous
            for child in ((None, None) if node is None else (node.left, node.right))
        ]

        if level < height - 1:
            line = [" " * (margin + 2)]
            for node in previous:
                line.append(
                    _branch(node is not None and node.left is not None, "\u250c", "\u2518", padding)
                )
                line.append(
                    _branch(node is not None and node.right is not None, "\u2514", "\u2510", padding)
                )
                line.append(" " * (padding + 2))
            out.append("".join(line) + "\n")

    out.append("\n")
    if clipped:
        out.append(_CLIPPED)

    out.append(_LEGEND_HEADER)
    for key, number in numbers.items():
        found = tree.find(key)
        shown = "<error: lookup failed>" if found is None else str(found.value)
        out.append(f"[{number:02d}] -> ({key}, {shown})\n")
    return "".join(out)


def print_tree(tree: BinarySearchTree, file: Optional[TextIO] = None) -> None:
    """Write the drawing of tree followed by a blank line to file (stdout by default)."""
    stream = sys.stdout if file is None else file
    stream.write(render_tree(tree))
    stream.write("\n")