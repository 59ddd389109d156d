"""A short demonstration of the search trees."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .avl import AVLTree
from .bst import BinarySearchTree


def _exercise(tree: BinarySearchTree, title: str) -> None:
    tree.insert("a", 1)
    tree.insert("b", 2)
    print(title)
    for key, value in tree:
        print(f"{key} {value}")
    print("Found b" if "b" in tree else "Did not find b")
    print("Erasing b")
    tree.remove("b")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Fill a plain and an AVL tree, list their contents and erase a key."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.parse_args(argv)
    _exercise(BinarySearchTree(), "Binary Search Tree contents:")
    _exercise(AVLTree(), "\nAVLTree contents:")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())