# searchtrees

Ordered key/value maps built on binary search trees.

- `searchtrees.bst.BinarySearchTree`: an unbalanced binary search tree.
- `searchtrees.avl.AVLTree`: a self-balancing AVL tree with the same interface.
- `searchtrees.printing.render_tree` and `print_tree`: draw a tree as text.
- `searchtrees.equal_paths.equal_paths`: check whether every leaf of a simple
  `PathNode` tree sits at the same depth.

Keys may be of any type that supports `<` and `>` between one another.

## Installation

```
pip install .
```

Add the `test` extra to get the test dependencies:

```
pip install ".[test]"
```

## Usage

```python
from searchtrees.avl import AVLTree
from searchtrees.bst import BinarySearchTree
from searchtrees.printing import print_tree, render_tree

tree = AVLTree()
for key, value in [("a", 1), ("b", 2), ("c", 3)]:
    tree.insert(key, value)

for key, value in tree:          # in order: ("a", 1), ("b", 2), ("c", 3)
    print(key, value)

"b" in tree                      # True
tree["b"]                        # 2; a missing key raises KeyError
tree.find("b")                   # the Node holding "b", or None if absent
tree.insert("b", 20)             # inserting an existing key replaces its value
tree.remove("b")                 # removing a missing key does nothing
tree.is_balanced()               # True
len(tree), tree.is_empty()       # (2, False)
tree.clear()                     # removes every item
```

A node with two children is removed by first swapping it with its in-order
predecessor. `BinarySearchTree.predecessor(node)` returns that predecessor for
any node, or `None` when there is none.

`BinarySearchTree` does no rebalancing, so keys inserted in sorted order give a
tree shaped like a list:

```python
plain = BinarySearchTree()
for key in range(5):
    plain.insert(key, str(key))
plain.is_balanced()              # False
```

Every node of an `AVLTree` is an `AVLNode`, whose `balance` field holds the
height of its right subtree minus that of its left.

### Drawing a tree

`render_tree(tree)` returns the tree as text: each node is drawn as a numbered
box such as `[01]`, joined to its children by box-drawing lines, and a legend
below the drawing maps each number to its `(key, value)` pair. Numbers are given
in key order. At most six levels are drawn; if the tree is deeper, a note says
that deeper levels were left out. An empty tree is drawn as `<empty tree>`.

`print_tree(tree, file=None)` writes the same text, followed by a blank line,
to `file` or to standard output.

### Equal leaf depths

```python
from searchtrees.equal_paths import PathNode, equal_paths

equal_paths(PathNode(1, PathNode(2), PathNode(3)))                     # True
equal_paths(PathNode(1, PathNode(2, None, PathNode(4)), PathNode(3)))  # False
equal_paths(None)                                                      # True
```

## Demo

```
searchtrees-demo
```

The demo fills a plain tree and an AVL tree with two items each, lists their
contents, reports whether the key `b` is found, and removes it. It takes no
options besides `--help`.