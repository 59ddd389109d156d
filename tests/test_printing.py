import io
import re

from hypothesis import given, strategies as st

from searchtrees.bst import BinarySearchTree
from searchtrees.printing import print_tree, render_tree

LEGEND_LINE = re.compile(r"^\[(\d\d)\] -> \((.*), (.*)\)$")


def _tree(pairs):
    tree = BinarySearchTree()
    for key, value in pairs:
        tree.insert(key, value)
    return tree


def _legend(text):
    lines = text.split("Tree Placeholders:------------------\n", 1)[1].splitlines()
    return [LEGEND_LINE.match(line).groups() for line in lines]


def test_empty_tree():
    assert render_tree(BinarySearchTree()) == "<empty tree>\n"


def test_single_node():
    tree = _tree([("a", 1)])
    assert render_tree(tree) == (
        "[01]\n\nTree Placeholders:------------------\n[01] -> (a, 1)\n"
    )


def test_legend_in_key_order():
    tree = _tree([("m", 1), ("c", 2), ("x", 3), ("a", 4)])
    legend = _legend(render_tree(tree))
    assert [key for _, key, _ in legend] == ["a", "c", "m", "x"]
    assert [int(num) for num, _, _ in legend] == [1, 2, 3, 4]
    assert [value for _, _, value in legend] == ["4", "2", "1", "3"]


def test_boxes_drawn_for_every_node():
    tree = _tree([(k, k * 10) for k in (4, 2, 6, 1, 3, 5, 7)])
    drawing = render_tree(tree).split("Tree Placeholders")[0]
    for number in range(1, 8):
        assert drawing.count(f"[{number:02d}]") == 1


def test_branch_characters_present():
    tree = _tree([(2, "b"), (1, "a"), (3, "c")])
    drawing = render_tree(tree)
    assert "\u250c" in drawing and "\u2518" in drawing
    assert "\u2514" in drawing and "\u2510" in drawing


def test_deep_tree_is_clipped():
    tree = _tree([(k, k) for k in range(10)])
    text = render_tree(tree)
    assert "(deeper levels omitted due to space limitations)\n" in text
    assert len(_legend(text)) == 6


def test_tree_of_max_height_not_clipped():
    tree = _tree([(k, k) for k in range(6)])
    text = render_tree(tree)
    assert "omitted" not in text
    assert len(_legend(text)) == 6


def test_print_tree_appends_newline():
    tree = _tree([("a", 1), ("b", 2)])
    buffer = io.StringIO()
    print_tree(tree, buffer)
    assert buffer.getvalue() == render_tree(tree) + "\n"


def test_print_tree_empty_to_stream():
    buffer = io.StringIO()
    print_tree(BinarySearchTree(), file=buffer)
    assert buffer.getvalue() == "<empty tree>\n\n"


@given(st.lists(st.integers(-50, 50), max_size=6, unique=True))
def test_legend_matches_contents(keys):
    tree = _tree([(k, -k) for k in keys])
    text = render_tree(tree)
    if not keys:
        assert text == "<empty tree>\n"
        return
    legend = _legend(text)
    assert [(int(k), int(v)) for _, k, v in legend] == list(tree)
    assert [int(n) for n, _, _ in legend] == list(range(1, len(keys) + 1))