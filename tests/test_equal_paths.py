import pytest

from searchtrees.equal_paths import PathNode, equal_paths


def test_empty_tree():
    assert equal_paths(None) is True


def test_single_node():
    assert equal_paths(PathNode(1)) is True


def test_only_left_child():
    assert equal_paths(PathNode(1, PathNode(2))) is True


def test_two_leaf_children():
    assert equal_paths(PathNode(1, PathNode(2), PathNode(3))) is True


def test_only_right_child():
    assert equal_paths(PathNode(1, None, PathNode(3))) is True


def test_uneven_leaves():
    root = PathNode(1, PathNode(2, None, PathNode(4)), PathNode(3))
    assert equal_paths(root) is False


def test_long_chain_is_equal():
    root = PathNode(1)
    node = root
    for key in range(2, 30):
        node.right = PathNode(key) if key % 2 else None
        node.left = None if key % 2 else PathNode(key)
        node = node.right or node.left
    assert equal_paths(root) is True


@pytest.mark.parametrize("depth", [1, 2, 3, 4, 5])
def test_perfect_tree(depth):
    def build(level):
        if level == 0:
            return None
        return PathNode(level, build(level - 1), build(level - 1))

    assert equal_paths(build(depth)) is True


def test_deep_mismatch_detected():
    leaf_deep = PathNode(7, PathNode(8))
    root = PathNode(1, PathNode(2, leaf_deep, PathNode(5)), PathNode(3, PathNode(6, PathNode(9))))
    assert equal_paths(root) is False


def test_fields():
    left = PathNode(2)
    node = PathNode(1, left)
    assert (node.key, node.left, node.right) == (1, left, None)