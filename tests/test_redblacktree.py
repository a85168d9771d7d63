import random

import pytest

from rbdates.mydatetime import MyDateTime
from rbdates.redblacktree import RedBlackTree, TreeNode


def _in_order(node):
    if node is None:
        return []
    return _in_order(node.left) + [node.value] + _in_order(node.right)


def _black_height(node):
    """Return the black height of a subtree, checking red-black rules on the way."""
    if node is None:
        return 1
    for child in (node.left, node.right):
        if child is not None:
            assert child.parent is node
            if node.is_red:
                assert not child.is_red
    left = _black_height(node.left)
    right = _black_height(node.right)
    assert left == right
    return left + (0 if node.is_red else 1)


def _check_tree(tree):
    if tree.root is not None:
        assert not tree.root.is_red
        assert tree.root.parent is None
    _black_height(tree.root)
    values = _in_order(tree.root)
    assert values == sorted(values)
    assert len(values) == len(set(values))
    return values


def test_empty_tree():
    tree = RedBlackTree()
    assert tree.root is None
    assert tree.find(1) is False
    assert tree.render() == ""
    assert str(tree) == ""


def test_single_value_is_black_root():
    tree = RedBlackTree()
    tree.add(5)
    assert tree.root.value == 5
    assert tree.root.is_red is False
    assert tree.render() == "|-- 5 (B)\n"


def test_new_node_is_red_by_default():
    node = TreeNode(3)
    assert node.is_red is True
    assert (node.left, node.right, node.parent) == (None, None, None)


def test_render_of_sample_ints():
    tree = RedBlackTree()
    for value in (5, 15, 7, 13):
        tree.add(value)
    assert tree.render() == (
        "|-- 7 (B)\n"
        "    |-- 15 (B)\n"
        "        |-- 13 (R)\n"
        "    |-- 5 (B)\n"
    )


def test_find_and_contains():
    tree = RedBlackTree()
    for value in (5, 15, 7, 13):
        tree.add(value)
    assert tree.find(7) is True
    assert tree.find(8) is False
    assert 13 in tree
    assert 14 not in tree


def test_duplicates_are_ignored():
    tree = RedBlackTree()
    for value in (3, 1, 3, 2, 1, 3):
        tree.add(value)
    assert _check_tree(tree) == [1, 2, 3]


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_random_inserts_keep_invariants(seed):
    rng = random.Random(seed)
    values = [rng.randrange(500) for _ in range(300)]
    tree = RedBlackTree()
    for value in values:
        tree.add(value)
        _check_tree(tree)
    assert _in_order(tree.root) == sorted(set(values))
    assert all(value in tree for value in values)


def test_ascending_inserts_stay_balanced():
    tree = RedBlackTree()
    for value in range(1000):
        tree.add(value)
    _check_tree(tree)

    def depth(node):
        return 0 if node is None else 1 + max(depth(node.left), depth(node.right))

    assert depth(tree.root) <= 20


def test_copy_is_deep_and_identical():
    tree = RedBlackTree()
    for value in (10, 4, 20, 1, 8, 30):
        tree.add(value)
    clone = tree.copy()
    assert clone.render() == tree.render()
    assert clone.root is not tree.root
    _check_tree(clone)
    clone.add(99)
    assert 99 in clone
    assert 99 not in tree


def test_copy_of_empty_tree():
    clone = RedBlackTree().copy()
    assert clone.root is None
    assert clone.render() == ""


def test_tree_of_dates():
    dates = [
        MyDateTime(19, 12, 2006, 4, 13, 23),
        MyDateTime(31, 24, 2006, 15, 44, 23),
        MyDateTime(19, 12, 1984, 15, 44, 23),
        MyDateTime(10, 10, 1000, 10, 10, 10),
        MyDateTime(1, 53, 5000, 10, 10, 10),
    ]
    tree = RedBlackTree()
    for date in dates:
        tree.add(date)
    assert _check_tree(tree) == sorted(dates)
    assert tree.find(MyDateTime(19, 12, 2006, 4, 13, 23)) is True
    assert tree.find(MyDateTime(10, 10, 2000, 10, 10, 10)) is False
    lines = tree.render().splitlines()
    assert len(lines) == len(dates)
    assert all(str(date) in tree.render() for date in dates)