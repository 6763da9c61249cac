import random
import re

import pytest

from dsakit.tree import (
    TreeNode,
    build_tree,
    build_tree_from_postorder,
    from_level_order,
    tree_to_str,
)


def _preorder(node):
    if node is None:
        return []
    return [node.val] + _preorder(node.left) + _preorder(node.right)


def _inorder(node):
    if node is None:
        return []
    return _inorder(node.left) + [node.val] + _inorder(node.right)


def _postorder(node):
    if node is None:
        return []
    return _postorder(node.left) + _postorder(node.right) + [node.val]


def _random_tree(rng, values):
    if not values:
        return None
    i = rng.randrange(len(values))
    return TreeNode(
        values[i],
        _random_tree(rng, values[:i]),
        _random_tree(rng, values[i + 1:]),
    )


def _make_tree(seed, size):
    rng = random.Random(seed)
    values = rng.sample(range(-500, 500), size)
    return _random_tree(rng, values)


def test_from_level_order_empty():
    assert from_level_order([]) is None
    assert from_level_order([None, 1]) is None


def test_from_level_order_shape():
    root = from_level_order([1, 2, 3, None, 4])
    assert root.val == 1
    assert root.left.val == 2
    assert root.right.val == 3
    assert root.left.left is None
    assert root.left.right.val == 4
    assert _preorder(root) == [1, 2, 4, 3]


def test_build_tree_example():
    expected = from_level_order([3, 9, 20, None, None, 15, 7])
    assert build_tree([3, 9, 20, 15, 7], [9, 3, 15, 20, 7]) == expected


def test_build_tree_from_postorder_example():
    expected = from_level_order([3, 9, 20, None, None, 15, 7])
    result = build_tree_from_postorder([9, 3, 15, 20, 7], [9, 15, 7, 20, 3])
    assert result == expected


def test_build_empty():
    assert build_tree([], []) is None
    assert build_tree_from_postorder([], []) is None


@pytest.mark.parametrize("seed", range(8))
def test_build_tree_round_trip(seed):
    tree = _make_tree(seed, 25)
    rebuilt = build_tree(_preorder(tree), _inorder(tree))
    assert rebuilt == tree


@pytest.mark.parametrize("seed", range(8))
def test_build_from_postorder_round_trip(seed):
    tree = _make_tree(seed, 25)
    rebuilt = build_tree_from_postorder(_inorder(tree), _postorder(tree))
    assert rebuilt == tree


def test_build_rejects_length_mismatch():
    with pytest.raises(ValueError):
        build_tree([1, 2], [1])
    with pytest.raises(ValueError):
        build_tree_from_postorder([1], [1, 2])


def test_build_rejects_duplicates_and_foreign_values():
    with pytest.raises(ValueError):
        build_tree([1, 1], [1, 1])
    with pytest.raises(ValueError):
        build_tree([1, 2], [1, 3])


def test_tree_to_str_examples():
    assert tree_to_str(from_level_order([1, 2, 3, 4])) == "1(2(4))(3)"
    assert tree_to_str(from_level_order([1, 2, 3, None, 4])) == "1(2()(4))(3)"


def test_tree_to_str_empty_and_leaf():
    assert tree_to_str(None) == ""
    assert tree_to_str(TreeNode(7)) == "7"


@pytest.mark.parametrize("seed", range(6))
def test_tree_to_str_lists_values_in_preorder(seed):
    tree = _make_tree(seed, 20)
    text = tree_to_str(tree)
    assert [int(v) for v in re.findall(r"-?\d+", text)] == _preorder(tree)
    assert text.count("(") == text.count(")")