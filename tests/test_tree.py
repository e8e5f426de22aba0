import random

import pytest

from algodrills.tree import (
    TreeNode,
    build_from_inorder_postorder,
    build_from_preorder_inorder,
    build_from_preorder_postorder,
    inorder_traversal,
    postorder_traversal,
    preorder_traversal,
)


def _random_tree(rng, values):
    """Insert values into a binary search tree in the given order."""
    root = None
    for value in values:
        node = TreeNode(value)
        if root is None:
            root = node
            continue
        cur = root
        while True:
            if value < cur.val:
                if cur.left is None:
                    cur.left = node
                    break
                cur = cur.left
            else:
                if cur.right is None:
                    cur.right = node
                    break
                cur = cur.right
    return root


def _trees():
    rng = random.Random(1234)
    trees = []
    for size in (1, 2, 3, 7, 30, 60):
        values = rng.sample(range(1000), size)
        trees.append(_random_tree(rng, values))
    return trees


SAMPLE = TreeNode(3, TreeNode(9), TreeNode(20, TreeNode(15), TreeNode(7)))


def test_sample_traversals():
    assert preorder_traversal(SAMPLE) == [3, 9, 20, 15, 7]
    assert inorder_traversal(SAMPLE) == [9, 3, 15, 20, 7]
    assert postorder_traversal(SAMPLE) == [9, 15, 7, 20, 3]


def test_empty_tree():
    assert preorder_traversal(None) == []
    assert inorder_traversal(None) == []
    assert postorder_traversal(None) == []
    assert build_from_preorder_inorder([], []) is None
    assert build_from_inorder_postorder([], []) is None
    assert build_from_preorder_postorder([], []) is None


@pytest.mark.parametrize("root", _trees())
def test_bst_inorder_is_sorted(root):
    values = inorder_traversal(root)
    assert values == sorted(values)
    assert sorted(preorder_traversal(root)) == values
    assert sorted(postorder_traversal(root)) == values


@pytest.mark.parametrize("root", _trees())
def test_root_positions(root):
    assert preorder_traversal(root)[0] == root.val
    assert postorder_traversal(root)[-1] == root.val


@pytest.mark.parametrize("root", _trees())
def test_rebuild_from_preorder_inorder(root):
    rebuilt = build_from_preorder_inorder(
        preorder_traversal(root), inorder_traversal(root)
    )
    assert rebuilt == root


@pytest.mark.parametrize("root", _trees())
def test_rebuild_from_inorder_postorder(root):
    rebuilt = build_from_inorder_postorder(
        inorder_traversal(root), postorder_traversal(root)
    )
    assert rebuilt == root


@pytest.mark.parametrize("root", _trees())
def test_rebuild_from_preorder_postorder(root):
    pre = preorder_traversal(root)
    post = postorder_traversal(root)
    rebuilt = build_from_preorder_postorder(pre, post)
    assert preorder_traversal(rebuilt) == pre
    assert postorder_traversal(rebuilt) == post


def test_preorder_postorder_lone_child_goes_left():
    rebuilt = build_from_preorder_postorder([1, 2], [2, 1])
    assert rebuilt == TreeNode(1, TreeNode(2))


def test_sample_rebuilt():
    assert build_from_preorder_inorder([3, 9, 20, 15, 7], [9, 3, 15, 20, 7]) == SAMPLE
    assert build_from_inorder_postorder([9, 3, 15, 20, 7], [9, 15, 7, 20, 3]) == SAMPLE


def test_missing_value_raises():
    with pytest.raises(ValueError):
        build_from_preorder_inorder([1, 2], [2, 3])
    with pytest.raises(ValueError):
        build_from_inorder_postorder([2, 3], [2, 1])
    with pytest.raises(ValueError):
        build_from_preorder_postorder([1, 2], [3, 1])


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        build_from_preorder_inorder([1, 2], [1])
    with pytest.raises(ValueError):
        build_from_inorder_postorder([1], [1, 2])
    with pytest.raises(ValueError):
        build_from_preorder_postorder([1, 2, 3], [1, 2])