"""Binary trees: reconstruction from traversals and iterative traversals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass
class TreeNode:
    """A node of a binary tree."""

    val: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _locate(values: Sequence[int], target: int, lo: int, hi: int) -> int:
    try:
        return values.index(target, lo, hi)  # type: ignore[call-arg]
    except ValueError:
        raise ValueError(
            f"value {target!r} missing from the matching traversal"
        ) from None


def _check_lengths(first: Sequence[int], second: Sequence[int]) -> None:
    if len(first) != len(second):
        raise ValueError("traversals differ in length")


def build_from_preorder_inorder(
    preorder: Sequence[int], inorder: Sequence[int]
) -> Optional[TreeNode]:
    """Rebuild a tree from its preorder and inorder traversals."""
    preorder, inorder = list(preorder), list(inorder)
    _check_lengths(preorder, inorder)

    def build(pre_lo: int, in_lo: int, size: int) -> Optional[TreeNode]:
        if size == 0:
            return None
        root = TreeNode(preorder[pre_lo])
        if size == 1:
            return root
        pos = _locate(inorder, root.val, in_lo, in_lo + size)
        left_size = pos - in_lo
        right_size = size - 1 - left_size
        root.left = build(pre_lo + 1, in_lo, left_size)
        root.right = build(pre_lo + 1 + left_size, pos + 1, right_size)
        return root

    return build(0, 0, len(preorder))


def build_from_inorder_postorder(
    inorder: Sequence[int], postorder: Sequence[int]
) -> Optional[TreeNode]:
    """Rebuild a tree from its inorder and postorder traversals."""
    inorder, postorder = list(inorder), list(postorder)
    _check_lengths(inorder, postorder)

    def build(in_lo: int, post_lo: int, size: int) -> Optional[TreeNode]:
        if size == 0:
            return None
        root = TreeNode(postorder[post_lo + size - 1])
        if size == 1:
            return root
        pos = _locate(inorder, root.val, in_lo, in_lo + size)
        left_size = pos - in_lo
        right_size = size - 1 - left_size
        root.left = build(in_lo, post_lo, left_size)
        root.right = build(pos + 1, post_lo + left_size, right_size)
        return root

    return build(0, 0, len(inorder))


def build_from_preorder_postorder(
    preorder: Sequence[int], postorder: Sequence[int]
) -> Optional[TreeNode]:
    """Build a tree with the given preorder and postorder traversals.

    Several trees may fit; a lone child is always placed on the left.
    """
    preorder, postorder = list(preorder), list(postorder)
    _check_lengths(preorder, postorder)

    def build(pre_lo: int, post_lo: int, size: int) -> Optional[TreeNode]:
        if size == 0:
            return None
        root = TreeNode(preorder[pre_lo])
        if size == 1:
            return root
        pos = _locate(postorder, preorder[pre_lo + 1], post_lo, post_lo + size - 1)
        left_size = pos - post_lo + 1
        right_size = size - 1 - left_size
        root.left = build(pre_lo + 1, post_lo, left_size)
        root.right = build(pre_lo + 1 + left_size, pos + 1, right_size)
        return root

    return build(0, 0, len(preorder))


def preorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return node values in root, left, right order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return node values in left, root, right order."""
    result: list[int] = []
    stack: list[TreeNode] = []
    cur = root
    while cur is not None or stack:
        while cur is not None:
            stack.append(cur)
            cur = cur.left
        cur = stack.pop()
        result.append(cur.val)
        cur = cur.right
    return result


def postorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return node values in left, right, root order."""
    result: list[int] = []
    stack: list[TreeNode] = []
    cur = root
    last: Optional[TreeNode] = None
    while cur is not None or stack:
        while cur is not None:
            stack.append(cur)
            cur = cur.left
        top = stack[-1]
        if top.right is not None and last is not top.right:
            cur = top.right
        else:
            result.append(top.val)
            stack.pop()
            last = top
    return result