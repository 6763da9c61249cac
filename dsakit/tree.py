"""Binary tree nodes, construction from traversals and string form."""

from __future__ import annotations

from collections import Counter, deque
from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def from_level_order(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from a level-order listing where ``None`` marks a gap."""
    items = list(values)
    if not items or items[0] is None:
        return None

    root = TreeNode(items[0])
    queue = deque([root])
    rest = iter(items[1:])
    end = object()
    while queue:
        node = queue.popleft()
        left = next(rest, end)
        if left is end:
            break
        if left is not None:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = next(rest, end)
        if right is end:
            break
        if right is not None:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def _inorder_positions(
    traversal: Sequence[int], inorder: Sequence[int]
) -> dict[int, int]:
    if len(traversal) != len(inorder):
        raise ValueError("traversals must have the same length")
    positions = {value: i for i, value in enumerate(inorder)}
    if len(positions) != len(inorder):
        raise ValueError("tree values must be distinct")
    if Counter(traversal) != Counter(inorder):
        raise ValueError("traversals must hold the same values")
    return positions


def build_tree(
    preorder: Sequence[int], inorder: Sequence[int]
) -> TreeNode | None:
    """Rebuild a tree of distinct values from its preorder and inorder walks."""
    positions = _inorder_positions(preorder, inorder)
    upcoming = iter(preorder)

    def build(low: int, high: int) -> TreeNode | None:
        if low > high:
            return None
        node = TreeNode(next(upcoming))
        middle = positions[node.val]
        node.left = build(low, middle - 1)
        node.right = build(middle + 1, high)
        return node

    return build(0, len(inorder) - 1)


def build_tree_from_postorder(
    inorder: Sequence[int], postorder: Sequence[int]
) -> TreeNode | None:
    """Rebuild a tree of distinct values from its inorder and postorder walks."""
    positions = _inorder_positions(postorder, inorder)
    upcoming = iter(reversed(postorder))

    def build(low: int, high: int) -> TreeNode | None:
        if low > high:
            return None
        node = TreeNode(next(upcoming))
        middle = positions[node.val]
        # Read backwards, postorder visits the root, then right, then left.
        node.right = build(middle + 1, high)
        node.left = build(low, middle - 1)
        return node

    return build(0, len(inorder) - 1)


def tree_to_str(root: TreeNode | None) -> str:
    """Render a tree in preorder with parenthesised children.

    An empty left child is written as ``()`` only when a right child follows.
    """
    if root is None:
        return ""
    text = str(root.val)
    if root.left is None and root.right is None:
        return text
    text += f"({tree_to_str(root.left)})"
    if root.right is not None:
        text += f"({tree_to_str(root.right)})"
    return text