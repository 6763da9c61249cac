"""Root-to-leaf paths, subtree sums and structural queries on binary trees."""

from __future__ import annotations

from collections import Counter
from typing import Iterator

from dsakit.tree import TreeNode

MOD = 1_000_000_007


def _postorder(root: TreeNode | None) -> Iterator[TreeNode]:
    stack: list[tuple[TreeNode | None, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if node is None:
            continue
        if expanded:
            yield node
        else:
            stack.append((node, True))
            stack.append((node.right, False))
            stack.append((node.left, False))


def _is_leaf(node: TreeNode) -> bool:
    return node.left is None and node.right is None


def has_path_sum(root: TreeNode | None, target_sum: int) -> bool:
    """Tell whether some root-to-leaf path adds up to ``target_sum``."""
    stack = [(root, target_sum)]
    while stack:
        node, remaining = stack.pop()
        if node is None:
            continue
        if _is_leaf(node):
            if node.val == remaining:
                return True
            continue
        rest = remaining - node.val
        stack.append((node.right, rest))
        stack.append((node.left, rest))
    return False


def path_sum(root: TreeNode | None, target_sum: int) -> list[list[int]]:
    """Return every root-to-leaf path adding up to ``target_sum``, left first."""
    found: list[list[int]] = []
    stack: list[tuple[TreeNode | None, int, tuple[int, ...]]] = [
        (root, target_sum, ())
    ]
    while stack:
        node, remaining, path = stack.pop()
        if node is None:
            continue
        path = path + (node.val,)
        if _is_leaf(node) and node.val == remaining:
            found.append(list(path))
        rest = remaining - node.val
        stack.append((node.right, rest, path))
        stack.append((node.left, rest, path))
    return found


def sum_numbers(root: TreeNode | None) -> int:
    """Sum the numbers spelled by the digits along each root-to-leaf path."""
    total = 0
    stack = [(root, 0)]
    while stack:
        node, current = stack.pop()
        if node is None:
            continue
        current = current * 10 + node.val
        if _is_leaf(node):
            total += current
            continue
        stack.append((node.right, current))
        stack.append((node.left, current))
    return total


def max_product(root: TreeNode | None) -> int:
    """Return the largest product of the two sums left after cutting one edge,
    modulo 10**9 + 7; at least 1."""
    sums: dict[int, int] = {}

    def subtree(node: TreeNode | None) -> int:
        return 0 if node is None else sums[id(node)]

    for node in _postorder(root):
        sums[id(node)] = node.val + subtree(node.left) + subtree(node.right)

    total = subtree(root)
    best = max((total - part) * part for part in sums.values()) if sums else 1
    return max(best, 1) % MOD


def longest_zigzag(root: TreeNode | None) -> int:
    """Return the number of edges in the longest alternating downward path."""
    best = 0
    stack = [(root, True, 0), (root, False, 0)]
    while stack:
        node, go_left, length = stack.pop()
        if node is None:
            continue
        best = max(best, length)
        if go_left:
            stack.append((node.left, False, length + 1))
            stack.append((node.right, True, 1))
        else:
            stack.append((node.left, False, 1))
            stack.append((node.right, True, length + 1))
    return best


def find_duplicate_subtrees(root: TreeNode | None) -> list[TreeNode]:
    """Return one root for each subtree shape that occurs more than once,
    in the postorder position of its second occurrence."""
    keys: dict[int, str] = {}
    seen: Counter[str] = Counter()
    duplicates: list[TreeNode] = []

    def key(node: TreeNode | None) -> str:
        return "N" if node is None else keys[id(node)]

    for node in _postorder(root):
        text = f"{node.val},{key(node.left)},{key(node.right)}"
        keys[id(node)] = text
        seen[text] += 1
        if seen[text] == 2:
            duplicates.append(node)
    return duplicates