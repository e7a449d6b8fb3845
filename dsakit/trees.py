"""Binary trees: construction from level-order lists and traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_tree(values: Sequence[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from a level-order list where None marks a missing child."""
    if not values or values[0] is None:
        return None
    root = TreeNode(values[0])
    queue = deque([root])
    items = iter(values[1:])
    while queue:
        node = queue.popleft()
        left = next(items, None)
        if left is not None:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = next(items, None)
        if right is not None:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the values of the tree level by level, left to right."""
    result: list[list[int]] = []
    if root is None:
        return result
    queue = deque([root])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.val)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        result.append(level)
    return result


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    deepest = 0
    stack = [(root, 1)] if root is not None else []
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, depth + 1))
    return deepest