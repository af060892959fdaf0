"""Binary tree nodes and traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["Node", "height", "level_order", "diagonal_traversal"]


@dataclass
class Node:
    """A binary tree node."""

    data: Any
    left: Optional[Node] = None
    right: Optional[Node] = None


def height(node: Node | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if node is None:
        return 0
    return max(height(node.left), height(node.right)) + 1


def level_order(root: Node | None) -> list[Any]:
    """Return node data level by level, left to right."""
    if root is None:
        return []
    result: list[Any] = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        result.append(node.data)
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return result


def diagonal_traversal(root: Node | None) -> list[list[Any]]:
    """Return the tree's diagonals, each a list of node data.

    A diagonal follows right children; each left child starts on the next one.
    """
    diagonals: list[list[Any]] = []
    current = [root] if root is not None else []
    while current:
        diagonal: list[Any] = []
        following: list[Node] = []
        for start in current:
            node: Node | None = start
            while node is not None:
                diagonal.append(node.data)
                if node.left is not None:
                    following.append(node.left)
                node = node.right
        diagonals.append(diagonal)
        current = following
    return diagonals