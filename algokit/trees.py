"""Binary tree depth and balance, and quad trees built from grids."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class TreeNode:
    """A binary tree node."""

    value: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


@dataclass
class QuadNode:
    """A quad tree node; a leaf holds the value of its whole square."""

    val: bool
    is_leaf: bool
    top_left: Optional[QuadNode] = None
    top_right: Optional[QuadNode] = None
    bottom_left: Optional[QuadNode] = None
    bottom_right: Optional[QuadNode] = None


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    depth = 0
    level = [root] if root is not None else []
    while level:
        depth += 1
        level = [child for node in level for child in (node.left, node.right) if child is not None]
    return depth


def _balanced_height(node: Optional[TreeNode]) -> Optional[int]:
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left is None:
        return None
    right = _balanced_height(node.right)
    if right is None or abs(left - right) > 1:
        return None
    return max(left, right) + 1


def is_height_balanced(root: Optional[TreeNode]) -> bool:
    """Return True if every node's subtrees differ in height by at most one."""
    return _balanced_height(root) is not None


def _build(grid: Sequence[Sequence[int]], row: int, col: int, length: int) -> QuadNode:
    if length == 1:
        return QuadNode(grid[row][col] == 1, True)
    half = length // 2
    quarters = (
        _build(grid, row, col, half),
        _build(grid, row, col + half, half),
        _build(grid, row + half, col, half),
        _build(grid, row + half, col + half, half),
    )
    if all(q.is_leaf for q in quarters) and len({q.val for q in quarters}) == 1:
        return QuadNode(quarters[0].val, True)
    return QuadNode(True, False, *quarters)


def construct_quad_tree(grid: Sequence[Sequence[int]]) -> Optional[QuadNode]:
    """Build a quad tree for a square grid of 0s and 1s; None for an empty grid.

    Raises ValueError unless the grid is square with a power-of-two side.
    """
    size = len(grid)
    if size == 0:
        return None
    if any(len(row) != size for row in grid):
        raise ValueError("grid must be square")
    if size & (size - 1):
        raise ValueError("grid side must be a power of two")
    return _build(grid, 0, 0, size)