"""Counting measures of binary trees: nodes, leaves, levels and width."""

from __future__ import annotations

from typing import Optional

from .btree import Node


def node_count(node: Optional[Node]) -> int:
    """Number of nodes in the tree."""
    if node is None:
        return 0
    return 1 + node_count(node.left) + node_count(node.right)


def leaf_count(node: Optional[Node]) -> int:
    """Number of nodes without children."""
    if node is None:
        return 0
    if node.left is None and node.right is None:
        return 1
    return leaf_count(node.left) + leaf_count(node.right)


def _level(node: Optional[Node], x: str, h: int) -> int:
    if node is None:
        return 0
    if node.data == x:
        return h
    return _level(node.left, x, h + 1) or _level(node.right, x, h + 1)


def level(node: Optional[Node], x: str) -> int:
    """Level of the first node holding x in preorder (root is 1), or 0 if absent."""
    return _level(node, x, 1)


def width(node: Optional[Node]) -> int:
    """Largest number of nodes on any one level."""
    best = 0
    current = [node] if node is not None else []
    while current:
        best = max(best, len(current))
        current = [
            child for n in current for child in (n.left, n.right) if child is not None
        ]
    return best