"""Paths from every leaf of a binary tree back to its root."""

from __future__ import annotations

from typing import Optional

from .btree import Node


def _is_leaf(node: Node) -> bool:
    return node.left is None and node.right is None


def leaf_paths_preorder(node: Optional[Node]) -> list[list[str]]:
    """Leaf-to-root paths, found by a recursive preorder walk."""
    result: list[list[str]] = []

    def walk(current: Optional[Node], ancestors: list[str]) -> None:
        if current is None:
            return
        if _is_leaf(current):
            result.append([current.data, *reversed(ancestors)])
            return
        ancestors.append(current.data)
        walk(current.left, ancestors)
        walk(current.right, ancestors)
        ancestors.pop()

    walk(node, [])
    return result


def longest_path(node: Optional[Node]) -> list[str]:
    """The first longest leaf-to-root path met in preorder."""
    best: list[str] = []

    def walk(current: Optional[Node], path: list[str]) -> None:
        nonlocal best
        if current is None:
            if len(path) > len(best):
                best = list(path)
            return
        path.append(current.data)
        walk(current.left, path)
        walk(current.right, path)
        path.pop()

    walk(node, [])
    return best[::-1]


def leaf_paths_postorder(node: Optional[Node]) -> list[list[str]]:
    """Leaf-to-root paths, read off the stack of an iterative postorder walk."""
    result: list[list[str]] = []
    stack: list[Node] = []
    current = node
    while True:
        while current is not None:
            stack.append(current)
            current = current.left
        previous: Optional[Node] = None
        while stack:
            top = stack[-1]
            if top.right is previous:
                if _is_leaf(top):
                    result.append([n.data for n in reversed(stack)])
                stack.pop()
                previous = top
            else:
                current = top.right
                break
        if not stack:
            return result


def leaf_paths_level(node: Optional[Node]) -> list[list[str]]:
    """Leaf-to-root paths, in breadth-first order of the leaves."""
    if node is None:
        return []
    entries: list[tuple[Node, int]] = [(node, -1)]
    result: list[list[str]] = []
    front = 0
    while front < len(entries):
        current, _ = entries[front]
        if _is_leaf(current):
            path = []
            position = front
            while position != -1:
                path.append(entries[position][0].data)
                position = entries[position][1]
            result.append(path)
        entries.extend(
            (child, front) for child in (current.left, current.right) if child is not None
        )
        front += 1
    return result