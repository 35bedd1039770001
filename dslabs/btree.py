"""Binary trees of characters written in bracket notation, e.g. "A(B,C(,D))"."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass
class Node:
    """A binary tree node."""

    data: str
    left: Optional[Node] = None
    right: Optional[Node] = None


def parse(text: str) -> Optional[Node]:
    """Build a tree from bracket notation; an empty text gives None."""
    root: Optional[Node] = None
    stack: list[Node] = []
    last: Optional[Node] = None
    side = "left"
    for ch in text:
        if ch == "(":
            if last is None:
                raise ValueError("'(' without a parent node")
            stack.append(last)
            side = "left"
        elif ch == ")":
            if not stack:
                raise ValueError("unbalanced ')'")
            stack.pop()
        elif ch == ",":
            side = "right"
        else:
            last = Node(ch)
            if root is None:
                root = last
            elif not stack:
                raise ValueError(f"node {ch!r} has no parent")
            elif side == "left":
                stack[-1].left = last
            else:
                stack[-1].right = last
    if stack:
        raise ValueError("unclosed '('")
    return root


def to_string(node: Optional[Node]) -> str:
    """Render a tree in bracket notation."""
    if node is None:
        return ""
    if node.left is None and node.right is None:
        return node.data
    right = "," + to_string(node.right) if node.right is not None else ""
    return f"{node.data}({to_string(node.left)}{right})"


def find(node: Optional[Node], x: str) -> Optional[Node]:
    """Return the first node holding x in preorder, or None."""
    if node is None:
        return None
    if node.data == x:
        return node
    return find(node.left, x) or find(node.right, x)


def height(node: Optional[Node]) -> int:
    """Height of the tree; the empty tree has height 0."""
    if node is None:
        return 0
    return 1 + max(height(node.left), height(node.right))


def _preorder(node: Optional[Node]) -> Iterator[str]:
    if node is not None:
        yield node.data
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: Optional[Node]) -> Iterator[str]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.data
        yield from _inorder(node.right)


def _postorder(node: Optional[Node]) -> Iterator[str]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.data


def preorder(node: Optional[Node]) -> list[str]:
    """Preorder sequence, recursively."""
    return list(_preorder(node))


def inorder(node: Optional[Node]) -> list[str]:
    """Inorder sequence, recursively."""
    return list(_inorder(node))


def postorder(node: Optional[Node]) -> list[str]:
    """Postorder sequence, recursively."""
    return list(_postorder(node))


def preorder_iter(node: Optional[Node]) -> list[str]:
    """Preorder sequence using an explicit stack."""
    result: list[str] = []
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        result.append(current.data)
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)
    return result


def inorder_iter(node: Optional[Node]) -> list[str]:
    """Inorder sequence using an explicit stack."""
    result: list[str] = []
    stack: list[Node] = []
    current = node
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        result.append(current.data)
        current = current.right
    return result


def postorder_iter(node: Optional[Node]) -> list[str]:
    """Postorder sequence using an explicit stack."""
    result: list[str] = []
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
                result.append(top.data)
                stack.pop()
                previous = top
            else:
                current = top.right
                break
        if not stack:
            return result


def level_order(node: Optional[Node]) -> list[str]:
    """Breadth-first sequence, level by level from left to right."""
    result: list[str] = []
    queue = deque([node] if node is not None else [])
    while queue:
        current = queue.popleft()
        result.append(current.data)
        queue.extend(child for child in (current.left, current.right) if child is not None)
    return result