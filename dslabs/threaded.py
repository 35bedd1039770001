"""Inorder-threaded binary trees with a head node."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from . import btree


@dataclass(eq=False, repr=False)
class ThreadNode:
    """A node whose empty child links are replaced by inorder threads."""

    data: str
    left: Optional[ThreadNode] = None
    right: Optional[ThreadNode] = None
    left_is_thread: bool = False
    right_is_thread: bool = False

    def __repr__(self) -> str:
        return f"ThreadNode({self.data!r})"


def _copy(node: Optional[btree.Node]) -> Optional[ThreadNode]:
    if node is None:
        return None
    return ThreadNode(node.data, _copy(node.left), _copy(node.right))


def _thread(node: Optional[ThreadNode], pre: ThreadNode) -> ThreadNode:
    if node is None:
        return pre
    pre = _thread(node.left, pre)
    if node.left is None:
        node.left = pre
        node.left_is_thread = True
    if pre.right is None:
        pre.right = node
        pre.right_is_thread = True
    return _thread(node.right, node)


class ThreadedTree:
    """An inorder-threaded binary tree built from bracket notation."""

    def __init__(self, text: str) -> None:
        self.head = ThreadNode("", right_is_thread=True)
        root = _copy(btree.parse(text))
        self.head.right = root
        if root is None:
            self.head.left = self.head
            return
        self.head.left = root
        last = _thread(root, self.head)
        last.right = self.head
        last.right_is_thread = True
        self.head.right = last
        self.head.right_is_thread = True

    @property
    def _root(self) -> Optional[ThreadNode]:
        return None if self.head.left is self.head else self.head.left

    def to_string(self) -> str:
        """Render the tree in bracket notation, ignoring threads."""

        def render(node: ThreadNode) -> str:
            left = None if node.left_is_thread else node.left
            right = None if node.right_is_thread else node.right
            if left is None and right is None:
                return node.data
            inner = render(left) if left is not None else ""
            if right is not None:
                inner += "," + render(right)
            return f"{node.data}({inner})"

        root = self._root
        return render(root) if root is not None else ""

    def inorder_recursive(self) -> list[str]:
        """Inorder sequence, recursing over real child links only."""

        def walk(node: ThreadNode) -> Iterator[str]:
            if node.left is not None and not node.left_is_thread:
                yield from walk(node.left)
            yield node.data
            if node.right is not None and not node.right_is_thread:
                yield from walk(node.right)

        root = self._root
        return list(walk(root)) if root is not None else []

    def inorder(self) -> list[str]:
        """Inorder sequence, following threads without recursion or a stack."""
        result: list[str] = []
        node = self.head.left
        while node is not self.head:
            while not node.left_is_thread:
                node = node.left
            result.append(node.data)
            while node.right_is_thread and node.right is not self.head:
                node = node.right
                result.append(node.data)
            node = node.right
        return result