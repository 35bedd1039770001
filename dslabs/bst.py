"""Binary search trees: building, insertion, deletion, search paths and analysis."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence


@dataclass(eq=False)
class BSTNode:
    """A node of a binary search tree."""

    key: int
    left: Optional[BSTNode] = None
    right: Optional[BSTNode] = None


def _remove_max(node: BSTNode) -> tuple[int, Optional[BSTNode]]:
    if node.right is None:
        return node.key, node.left
    key, node.right = _remove_max(node.right)
    return key, node


def _delete(node: Optional[BSTNode], k: int) -> tuple[Optional[BSTNode], bool]:
    if node is None:
        return None, False
    if k < node.key:
        node.left, done = _delete(node.left, k)
        return node, done
    if k > node.key:
        node.right, done = _delete(node.right, k)
        return node, done
    if node.right is None:
        return node.left, True
    if node.left is None:
        return node.right, True
    node.key, node.left = _remove_max(node.left)
    return node, True


def _render(node: Optional[BSTNode]) -> str:
    if node is None:
        return ""
    if node.left is None and node.right is None:
        return str(node.key)
    inner = _render(node.left)
    if node.right is not None:
        inner += "," + _render(node.right)
    return f"{node.key}({inner})"


class BST:
    """A binary search tree of distinct integer keys."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self.root: Optional[BSTNode] = None
        for k in keys:
            if not self.insert(k):
                raise ValueError(f"duplicate key {k}")

    @classmethod
    def from_sorted(cls, keys: Sequence[int]) -> BST:
        """Build a balanced tree from sorted keys by always taking the middle one."""
        seq = list(keys)

        def build(start: int, end: int) -> Optional[BSTNode]:
            if end < start:
                return None
            mid = (start + end) // 2
            return BSTNode(seq[mid], build(start, mid - 1), build(mid + 1, end))

        tree = cls()
        tree.root = build(0, len(seq) - 1)
        return tree

    def insert(self, k: int) -> bool:
        """Insert k as a leaf; False if it is already present."""
        if self.root is None:
            self.root = BSTNode(k)
            return True
        node = self.root
        while True:
            if k == node.key:
                return False
            if k < node.key:
                if node.left is None:
                    node.left = BSTNode(k)
                    return True
                node = node.left
            else:
                if node.right is None:
                    node.right = BSTNode(k)
                    return True
                node = node.right

    def delete(self, k: int) -> bool:
        """Remove k; a node with two children takes its inorder predecessor's key."""
        self.root, done = _delete(self.root, k)
        return done

    def search_path(self, k: int) -> Optional[list[int]]:
        """Keys from the root down to k, or None if k is absent."""
        path: list[int] = []
        node = self.root
        while node is not None:
            path.append(node.key)
            if k == node.key:
                return path
            node = node.left if k < node.key else node.right
        return None

    def to_string(self) -> str:
        """Render the tree in bracket notation."""
        return _render(self.root)

    def __iter__(self) -> Iterator[int]:
        """Yield the keys in inorder."""
        stack: list[BSTNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def is_valid(self) -> bool:
        """True if the inorder keys are strictly increasing."""
        previous: Optional[int] = None
        for key in self:
            if previous is not None and previous >= key:
                return False
            previous = key
        return True

    def _levels(self) -> tuple[list[int], list[int]]:
        internal: list[int] = []
        external: list[int] = []

        def walk(node: Optional[BSTNode], level: int) -> None:
            if node is None:
                external.append(level - 1)
                return
            internal.append(level)
            walk(node.left, level + 1)
            walk(node.right, level + 1)

        walk(self.root, 1)
        return internal, external

    def asl_success(self) -> float:
        """Average comparisons of a successful search."""
        internal, _ = self._levels()
        if not internal:
            raise ValueError("the tree is empty")
        return sum(internal) / len(internal)

    def asl_failure(self) -> float:
        """Average comparisons of an unsuccessful search."""
        _, external = self._levels()
        return sum(external) / len(external)

    def is_search_sequence(self, seq: Sequence[int]) -> bool:
        """True if seq is the sequence of keys compared when searching for its last key."""
        keys = list(seq)
        n = len(keys)
        node = self.root
        i = 0
        while i < n and node is not None:
            if i == n - 1 and keys[i] == node.key:
                return True
            if node.key != keys[i]:
                return False
            i += 1
            if keys[i] < node.key:
                node = node.left
            elif keys[i] > node.key:
                node = node.right
        return False

    def lca(self, x: int, y: int) -> Optional[int]:
        """Key of the lowest node where the searches for x and y part, or None for an empty tree."""
        node = self.root
        while node is not None:
            if x < node.key and y < node.key:
                node = node.left
            elif x > node.key and y > node.key:
                node = node.right
            else:
                return node.key
        return None