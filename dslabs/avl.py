"""AVL trees with insertion, removal of the smallest and largest key, and an operation driver."""

from __future__ import annotations

from typing import Iterable, Iterator, NamedTuple, Optional, Sequence

DELETE_MIN = -1
DELETE_MAX = -2


class _Node:
    __slots__ = ("key", "ht", "left", "right")

    def __init__(self, key: int) -> None:
        self.key = key
        self.ht = 1
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None


def _ht(node: Optional[_Node]) -> int:
    return node.ht if node is not None else 0


def _refresh(node: _Node) -> None:
    node.ht = max(_ht(node.left), _ht(node.right)) + 1


def _rotate_right(a: _Node) -> _Node:
    b = a.left
    assert b is not None
    a.left = b.right
    b.right = a
    _refresh(a)
    _refresh(b)
    return b


def _rotate_left(a: _Node) -> _Node:
    b = a.right
    assert b is not None
    a.right = b.left
    b.left = a
    _refresh(a)
    _refresh(b)
    return b


def _insert(node: Optional[_Node], k: int) -> _Node:
    if node is None:
        return _Node(k)
    if k == node.key:
        return node
    if k < node.key:
        node.left = _insert(node.left, k)
        if _ht(node.left) - _ht(node.right) >= 2:
            assert node.left is not None
            if k < node.left.key:
                node = _rotate_right(node)
            else:
                node.left = _rotate_left(node.left)
                node = _rotate_right(node)
    else:
        node.right = _insert(node.right, k)
        if _ht(node.right) - _ht(node.left) >= 2:
            assert node.right is not None
            if k > node.right.key:
                node = _rotate_left(node)
            else:
                node.right = _rotate_right(node.right)
                node = _rotate_left(node)
    _refresh(node)
    return node


class AVLTree:
    """A height-balanced search tree of distinct integer keys.

    Removing the smallest or largest key unlinks that node directly and does
    not rebalance the tree or update stored heights.
    """

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self.root: Optional[_Node] = None
        for k in keys:
            self.insert(k)

    def insert(self, k: int) -> None:
        """Insert k, rebalancing on the way up; a key already present is ignored."""
        self.root = _insert(self.root, k)

    def delete_min(self) -> int:
        """Remove and return the smallest key."""
        if self.root is None:
            raise ValueError("the tree is empty")
        parent: Optional[_Node] = None
        node = self.root
        while node.left is not None:
            parent, node = node, node.left
        if parent is None:
            self.root = node.right
        else:
            parent.left = node.right
        return node.key

    def delete_max(self) -> int:
        """Remove and return the largest key."""
        if self.root is None:
            raise ValueError("the tree is empty")
        parent: Optional[_Node] = None
        node = self.root
        while node.right is not None:
            parent, node = node, node.right
        if parent is None:
            self.root = node.left
        else:
            parent.right = node.left
        return node.key

    def height(self) -> int:
        """Stored height of the root, 0 for an empty tree."""
        return _ht(self.root)

    def __iter__(self) -> Iterator[int]:
        """Yield the keys in increasing order."""
        stack: list[_Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right


class Step(NamedTuple):
    """One processed operation and the keys left afterwards."""

    action: str
    key: int
    keys: list[int]


def process(ops: Sequence[int]) -> list[Step]:
    """Run a sequence of operations: -1 removes the smallest, -2 the largest, others insert."""
    tree = AVLTree()
    steps: list[Step] = []
    for op in ops:
        if op == DELETE_MIN:
            steps.append(Step("delete_min", tree.delete_min(), list(tree)))
        elif op == DELETE_MAX:
            steps.append(Step("delete_max", tree.delete_max(), list(tree)))
        else:
            tree.insert(op)
            steps.append(Step("insert", op, list(tree)))
    return steps