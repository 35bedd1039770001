"""Preorder serialization of binary trees with '#' for empty subtrees, and subtree tests."""

from __future__ import annotations

from typing import Callable, Iterator, Optional

from .btree import Node
from .strings import kmp_index


def _tokens(node: Optional[Node], label: Callable[[Node], str]) -> Iterator[str]:
    if node is None:
        yield "#"
        return
    yield label(node)
    yield from _tokens(node.left, label)
    yield from _tokens(node.right, label)


def serialize(node: Optional[Node]) -> str:
    """Preorder sequence of the tree with '#' standing for every empty subtree."""
    return "".join(_tokens(node, lambda n: n.data))


def deserialize(text: str) -> Optional[Node]:
    """Rebuild a tree from its preorder serialization; running out of text means empty."""
    chars = iter(text)

    def build() -> Optional[Node]:
        value = next(chars, None)
        if value is None or value == "#":
            return None
        left = build()
        right = build()
        return Node(value, left, right)

    return build()


def is_subtree(b1: Optional[Node], b2: Optional[Node]) -> bool:
    """True if b2 occurs in b1 as a complete subtree with the same values."""
    return kmp_index(serialize(b1), serialize(b2)) != -1


def shape_serialize(node: Optional[Node]) -> str:
    """Preorder serialization with every node written as '@', keeping only the shape."""
    return "".join(_tokens(node, lambda n: "@"))


def has_same_shape_subtree(b1: Optional[Node], b2: Optional[Node]) -> bool:
    """True if b1 has a complete subtree shaped like b2, whatever the values."""
    return kmp_index(shape_serialize(b1), shape_serialize(b2)) != -1