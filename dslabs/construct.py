"""Rebuilding binary trees from traversal sequences and printing them as indented outlines."""

from __future__ import annotations

from typing import Optional, Sequence

from .btree import Node

MAX_WIDTH = 40
INDENT = 4


def _root_position(inorder: Sequence[str], root: str) -> int:
    try:
        return inorder.index(root)
    except ValueError:
        raise ValueError(f"{root!r} does not occur in the inorder sequence") from None


def _check_lengths(seq: Sequence[str], inorder: Sequence[str]) -> None:
    if len(seq) != len(inorder):
        raise ValueError("traversal sequences differ in length")


def _pre_in(pre: Sequence[str], inorder: Sequence[str]) -> Optional[Node]:
    if not pre:
        return None
    root = pre[0]
    k = _root_position(inorder, root)
    return Node(
        root,
        _pre_in(pre[1 : k + 1], inorder[:k]),
        _pre_in(pre[k + 1 :], inorder[k + 1 :]),
    )


def _post_in(post: Sequence[str], inorder: Sequence[str]) -> Optional[Node]:
    if not post:
        return None
    root = post[-1]
    k = _root_position(inorder, root)
    return Node(
        root,
        _post_in(post[:k], inorder[:k]),
        _post_in(post[k:-1], inorder[k + 1 :]),
    )


def from_pre_in(pre: Sequence[str], inorder: Sequence[str]) -> Optional[Node]:
    """Build the tree whose preorder and inorder sequences are given."""
    _check_lengths(pre, inorder)
    return _pre_in(pre, inorder)


def from_post_in(post: Sequence[str], inorder: Sequence[str]) -> Optional[Node]:
    """Build the tree whose postorder and inorder sequences are given."""
    _check_lengths(post, inorder)
    return _post_in(post, inorder)


def indented(node: Optional[Node]) -> str:
    """Render the tree as an indented outline, one node per line.

    Each line shows the node value followed by (B) for the root, (L) for a
    left child or (R) for a right child, then a dash filler up to the
    fixed width.
    """
    lines: list[str] = []
    stack = [(node, INDENT, "B")] if node is not None else []
    while stack:
        current, indent, kind = stack.pop()
        dashes = "--" * len(range(indent + 1, MAX_WIDTH + 1, 2))
        lines.append(f"{' ' * indent}{current.data}({kind}){dashes}")
        if current.right is not None:
            stack.append((current.right, indent + INDENT, "R"))
        if current.left is not None:
            stack.append((current.left, indent + INDENT, "L"))
    return "".join(line + "\n" for line in lines)