"""Expression trees for single-digit arithmetic with + - * /."""

from __future__ import annotations

from typing import Optional

from .btree import Node

_DIGITS = "0123456789"


def _last_of(text: str, operators: str) -> int:
    return max(text.rfind(op) for op in operators)


def _build(text: str) -> Optional[Node]:
    if not text:
        return None
    if len(text) == 1:
        return Node(text)
    pos = _last_of(text, "+-")
    if pos < 0:
        pos = _last_of(text, "*/")
    if pos < 0:
        raise ValueError(f"no operator in {text!r}")
    return Node(text[pos], _build(text[:pos]), _build(text[pos + 1 :]))


def build(expr: str) -> Node:
    """Build the tree of an expression; operators of one precedence group left to right.

    A missing operand is left empty and counts as zero, so "-1" means 0 - 1.
    """
    if not expr:
        raise ValueError("empty expression")
    return _build(expr)


def evaluate(node: Optional[Node]) -> float:
    """Value of an expression tree; an empty tree is worth zero."""
    if node is None:
        return 0.0
    if node.left is None and node.right is None:
        if len(node.data) != 1 or node.data not in _DIGITS:
            raise ValueError(f"{node.data!r} is not a digit")
        return float(int(node.data))
    a = evaluate(node.left)
    b = evaluate(node.right)
    op = node.data
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if op == "/":
        if b == 0:
            raise ZeroDivisionError("division by zero")
        return a / b
    raise ValueError(f"unknown operator {op!r}")