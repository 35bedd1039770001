"""Organisation trees read from parent/child records, with unit, class and student counts."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional, Sequence, Union

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class OrgNode:
    """A unit of the organisation; leaves hold head counts as text."""

    data: str
    sons: list[OrgNode] = field(default_factory=list)


def read_records(path: Union[str, Path]) -> list[tuple[str, str]]:
    """Read whitespace-separated (parent, child) pairs from a text file."""
    tokens = Path(path).read_text(encoding="utf-8").split()
    if len(tokens) % 2:
        raise ValueError("the record file holds an odd number of fields")
    return list(zip(tokens[::2], tokens[1::2]))


def build_tree(root: str, records: Sequence[tuple[str, str]]) -> OrgNode:
    """Build the tree below root, children in record order."""
    return OrgNode(
        root,
        [build_tree(child, records) for parent, child in records if parent == root],
    )


def to_string(node: Optional[OrgNode]) -> str:
    """Render the tree in bracket notation."""
    if node is None:
        return ""
    if not node.sons:
        return node.data
    return f"{node.data}({','.join(to_string(son) for son in node.sons)})"


def find(node: Optional[OrgNode], name: str) -> Optional[OrgNode]:
    """Return the first node named name in preorder, or None."""
    if node is None:
        return None
    if node.data == name:
        return node
    return next((hit for son in node.sons if (hit := find(son, name)) is not None), None)


def _leaves(node: OrgNode) -> Iterator[OrgNode]:
    if not node.sons:
        yield node
    else:
        for son in node.sons:
            yield from _leaves(son)


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def child_count(node: Optional[OrgNode], name: str) -> int:
    """Number of direct sub-units of the named unit, 0 if it does not exist."""
    target = find(node, name)
    return len(target.sons) if target is not None else 0


def class_count(node: Optional[OrgNode], name: str) -> int:
    """Number of leaves below the named unit, 0 if it does not exist."""
    target = find(node, name)
    return sum(1 for _ in _leaves(target)) if target is not None else 0


def student_count(node: Optional[OrgNode], name: str) -> int:
    """Sum of the head counts in the leaves below the named unit, 0 if it does not exist."""
    target = find(node, name)
    return sum(_atoi(leaf.data) for leaf in _leaves(target)) if target is not None else 0