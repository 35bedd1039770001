"""Huffman trees and codes built from symbol weights."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass
class HuffmanNode:
    """A node of a Huffman tree stored in a list; links are list indices, -1 for none."""

    weight: int
    label: Optional[str] = None
    parent: int = -1
    left: int = -1
    right: int = -1


def build_huffman(weights: Mapping[str, int]) -> list[HuffmanNode]:
    """Build the Huffman tree: the n leaves first, then n-1 merged nodes, the root last."""
    if not weights:
        raise ValueError("at least one symbol is needed")
    nodes = [HuffmanNode(weight, label) for label, weight in weights.items()]
    n = len(nodes)
    for i in range(n, 2 * n - 1):
        first: Optional[int] = None
        second: Optional[int] = None
        for k in range(i):
            if nodes[k].parent != -1:
                continue
            weight = nodes[k].weight
            if first is None or weight < nodes[first].weight:
                second, first = first, k
            elif second is None or weight < nodes[second].weight:
                second = k
        assert first is not None and second is not None
        nodes[first].parent = nodes[second].parent = i
        nodes.append(
            HuffmanNode(
                nodes[first].weight + nodes[second].weight, left=first, right=second
            )
        )
    return nodes


def huffman_codes(weights: Mapping[str, int]) -> dict[str, str]:
    """Map every symbol to its Huffman code; left branches are '0', right ones '1'."""
    nodes = build_huffman(weights)
    codes: dict[str, str] = {}
    for index, node in enumerate(nodes[: len(weights)]):
        bits: list[str] = []
        child, parent = index, node.parent
        while parent != -1:
            bits.append("0" if nodes[parent].left == child else "1")
            child, parent = parent, nodes[parent].parent
        codes[node.label] = "".join(reversed(bits))
    return codes


def average_code_length(weights: Mapping[str, int]) -> float:
    """Weighted mean length of the Huffman codes."""
    total = sum(weights.values())
    if total == 0:
        raise ValueError("the total weight must not be zero")
    codes = huffman_codes(weights)
    return sum(weights[label] * len(code) for label, code in codes.items()) / total