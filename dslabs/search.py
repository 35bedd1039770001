"""Searching sorted and unsorted key lists: sequential, binary, block and stride search,
bounds and ranges, the median of two sorted lists, and binary-search decision trees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(eq=False)
class DecisionNode:
    """A node of a binary-search decision tree: the probed index and its level (root is 1)."""

    index: int
    level: int
    left: Optional[DecisionNode] = None
    right: Optional[DecisionNode] = None


def sequential_search(keys: Sequence[int], k: int) -> tuple[Optional[int], list[int]]:
    """Scan from the front; return (1-based position or None, keys compared)."""
    compared: list[int] = []
    for position, key in enumerate(keys, start=1):
        compared.append(key)
        if key == k:
            return position, compared
    return None, compared


def binary_search(
    keys: Sequence[int], k: int
) -> tuple[Optional[int], list[tuple[int, int, int]]]:
    """Halving search of sorted keys; return (1-based position or None, (low, high, mid) probes)."""
    probes: list[tuple[int, int, int]] = []
    low, high = 0, len(keys) - 1
    while low <= high:
        mid = (low + high) // 2
        probes.append((low, high, mid))
        if keys[mid] == k:
            return mid + 1, probes
        if keys[mid] > k:
            high = mid - 1
        else:
            low = mid + 1
    return None, probes


def block_search(
    index: Sequence[tuple[int, int]], keys: Sequence[int], k: int
) -> tuple[Optional[int], int, list[int]]:
    """Search keys split into blocks described by (largest key, start) index entries.

    The index is searched by halving, then the chosen block sequentially.
    Returns (1-based position or None, 0-based block number, keys compared in the block).
    """
    blocks = len(index)
    if blocks == 0:
        raise ValueError("the index must not be empty")
    size = -(-len(keys) // blocks)
    low, high = 0, blocks - 1
    while low <= high:
        mid = (low + high) // 2
        if index[mid][0] >= k:
            high = mid - 1
        else:
            low = mid + 1
    if low >= blocks:
        return None, low, []
    start = index[low][1]
    compared: list[int] = []
    for i in range(start, min(start + size, len(keys))):
        compared.append(keys[i])
        if keys[i] == k:
            return i + 1, low, compared
    return None, low, compared


def lower_bound(keys: Sequence[int], k: int) -> int:
    """First index whose key is not less than k."""
    low, high = 0, len(keys)
    while low < high:
        mid = (low + high) // 2
        if k > keys[mid]:
            low = mid + 1
        else:
            high = mid
    return low


def upper_bound(keys: Sequence[int], k: int) -> int:
    """First index whose key is greater than k."""
    low, high = 0, len(keys)
    while low < high:
        mid = (low + high) // 2
        if k >= keys[mid]:
            low = mid + 1
        else:
            high = mid
    return low


def search_range(keys: Sequence[int], k: int) -> Optional[tuple[int, int]]:
    """Inclusive (first, last) indices holding k in sorted keys, or None."""
    lower = lower_bound(keys, k)
    upper = upper_bound(keys, k)
    if lower == len(keys) or lower >= upper:
        return None
    return lower, upper - 1


def median_of_two(a: Sequence[int], b: Sequence[int]) -> int:
    """Lower median of two sorted sequences of equal length, by halving both."""
    n = len(a)
    if n != len(b) or n == 0:
        raise ValueError("both sequences must be non-empty and of equal length")
    s1, e1, s2, e2 = 0, n - 1, 0, n - 1
    while s1 != e1 or s2 != e2:
        m1 = (s1 + e1) // 2
        m2 = (s2 + e2) // 2
        if a[m1] == b[m2]:
            return a[m1]
        odd = (s1 + e1) % 2 == 0
        if a[m1] < b[m2]:
            s1 = m1 if odd else m1 + 1
            e2 = m2
        else:
            e1 = m1
            s2 = m2 if odd else m2 + 1
    return min(a[s1], b[s2])


def _check_stride(keys: Sequence[int], n: int) -> None:
    if n < 1:
        raise ValueError("n must be at least 1")
    if len(keys) < 4 * n + 1:
        raise ValueError(f"keys must hold positions 1..{4 * n}")


def _scan(keys: Sequence[int], start: int, stop: int, k: int) -> Optional[int]:
    return next((j for j in range(start, stop) if keys[j] == k), None)


def stride_search(keys: Sequence[int], n: int, k: int) -> Optional[int]:
    """Search sorted keys[1..4n] by stepping over every fourth key, then scanning back.

    Position 0 of keys is not used. Returns the index of k or None.
    """
    _check_stride(keys, n)
    if k < keys[1] or k > keys[4 * n]:
        return None
    i = 4
    while i <= 4 * n:
        if keys[i] == k:
            return i
        if keys[i] > k:
            break
        i += 4
    return _scan(keys, i - 3, i, k)


def stride_binary_search(keys: Sequence[int], n: int, k: int) -> Optional[int]:
    """Like stride_search, but the stepping keys are searched by halving."""
    _check_stride(keys, n)
    if k < keys[1] or k > keys[4 * n]:
        return None
    low, high = 4, 4 * n
    while low <= high:
        mid = (low + high) // 2
        if k < keys[mid]:
            high = mid - 4
        elif k > keys[mid]:
            low = mid + 4
        else:
            return mid
    return _scan(keys, high + 1, high + 4, k)


def _decision(low: int, high: int, level: int) -> Optional[DecisionNode]:
    if low > high:
        return None
    mid = (low + high) // 2
    return DecisionNode(
        mid, level, _decision(low, mid - 1, level + 1), _decision(mid + 1, high, level + 1)
    )


def decision_tree(n: int) -> Optional[DecisionNode]:
    """Decision tree of binary search over indices 0..n-1."""
    return _decision(0, n - 1, 1)


def decision_tree_string(node: Optional[DecisionNode]) -> str:
    """Render a decision tree in bracket notation as index[level]."""
    if node is None:
        return ""
    text = f"{node.index}[{node.level}]"
    if node.left is None and node.right is None:
        return text
    inner = decision_tree_string(node.left)
    if node.right is not None:
        inner += "," + decision_tree_string(node.right)
    return f"{text}({inner})"


def asl_success(n: int) -> float:
    """Average number of comparisons of a successful binary search over n keys."""
    if n <= 0:
        raise ValueError("n must be positive")
    total = 0
    stack = [(0, n - 1, 1)]
    while stack:
        low, high, level = stack.pop()
        if low > high:
            continue
        mid = (low + high) // 2
        total += level
        stack.append((low, mid - 1, level + 1))
        stack.append((mid + 1, high, level + 1))
    return total / n