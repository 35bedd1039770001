"""String operations with 1-based positions and naive/KMP pattern matching."""

from __future__ import annotations


def substring(s: str, i: int, j: int) -> str:
    """Return the j characters of s starting at 1-based position i."""
    if i <= 0 or i > len(s) or j < 0 or i + j - 1 > len(s):
        raise IndexError("substring position or length out of range")
    return s[i - 1 : i - 1 + j]


def insert(s1: str, i: int, s2: str) -> str:
    """Insert s2 into s1 before 1-based position i."""
    if i <= 0 or i > len(s1) + 1:
        raise IndexError("insert position out of range")
    return s1[: i - 1] + s2 + s1[i - 1 :]


def delete(s: str, i: int, j: int) -> str:
    """Remove the j characters of s starting at 1-based position i."""
    if i <= 0 or i > len(s) or j < 0 or i + j > len(s) + 1:
        raise IndexError("delete position or length out of range")
    return s[: i - 1] + s[i - 1 + j :]


def replace(s: str, i: int, j: int, t: str) -> str:
    """Replace the j characters of s starting at 1-based position i by t."""
    if i <= 0 or i > len(s) or j < 0 or i + j - 1 > len(s):
        raise IndexError("replace position or length out of range")
    return s[: i - 1] + t + s[i - 1 + j :]


def index_naive(s: str, t: str) -> int:
    """Brute-force search: 0-based position of t in s, or -1."""
    n = len(t)
    return next((i for i in range(len(s) - n + 1) if s[i : i + n] == t), -1)


def kmp_next(t: str) -> list[int]:
    """KMP failure table of pattern t."""
    if not t:
        return []
    table = [-1] * len(t)
    j, k = 0, -1
    while j < len(t) - 1:
        if k == -1 or t[j] == t[k]:
            j += 1
            k += 1
            table[j] = k
        else:
            k = table[k]
    return table


def kmp_nextval(t: str) -> list[int]:
    """Improved KMP failure table that skips repeated comparisons."""
    if not t:
        return []
    table = [-1] * len(t)
    j, k = 0, -1
    while j < len(t) - 1:
        if k == -1 or t[j] == t[k]:
            j += 1
            k += 1
            table[j] = k if t[j] != t[k] else table[k]
        else:
            k = table[k]
    return table


def _kmp(s: str, t: str, table: list[int]) -> int:
    i = j = 0
    while i < len(s) and j < len(t):
        if j == -1 or s[i] == t[j]:
            i += 1
            j += 1
        else:
            j = table[j]
    return i - len(t) if j >= len(t) else -1


def kmp_index(s: str, t: str) -> int:
    """KMP search: 0-based position of t in s, or -1."""
    return _kmp(s, t, kmp_next(t))


def kmp_index_improved(s: str, t: str) -> int:
    """KMP search using the improved table: 0-based position of t in s, or -1."""
    return _kmp(s, t, kmp_nextval(t))