"""Counting how often each character occurs in a text."""

from __future__ import annotations

from collections import Counter


def char_counts(text: str) -> list[tuple[str, int]]:
    """Each distinct character of text with its number of occurrences, in character order."""
    return sorted(Counter(text).items())