"""Generalized lists written in parenthesis notation, e.g. "(a,(b,c),(#))".

A generalized list is a Python list whose items are single-character atoms
(str) or nested generalized lists. "(#)" and "()" both denote the empty list.
"""

from __future__ import annotations

from typing import Iterator, Optional, Union

GList = Union[str, list]

_SPECIAL = "(),#"


def parse(text: str) -> GList:
    """Parse a generalized list from its parenthesis notation."""
    element, pos = _parse_element(text, 0)
    if pos != len(text):
        raise ValueError(f"unexpected {text[pos]!r} at position {pos}")
    return element


def _parse_element(text: str, pos: int) -> tuple[GList, int]:
    if pos >= len(text):
        raise ValueError("unexpected end of text")
    ch = text[pos]
    if ch == "(":
        return _parse_list(text, pos + 1)
    if ch in _SPECIAL:
        raise ValueError(f"unexpected {ch!r} at position {pos}")
    return ch, pos + 1


def _parse_list(text: str, pos: int) -> tuple[list, int]:
    if text.startswith("#)", pos):
        return [], pos + 2
    if text.startswith(")", pos):
        return [], pos + 1
    items: list = []
    while True:
        item, pos = _parse_element(text, pos)
        items.append(item)
        if pos >= len(text):
            raise ValueError("missing ')'")
        if text[pos] == ",":
            pos += 1
        elif text[pos] == ")":
            return items, pos + 1
        else:
            raise ValueError(f"unexpected {text[pos]!r} at position {pos}")


def length(glist: GList) -> int:
    """Number of top-level elements of a list."""
    if isinstance(glist, str):
        raise TypeError("an atom has no length")
    return len(glist)


def depth(glist: GList) -> int:
    """Nesting depth: 0 for an atom, 1 for the empty list."""
    if isinstance(glist, str):
        return 0
    return 1 + max((depth(item) for item in glist if isinstance(item, list)), default=0)


def to_string(glist: GList) -> str:
    """Render in parenthesis notation, writing the empty list as "(#)"."""
    if isinstance(glist, str):
        return glist
    if not glist:
        return "(#)"
    return "(" + ",".join(to_string(item) for item in glist) + ")"


def _atoms(glist: GList) -> Iterator[str]:
    if isinstance(glist, str):
        yield glist
    else:
        for item in glist:
            yield from _atoms(item)


def max_atom(glist: GList) -> Optional[str]:
    """Largest atom anywhere in the list, or None if it holds no atoms."""
    return max(_atoms(glist), default=None)