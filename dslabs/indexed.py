"""A set of distinct integers with positional access and constant-time removal."""

from __future__ import annotations

from typing import Iterable, Iterator


class IndexedSet:
    """Distinct values kept in an array plus a value-to-position map.

    Removal moves the last value into the freed position, so order is not kept.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        self._pos: dict[int, int] = {}
        for x in values:
            self.insert(x)

    def insert(self, x: int) -> None:
        """Append x; ValueError if it is already present."""
        if x in self._pos:
            raise ValueError(f"{x} is already present")
        self._pos[x] = len(self._items)
        self._items.append(x)

    def remove(self, x: int) -> None:
        """Remove x by moving the last value into its place; KeyError if absent."""
        no = self._pos.pop(x)
        last = self._items.pop()
        if last != x:
            self._items[no] = last
            self._pos[last] = no

    def at(self, no: int) -> int:
        """Value at 1-based position no."""
        if not 1 <= no <= len(self._items):
            raise IndexError(f"position {no} out of range")
        return self._items[no - 1]

    def __contains__(self, x: object) -> bool:
        return x in self._pos

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)