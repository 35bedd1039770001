"""Hash tables with open addressing by linear probing and synonym-shifting deletion."""

from __future__ import annotations

from typing import Iterable, Optional


class LinearProbingTable:
    """A table of m slots with hash function k mod p and linear probing.

    Each occupied slot remembers how many probes placed its key there.
    """

    def __init__(self, m: int, p: int, keys: Iterable[int] = ()) -> None:
        if m <= 0:
            raise ValueError("the table needs at least one slot")
        if not 0 < p <= m:
            raise ValueError("the modulus must lie in 1..m")
        self.m = m
        self.p = p
        self._keys: list[Optional[int]] = [None] * m
        self._counts = [0] * m
        self._n = 0
        for k in keys:
            self.insert(k)

    @property
    def keys(self) -> list[Optional[int]]:
        """The slot contents, None for an empty slot."""
        return list(self._keys)

    @property
    def counts(self) -> list[int]:
        """Probe counts per slot, 0 for an empty slot."""
        return list(self._counts)

    def _home(self, k: int) -> int:
        if k < 0:
            raise ValueError("keys must not be negative")
        return k % self.p

    def insert(self, k: int) -> int:
        """Place k in the first free slot from its home address; return that slot."""
        adr = self._home(k)
        if self._n >= self.m:
            raise ValueError("the table is full")
        count = 1
        while self._keys[adr] is not None:
            adr = (adr + 1) % self.m
            count += 1
        self._keys[adr] = k
        self._counts[adr] = count
        self._n += 1
        return adr

    def search(self, k: int) -> Optional[int]:
        """Slot holding k, or None."""
        adr = self._home(k)
        for _ in range(self.m):
            key = self._keys[adr]
            if key is None:
                return None
            if key == k:
                return adr
            adr = (adr + 1) % self.m
        return None

    def delete(self, k: int) -> bool:
        """Remove k, moving the synonyms that follow it one slot back; False if absent."""
        adr = self.search(k)
        if adr is None:
            return False
        home = k % self.p
        j = (adr + 1) % self.m
        while j != adr and self._keys[j] is not None and self._keys[j] % self.p == home:
            self._keys[(j - 1) % self.m] = self._keys[j]
            j = (j + 1) % self.m
        last = (j - 1) % self.m
        self._keys[last] = None
        self._counts[last] = 0
        self._n -= 1
        return True

    def __len__(self) -> int:
        return self._n

    def asl(self) -> float:
        """Average probe count of a successful search."""
        if self._n == 0:
            raise ValueError("the table is empty")
        return sum(c for key, c in zip(self._keys, self._counts) if key is not None) / self._n

    def to_string(self) -> str:
        """Render addresses, keys, probe counts and the average search length."""
        blank = "    "
        addresses = "".join(f"{i:<4d}" for i in range(self.m))
        keys = "".join(blank if key is None else f"{key:<4d}" for key in self._keys)
        counts = "".join(
            blank if key is None else f"{c:<4d}" for key, c in zip(self._keys, self._counts)
        )
        average = self.asl() if self._n else float("nan")
        return (
            f"    address: {addresses} \n"
            f"    key:     {keys}\n"
            f"    probes:  {counts} \n"
            f"    ASL({self._n})={average:g}\n"
        )