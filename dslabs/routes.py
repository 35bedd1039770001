"""Translator networks between animals and constrained treasure-hunt paths."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Optional

from .graph import AdjGraph


class Network:
    """An undirected graph of who can talk to whom; new links go to the front of each list."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("animal count must not be negative")
        self.n = n
        self.m = 0
        self._adj: list[deque[int]] = [deque() for _ in range(n)]

    def _check(self, v: int) -> None:
        if not 0 <= v < self.n:
            raise IndexError(f"animal {v} out of range")

    def add(self, a: int, b: int) -> None:
        """Link animals a and b in both directions."""
        self._check(a)
        self._check(b)
        self._adj[a].appendleft(b)
        self._adj[b].appendleft(a)
        self.m += 1

    def min_translators(self, s: int, e: int) -> Optional[int]:
        """Fewest animals needed between s and e to pass a message; None if impossible."""
        self._check(s)
        self._check(e)
        if s == e:
            return 0
        visited = {s}
        queue = deque([(s, 0)])
        while queue:
            w, level = queue.popleft()
            for x in self._adj[w]:
                if x in visited:
                    continue
                if x == e:
                    return level
                visited.add(x)
                queue.append((x, level + 1))
        return None

    def to_string(self) -> str:
        """Render the counts and the adjacency lists."""
        lines = [f"n={self.n},e={self.m}"]
        lines.extend(
            f"[{i:3d}]:" + "".join(f"→({x})" for x in links) + "→∧"
            for i, links in enumerate(self._adj)
        )
        return "\n".join(lines) + "\n"


def parse_network(text: str) -> tuple[Network, list[tuple[int, int]]]:
    """Read "n m", m links "a b", then "k" and k queries "s e"."""
    numbers = iter(int(token) for token in text.split())
    try:
        n, m = next(numbers), next(numbers)
        network = Network(n)
        for _ in range(m):
            network.add(next(numbers), next(numbers))
        k = next(numbers)
        queries = [(next(numbers), next(numbers)) for _ in range(k)]
    except StopIteration:
        raise ValueError("the network description ends too early") from None
    return network, queries


def treasure_paths(
    graph: AdjGraph,
    start: int,
    end: int,
    required: Iterable[int],
    forbidden: Iterable[int],
) -> list[list[int]]:
    """Simple paths from start to end that pass every required vertex and no forbidden one."""
    for v in (start, end):
        if not 0 <= v < graph.n:
            raise IndexError(f"vertex {v} out of range")
    need = set(required)
    avoid = set(forbidden)
    result: list[list[int]] = []
    path: list[int] = []
    visited: set[int] = set()

    def walk(x: int) -> None:
        visited.add(x)
        path.append(x)
        if x == end:
            if need.issubset(path) and avoid.isdisjoint(path):
                result.append(list(path))
        else:
            for w, _ in graph.neighbors(x):
                if w not in visited:
                    walk(w)
        path.pop()
        visited.discard(x)

    walk(start)
    return result