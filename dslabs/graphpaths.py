"""Simple paths between two vertices: all of them, those of a given length, and a shortest one."""

from __future__ import annotations

from collections import deque
from typing import Optional

from .graph import AdjGraph


def _simple_paths(graph: AdjGraph, u: int, v: int, length: Optional[int]) -> list[list[int]]:
    graph._check(u)
    graph._check(v)
    result: list[list[int]] = []
    path: list[int] = []
    visited: set[int] = set()

    def walk(x: int) -> None:
        visited.add(x)
        path.append(x)
        edges = len(path) - 1
        if x == v and (edges == length if length is not None else edges > 0):
            result.append(list(path))
        else:
            for w, _ in graph.neighbors(x):
                if w not in visited:
                    walk(w)
        path.pop()
        visited.discard(x)

    walk(u)
    return result


def all_simple_paths(graph: AdjGraph, u: int, v: int) -> list[list[int]]:
    """Every simple path from u to v with at least one edge, in depth-first order."""
    return _simple_paths(graph, u, v, None)


def paths_of_length(graph: AdjGraph, u: int, v: int, length: int) -> list[list[int]]:
    """Every simple path from u to v made of exactly length edges."""
    return _simple_paths(graph, u, v, length)


def shortest_path(graph: AdjGraph, u: int, v: int) -> Optional[list[int]]:
    """A path from u to v with the fewest edges, found breadth-first; None if v is unreachable."""
    graph._check(u)
    graph._check(v)
    parent: dict[int, Optional[int]] = {u: None}
    queue = deque([u])
    while queue:
        k = queue.popleft()
        if k == v:
            path = []
            node: Optional[int] = k
            while node is not None:
                path.append(node)
                node = parent[node]
            return path[::-1]
        for w, _ in graph.neighbors(k):
            if w not in parent:
                parent[w] = k
                queue.append(w)
    return None