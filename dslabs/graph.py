"""Graphs in adjacency-matrix and adjacency-list form, with DFS and BFS traversals."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Sequence

INF = 32767


class AdjGraph:
    """A directed graph held as adjacency lists of (vertex, weight) arcs."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("vertex count must not be negative")
        self.n = n
        self.e = 0
        self._adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]

    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence[int]]) -> AdjGraph:
        """Build from a square matrix where 0 and INF mean no arc."""
        n = len(matrix)
        if any(len(row) != n for row in matrix):
            raise ValueError("the adjacency matrix must be square")
        graph = cls(n)
        for i, row in enumerate(matrix):
            for j, weight in enumerate(row):
                if weight != 0 and weight != INF:
                    graph.add_edge(i, j, weight)
        return graph

    def _check(self, v: int) -> None:
        if not 0 <= v < self.n:
            raise IndexError(f"vertex {v} out of range")

    def add_edge(self, u: int, v: int, weight: int = 1) -> None:
        """Append the arc u→v to u's list."""
        self._check(u)
        self._check(v)
        self._adj[u].append((v, weight))
        self.e += 1

    def neighbors(self, u: int) -> list[tuple[int, int]]:
        """Arcs leaving u as (vertex, weight) pairs, in list order."""
        self._check(u)
        return list(self._adj[u])

    def to_string(self) -> str:
        """Render the adjacency lists, one line per vertex."""
        return "".join(
            f"{i:3d}: " + "".join(f"{v:3d}[{w}]→" for v, w in arcs) + "∧\n"
            for i, arcs in enumerate(self._adj)
        )


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render an adjacency matrix in four-wide columns, INF shown as ∞."""
    return "".join(
        "".join(f"{value:4d}" if value != INF else f"{'∞':>4}" for value in row) + "\n"
        for row in matrix
    )


def _successors(graph: AdjGraph, u: int) -> Iterator[int]:
    return (v for v, _ in graph.neighbors(u))


def dfs(graph: AdjGraph, v: int) -> list[int]:
    """Depth-first visiting order from v, recursively."""
    graph._check(v)
    order: list[int] = []
    visited: set[int] = set()

    def visit(u: int) -> None:
        visited.add(u)
        order.append(u)
        for w in _successors(graph, u):
            if w not in visited:
                visit(w)

    visit(v)
    return order


def dfs_iterative(graph: AdjGraph, v: int) -> list[int]:
    """Depth-first visiting order from v using an explicit stack."""
    graph._check(v)
    visited = {v}
    order = [v]
    stack = [v]
    while stack:
        nxt = next((w for w in _successors(graph, stack[-1]) if w not in visited), None)
        if nxt is None:
            stack.pop()
        else:
            visited.add(nxt)
            order.append(nxt)
            stack.append(nxt)
    return order


def bfs(graph: AdjGraph, v: int) -> list[int]:
    """Breadth-first visiting order from v."""
    graph._check(v)
    visited = {v}
    order = [v]
    queue = deque([v])
    while queue:
        for w in _successors(graph, queue.popleft()):
            if w not in visited:
                visited.add(w)
                order.append(w)
                queue.append(w)
    return order


def all_dfs_orders(graph: AdjGraph, v: int) -> list[list[int]]:
    """Every depth-first sequence from v that reaches all vertices along one simple path."""
    graph._check(v)
    result: list[list[int]] = []
    path: list[int] = []
    visited: set[int] = set()

    def walk(u: int) -> None:
        visited.add(u)
        path.append(u)
        if len(path) == graph.n:
            result.append(list(path))
        else:
            for w in _successors(graph, u):
                if w not in visited:
                    walk(w)
        path.pop()
        visited.discard(u)

    walk(v)
    return result


def dfs_tree_edges(graph: AdjGraph, v: int) -> list[tuple[int, int]]:
    """Edges of the depth-first spanning tree from v, in discovery order."""
    graph._check(v)
    edges: list[tuple[int, int]] = []
    visited: set[int] = set()

    def visit(u: int) -> None:
        visited.add(u)
        for w in _successors(graph, u):
            if w not in visited:
                edges.append((u, w))
                visit(w)

    visit(v)
    return edges


def bfs_tree_edges(graph: AdjGraph, v: int) -> list[tuple[int, int]]:
    """Edges of the breadth-first spanning tree from v, in discovery order."""
    graph._check(v)
    edges: list[tuple[int, int]] = []
    visited = {v}
    queue = deque([v])
    while queue:
        u = queue.popleft()
        for w in _successors(graph, u):
            if w not in visited:
                visited.add(w)
                edges.append((u, w))
                queue.append(w)
    return edges