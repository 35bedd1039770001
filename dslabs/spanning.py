"""Minimum spanning trees by Prim and Kruskal, a union-find set, and road-building costs."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from .graph import INF


class DisjointSet:
    """Union-find over the elements 0..n-1 with path compression and union by rank."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(n))
        self._rank = [0] * n

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} out of range")

    def find(self, x: int) -> int:
        """Return the representative of the set holding x."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of x and y; False if they were already one set."""
        rx, ry = self.find(x), self.find(y)
        if rx == ry:
            return False
        if self._rank[rx] < self._rank[ry]:
            self._parent[rx] = ry
        else:
            if self._rank[rx] == self._rank[ry]:
                self._rank[rx] += 1
            self._parent[ry] = rx
        return True


def _size(matrix: Sequence[Sequence[int]]) -> int:
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("the adjacency matrix must be square")
    return n


def prim(matrix: Sequence[Sequence[int]], v: int) -> list[tuple[int, int, int]]:
    """Prim's tree from v as (from, to, weight) edges in the order they are chosen.

    0 and INF entries mean no edge.
    """
    n = _size(matrix)
    if not 0 <= v < n:
        raise IndexError(f"vertex {v} out of range")
    lowcost = list(matrix[v])
    closest = [v] * n
    edges: list[tuple[int, int, int]] = []
    for _ in range(n - 1):
        k = None
        best = INF
        for j, cost in enumerate(lowcost):
            if cost != 0 and cost < best:
                best, k = cost, j
        if k is None:
            raise ValueError("the graph is not connected")
        edges.append((closest[k], k, best))
        lowcost[k] = 0
        for j, weight in enumerate(matrix[k]):
            if weight != 0 and weight < lowcost[j]:
                lowcost[j] = weight
                closest[j] = k
    return edges


def kruskal(matrix: Sequence[Sequence[int]]) -> list[tuple[int, int, int]]:
    """Kruskal's tree as (u, v, weight) edges with u >= v, in the order they are accepted."""
    n = _size(matrix)
    candidates = []
    for i, row in enumerate(matrix):
        for j in range(i + 1):
            weight = row[j]
            if weight != 0 and weight != INF:
                candidates.append((i, j, weight))
    candidates.sort(key=lambda edge: edge[2])
    sets = DisjointSet(n)
    tree: list[tuple[int, int, int]] = []
    for u, v, weight in candidates:
        if len(tree) == n - 1:
            break
        if sets.union(u, v):
            tree.append((u, v, weight))
    if n > 0 and len(tree) < n - 1:
        raise ValueError("the graph is not connected")
    return tree


def prim_total(matrix: Sequence[Sequence[int]]) -> int:
    """Total weight of a minimum spanning tree grown from vertex 0; every entry is a weight."""
    n = _size(matrix)
    if n == 0:
        return 0
    lowcost: list[float] = [math.inf] * n
    lowcost[0] = 0
    done = [False] * n
    total = 0
    for _ in range(n):
        k = min((j for j in range(n) if not done[j]), key=lowcost.__getitem__)
        if lowcost[k] == math.inf:
            raise ValueError("the graph is not connected")
        total += lowcost[k]
        done[k] = True
        for j, weight in enumerate(matrix[k]):
            if not done[j] and lowcost[j] > weight:
                lowcost[j] = weight
    return int(total)


def kruskal_total(matrix: Sequence[Sequence[int]]) -> int:
    """Total weight of a minimum spanning tree by Kruskal over every vertex pair."""
    n = _size(matrix)
    candidates = sorted(
        ((i, j, matrix[i][j]) for i in range(n) for j in range(i + 1, n)),
        key=lambda edge: edge[2],
    )
    sets = DisjointSet(n)
    total = 0
    accepted = 0
    for u, v, weight in candidates:
        if accepted == n - 1:
            break
        if sets.union(u, v):
            total += weight
            accepted += 1
    if n > 0 and accepted < n - 1:
        raise ValueError("the graph is not connected")
    return total


def minimum_road_cost(
    matrix: Sequence[Sequence[int]], built_roads: Iterable[tuple[int, int]]
) -> int:
    """Least cost to connect every village when the given roads (0-based pairs) already exist."""
    n = _size(matrix)
    costs = [list(row) for row in matrix]
    for a, b in built_roads:
        if not (0 <= a < n and 0 <= b < n):
            raise IndexError(f"road ({a},{b}) out of range")
        costs[a][b] = costs[b][a] = 0
    return prim_total(costs)