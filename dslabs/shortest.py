"""Shortest paths: Dijkstra, Floyd, minimum cycles, round trips and cheapest shortest routes.

Matrices use 0 on the diagonal and INF for a missing arc. party_total and
cheapest_shortest take vertices numbered from 1, as in their input files.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence

from .graph import INF

_Matrix = Sequence[Sequence[int]]


def _size(matrix: _Matrix) -> int:
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("the adjacency matrix must be square")
    return n


def _weights(matrix: _Matrix) -> list[list[float]]:
    _size(matrix)
    return [[math.inf if w >= INF else w for w in row] for row in matrix]


def _dijkstra(
    weights: list[list[float]], v: int
) -> tuple[list[float], list[Optional[int]]]:
    n = len(weights)
    if not 0 <= v < n:
        raise IndexError(f"vertex {v} out of range")
    dist = list(weights[v])
    dist[v] = 0
    prev: list[Optional[int]] = [
        v if i != v and weights[v][i] < math.inf else None for i in range(n)
    ]
    done = {v}
    while len(done) < n:
        candidates = [j for j in range(n) if j not in done and dist[j] < math.inf]
        if not candidates:
            break
        u = min(candidates, key=dist.__getitem__)
        done.add(u)
        for j in range(n):
            if j in done:
                continue
            w = weights[u][j]
            if w < math.inf and dist[u] + w < dist[j]:
                dist[j] = dist[u] + w
                prev[j] = u
    return dist, prev


def _walk_back(prev: Sequence[Optional[int]], i: int) -> list[int]:
    path = []
    node: Optional[int] = i
    while node is not None:
        path.append(node)
        node = prev[node]
    return path[::-1]


def dijkstra(matrix: _Matrix, v: int) -> tuple[list[int], list[Optional[int]]]:
    """Distances from v (INF when unreachable) and each vertex's predecessor (None for none)."""
    dist, prev = _dijkstra(_weights(matrix), v)
    return [INF if d == math.inf else int(d) for d in dist], prev


def dijkstra_paths(matrix: _Matrix, v: int) -> dict[int, tuple[int, list[int]]]:
    """Map every vertex reachable from v, other than v, to (length, path)."""
    dist, prev = _dijkstra(_weights(matrix), v)
    return {
        i: (int(d), _walk_back(prev, i))
        for i, d in enumerate(dist)
        if i != v and d < math.inf
    }


def floyd(matrix: _Matrix) -> tuple[list[list[int]], list[list[Optional[int]]]]:
    """All-pairs distances and, for each pair, the vertex before the target (None for none)."""
    n = _size(matrix)
    dist = [list(row) for row in matrix]
    before: list[list[Optional[int]]] = [
        [i if i != j and matrix[i][j] < INF else None for j in range(n)] for i in range(n)
    ]
    for k in range(n):
        for i in range(n):
            for j in range(n):
                if dist[i][j] > dist[i][k] + dist[k][j]:
                    dist[i][j] = dist[i][k] + dist[k][j]
                    before[i][j] = before[k][j]
    return dist, before


def _trace(before: Sequence[Sequence[Optional[int]]], i: int, j: int) -> list[int]:
    path = [j]
    k = before[i][j]
    while k is not None and k != i:
        path.append(k)
        k = before[i][k]
    path.append(i)
    return path[::-1]


def floyd_paths(matrix: _Matrix) -> list[tuple[int, int, int, list[int]]]:
    """(from, to, length, path) for every connected ordered pair of distinct vertices."""
    dist, before = floyd(matrix)
    n = len(dist)
    return [
        (i, j, dist[i][j], _trace(before, i, j))
        for i in range(n)
        for j in range(n)
        if i != j and dist[i][j] < INF
    ]


def min_cycle(matrix: _Matrix) -> Optional[tuple[int, list[int]]]:
    """The shortest directed cycle as (length, vertices ending where they start), or None."""
    dist, before = floyd(matrix)
    n = len(dist)
    best = INF
    found: Optional[tuple[int, int]] = None
    for i in range(n):
        for j in range(n):
            if i != j and matrix[j][i] < INF and dist[i][j] + matrix[j][i] < best:
                best = dist[i][j] + matrix[j][i]
                found = (i, j)
    if found is None:
        return None
    i, j = found
    return best, _trace(before, i, j) + [i]


def _check_vertex(v: int, n: int) -> None:
    if not 1 <= v <= n:
        raise IndexError(f"vertex {v} out of range 1..{n}")


def party_total(n: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Sum over all vertices of the shortest way from vertex 1 there and back again."""
    if n < 1:
        raise ValueError("at least one vertex is needed")
    forward = [[0 if i == j else math.inf for j in range(n)] for i in range(n)]
    backward = [[0 if i == j else math.inf for j in range(n)] for i in range(n)]
    for a, b, c in edges:
        _check_vertex(a, n)
        _check_vertex(b, n)
        forward[a - 1][b - 1] = c
        backward[b - 1][a - 1] = c
    out, _ = _dijkstra(forward, 0)
    back, _ = _dijkstra(backward, 0)
    if math.inf in out or math.inf in back:
        raise ValueError("some vertex cannot reach or be reached from vertex 1")
    return int(sum(out) + sum(back))


def cheapest_shortest(
    n: int, edges: Iterable[tuple[int, int, int, int]], s: int, t: int
) -> Optional[tuple[int, int]]:
    """(distance, cost) of the cheapest among the shortest s–t routes; None if t is unreachable.

    Edges are undirected (a, b, length, cost); of parallel edges the first shortest is kept.
    """
    length = [[math.inf] * n for _ in range(n)]
    price = [[math.inf] * n for _ in range(n)]
    for a, b, d, p in edges:
        _check_vertex(a, n)
        _check_vertex(b, n)
        a, b = a - 1, b - 1
        if length[a][b] > d:
            length[a][b] = length[b][a] = d
            price[a][b] = price[b][a] = p
    _check_vertex(s, n)
    _check_vertex(t, n)
    s, t = s - 1, t - 1
    if s == t:
        return 0, 0
    dist = list(length[s])
    cost = list(price[s])
    dist[s] = cost[s] = 0
    done = {s}
    while True:
        candidates = [j for j in range(n) if j not in done and dist[j] < math.inf]
        if not candidates:
            return None
        u = min(candidates, key=dist.__getitem__)
        done.add(u)
        if u == t:
            return int(dist[t]), int(cost[t])
        for j in range(n):
            if j in done:
                continue
            d = dist[u] + length[u][j]
            c = cost[u] + price[u][j]
            if d < dist[j]:
                dist[j] = d
                cost[j] = c
            elif d == dist[j] and c < cost[j]:
                cost[j] = c