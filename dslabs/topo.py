"""Topological ordering and critical activities of activity-on-edge networks."""

from __future__ import annotations

from .graph import AdjGraph


def topological_order(graph: AdjGraph) -> list[int]:
    """Topological order using a stack of zero in-degree vertices; ValueError on a cycle."""
    indegree = [0] * graph.n
    for u in range(graph.n):
        for v, _ in graph.neighbors(u):
            indegree[v] += 1
    stack = [i for i in range(graph.n) if indegree[i] == 0]
    order: list[int] = []
    while stack:
        i = stack.pop()
        order.append(i)
        for j, _ in graph.neighbors(i):
            indegree[j] -= 1
            if indegree[j] == 0:
                stack.append(j)
    if len(order) < graph.n:
        raise ValueError("the graph has a cycle")
    return order


def critical_activities(graph: AdjGraph) -> tuple[int, int, list[tuple[int, int]]]:
    """(source, sink, activities) where the activities are the arcs with no slack."""
    order = topological_order(graph)
    if not order:
        raise ValueError("the graph has no vertices")
    source, sink = order[0], order[-1]
    earliest = [0] * graph.n
    for i in order:
        for w, weight in graph.neighbors(i):
            earliest[w] = max(earliest[w], earliest[i] + weight)
    latest = [earliest[sink]] * graph.n
    for i in reversed(order[:-1]):
        for w, weight in graph.neighbors(i):
            latest[i] = min(latest[i], latest[w] - weight)
    activities = [
        (i, w)
        for i in range(graph.n)
        for w, weight in graph.neighbors(i)
        if earliest[i] == latest[w] - weight
    ]
    return source, sink, activities