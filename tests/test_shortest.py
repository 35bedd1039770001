import pytest

from dslabs.graph import INF
from dslabs.shortest import (
    cheapest_shortest,
    dijkstra,
    dijkstra_paths,
    floyd,
    floyd_paths,
    min_cycle,
    party_total,
)

G = [
    [0, 5, INF, 7, INF, INF],
    [INF, 0, 4, INF, INF, INF],
    [8, INF, 0, INF, INF, 9],
    [INF, INF, 5, 0, INF, 6],
    [INF, INF, INF, 5, 0, INF],
    [3, INF, INF, INF, 1, 0],
]

CYCLIC = [
    [0, 10, 1, INF],
    [21, 0, INF, 6],
    [INF, 1, 0, INF],
    [5, INF, INF, 0],
]

PARTIAL = [
    [0, 1, INF],
    [INF, 0, INF],
    [INF, INF, 0],
]


def _weight(matrix, path):
    return sum(matrix[a][b] for a, b in zip(path, path[1:]))


@pytest.mark.parametrize("v", range(6))
def test_dijkstra_agrees_with_floyd(v):
    dist, _ = dijkstra(G, v)
    all_pairs, _ = floyd(G)
    assert dist == all_pairs[v]


def test_dijkstra_paths_are_consistent():
    paths = dijkstra_paths(G, 0)
    assert set(paths) == {1, 2, 3, 4, 5}
    for target, (length, path) in paths.items():
        assert path[0] == 0 and path[-1] == target
        assert _weight(G, path) == length


def test_dijkstra_predecessors_lead_back_to_source():
    _, prev = dijkstra(G, 0)
    assert prev[0] is None
    for target in range(1, 6):
        node = target
        for _ in range(6):
            if node == 0:
                break
            node = prev[node]
        assert node == 0


def test_unreachable_vertices_are_left_out():
    dist, prev = dijkstra(PARTIAL, 0)
    assert dist[2] == INF
    assert prev[2] is None
    assert set(dijkstra_paths(PARTIAL, 0)) == {1}


def test_floyd_paths_on_small_graph():
    assert floyd_paths(PARTIAL) == [(0, 1, 1, [0, 1])]


def test_floyd_paths_are_consistent():
    entries = floyd_paths(G)
    assert len(entries) == 30
    for i, j, length, path in entries:
        assert path[0] == i and path[-1] == j
        assert _weight(G, path) == length


def test_min_cycle_worked_example():
    length, cycle = min_cycle(CYCLIC)
    assert cycle == [0, 2, 1, 3, 0]
    assert _weight(CYCLIC, cycle) == length


def test_min_cycle_none_when_acyclic():
    assert min_cycle(PARTIAL) is None


def test_dijkstra_bad_vertex_raises():
    with pytest.raises(IndexError):
        dijkstra(G, 6)


def test_non_square_raises():
    with pytest.raises(ValueError):
        floyd([[0, 1], [1]])


def test_party_total_two_vertices():
    assert party_total(2, [(1, 2, 3), (2, 1, 4)]) == 7


def test_party_total_unreachable_raises():
    with pytest.raises(ValueError):
        party_total(2, [(1, 2, 3)])


def test_party_total_bad_vertex_raises():
    with pytest.raises(IndexError):
        party_total(2, [(1, 3, 3)])


def test_cheapest_shortest_worked_example():
    assert cheapest_shortest(3, [(1, 2, 5, 6), (2, 3, 4, 5)], 1, 3) == (9, 11)


def test_cheapest_shortest_prefers_lower_cost_on_ties():
    edges = [(1, 2, 1, 10), (2, 3, 1, 10), (1, 3, 2, 1)]
    assert cheapest_shortest(3, edges, 1, 3) == (2, 1)


def test_cheapest_shortest_keeps_shorter_parallel_edge():
    assert cheapest_shortest(2, [(1, 2, 3, 1), (1, 2, 5, 0)], 1, 2) == (3, 1)


def test_cheapest_shortest_unreachable():
    assert cheapest_shortest(3, [(1, 2, 1, 1)], 1, 3) is None