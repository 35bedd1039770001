import pytest

from dslabs.graph import AdjGraph
from dslabs.graphpaths import all_simple_paths
from dslabs.routes import Network, parse_network, treasure_paths

MAZE = [
    [0, 1, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [1, 0, 0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 0, 0, 0],
    [1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [1, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0],
    [1, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 0, 0, 0, 0, 0],
    [0, 1, 0, 1, 0, 0, 0, 1, 0, 1, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 1, 1, 0, 0, 0],
    [0, 1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 1, 0, 0],
    [0, 0, 0, 0, 0, 1, 1, 0, 0, 0, 1, 0, 1, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 1, 0],
    [0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 0, 0, 0, 0, 1],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 0, 0, 1],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 0],
]

CHAIN_TEXT = "4 3\n0 1\n1 2\n2 3\n2\n0 3\n1 1\n"


def _chain():
    network, _ = parse_network(CHAIN_TEXT)
    return network


def test_parse_network_reads_counts_and_queries():
    network, queries = parse_network(CHAIN_TEXT)
    assert (network.n, network.m) == (4, 3)
    assert queries == [(0, 3), (1, 1)]


def test_parse_network_truncated_raises():
    with pytest.raises(ValueError):
        parse_network("4 3\n0 1\n")


def test_translators_along_chain():
    assert _chain().min_translators(0, 3) == 2


def test_translators_symmetric():
    network = _chain()
    for s in range(4):
        for e in range(4):
            assert network.min_translators(s, e) == network.min_translators(e, s)


def test_translators_same_animal():
    assert _chain().min_translators(2, 2) == 0


def test_translators_unreachable():
    network = Network(3)
    network.add(0, 1)
    assert network.min_translators(0, 2) is None


def test_add_out_of_range_raises():
    with pytest.raises(IndexError):
        Network(2).add(0, 2)


def test_network_to_string_format():
    network = Network(2)
    network.add(0, 1)
    assert network.to_string() == "n=2,e=1\n[  0]:→(1)→∧\n[  1]:→(0)→∧\n"


def test_new_links_go_first():
    network = Network(3)
    network.add(0, 1)
    network.add(0, 2)
    assert network.to_string().splitlines()[1] == "[  0]:→(2)→(1)→∧"


def test_unconstrained_paths_match_all_simple_paths():
    graph = AdjGraph.from_matrix(MAZE)
    assert treasure_paths(graph, 0, 14, [], []) == all_simple_paths(graph, 0, 14)


def test_constrained_paths_obey_constraints():
    graph = AdjGraph.from_matrix(MAZE)
    everything = all_simple_paths(graph, 0, 14)
    found = treasure_paths(graph, 0, 14, [6, 9], [8])
    assert found
    for path in found:
        assert path[0] == 0 and path[-1] == 14
        assert 6 in path and 9 in path and 8 not in path
        assert path in everything
    assert len(found) < len(everything)


def test_forbidding_the_start_leaves_nothing():
    graph = AdjGraph.from_matrix(MAZE)
    assert treasure_paths(graph, 0, 14, [], [0]) == []


def test_treasure_bad_vertex_raises():
    graph = AdjGraph.from_matrix(MAZE)
    with pytest.raises(IndexError):
        treasure_paths(graph, 0, 15, [], [])