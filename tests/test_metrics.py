import pytest

from dslabs.btree import height, parse, preorder
from dslabs.metrics import leaf_count, level, node_count, width

TEXT = "A(B(D,E(H(J,K(L,M(,N))))),C(F,G(,I)))"

TREES = [
    TEXT,
    "A",
    "A(B)",
    "A(,B)",
    "A(B(D,E(,G)),C(,F(H,I)))",
]


def test_counts_for_sample_tree():
    tree = parse(TEXT)
    assert node_count(tree) == len("ABDEHJKLMNCFGI")
    assert leaf_count(tree) == 6


def test_level_of_node():
    tree = parse(TEXT)
    assert level(tree, "K") == 5
    assert level(tree, "A") == 1


def test_width_of_sample_tree():
    assert width(parse(TEXT)) == 4


def test_missing_value_has_level_zero():
    assert level(parse(TEXT), "Z") == 0


def test_empty_tree():
    assert node_count(None) == 0
    assert leaf_count(None) == 0
    assert width(None) == 0
    assert level(None, "A") == 0


@pytest.mark.parametrize("text", TREES)
def test_node_count_matches_traversal(text):
    tree = parse(text)
    assert node_count(tree) == len(preorder(tree))


@pytest.mark.parametrize("text", TREES)
def test_bounds(text):
    tree = parse(text)
    assert 1 <= leaf_count(tree) <= node_count(tree)
    assert 1 <= width(tree) <= node_count(tree)


@pytest.mark.parametrize("text", TREES)
def test_deepest_level_is_height(text):
    tree = parse(text)
    levels = [level(tree, x) for x in preorder(tree)]
    assert all(lv >= 1 for lv in levels)
    assert max(levels) == height(tree)


@pytest.mark.parametrize("text", TREES)
def test_width_times_height_covers_nodes(text):
    tree = parse(text)
    assert width(tree) * height(tree) >= node_count(tree)