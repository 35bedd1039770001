import pytest

from dslabs.btree import parse, preorder, to_string
from dslabs.serialize import (
    deserialize,
    has_same_shape_subtree,
    is_subtree,
    serialize,
    shape_serialize,
)

TEXT = "A(B(D,E(,G)),C(,F(H,I)))"

TREES = [
    TEXT,
    "A",
    "A(B)",
    "A(,B)",
    "A(B(D,E(H(J,K(L,M(,N))))),C(F,G(,I)))",
]


def test_serialize_sample_tree():
    assert serialize(parse(TEXT)) == "ABD##E#G##C#FH##I##"


@pytest.mark.parametrize("text", TREES)
def test_round_trip(text):
    assert to_string(deserialize(serialize(parse(text)))) == text


@pytest.mark.parametrize("text", TREES)
def test_serialization_counts(text):
    tree = parse(text)
    seq = serialize(tree)
    assert seq.replace("#", "") == "".join(preorder(tree))
    assert seq.count("#") == len(preorder(tree)) + 1


def test_empty_tree():
    assert serialize(None) == "#"
    assert deserialize("#") is None
    assert deserialize("") is None


def test_is_subtree():
    tree = parse(TEXT)
    assert is_subtree(tree, parse("C(,F(H,I))"))
    assert is_subtree(tree, parse("G"))
    assert is_subtree(tree, tree)


def test_is_not_subtree():
    tree = parse(TEXT)
    assert not is_subtree(tree, parse("C(,F(H,J))"))
    assert not is_subtree(tree, parse("C(,F(H))"))
    assert not is_subtree(tree, parse("c(,f(h,i))"))


@pytest.mark.parametrize("text", TREES)
def test_shape_serialization_symbols(text):
    tree = parse(text)
    shape = shape_serialize(tree)
    assert set(shape) == {"@", "#"}
    assert len(shape) == len(serialize(tree))
    assert shape.count("#") == shape.count("@") + 1


def test_same_shape_subtree():
    tree = parse(TEXT)
    assert has_same_shape_subtree(tree, parse("c(,f(h,i))"))
    assert has_same_shape_subtree(tree, parse("x(y,z)"))


def test_no_same_shape_subtree():
    tree = parse(TEXT)
    assert not has_same_shape_subtree(tree, parse("x(y(z),w)"))