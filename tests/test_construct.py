import pytest

from dslabs.btree import inorder, parse, postorder, preorder, to_string
from dslabs.construct import from_post_in, from_pre_in, indented

PRE = "ABDEHJKLMNCFGI"
IN = "DBJHLKMNEAFCGI"
POST = "DJLNMKHEBFIGCA"
TEXT = "A(B(D,E(H(J,K(L,M(,N))))),C(F,G(,I)))"

TREES = [
    TEXT,
    "A",
    "A(B)",
    "A(,B)",
    "A(B(D,E(,G)),C(,F(H,I)))",
]


def test_from_pre_in_rebuilds_tree():
    assert to_string(from_pre_in(PRE, IN)) == TEXT


def test_from_post_in_rebuilds_tree():
    assert to_string(from_post_in(POST, IN)) == TEXT


def test_rebuilt_tree_has_given_sequences():
    tree = from_pre_in(PRE, IN)
    assert "".join(preorder(tree)) == PRE
    assert "".join(inorder(tree)) == IN
    assert "".join(postorder(tree)) == POST


@pytest.mark.parametrize("text", TREES)
def test_round_trip_through_pre_and_in(text):
    tree = parse(text)
    rebuilt = from_pre_in("".join(preorder(tree)), "".join(inorder(tree)))
    assert to_string(rebuilt) == text


@pytest.mark.parametrize("text", TREES)
def test_round_trip_through_post_and_in(text):
    tree = parse(text)
    rebuilt = from_post_in("".join(postorder(tree)), "".join(inorder(tree)))
    assert to_string(rebuilt) == text


def test_empty_sequences_give_empty_tree():
    assert from_pre_in("", "") is None
    assert from_post_in("", "") is None


def test_length_mismatch_rejected():
    with pytest.raises(ValueError):
        from_pre_in("AB", "A")
    with pytest.raises(ValueError):
        from_post_in("A", "AB")


def test_inconsistent_sequences_rejected():
    with pytest.raises(ValueError):
        from_pre_in("AB", "AC")
    with pytest.raises(ValueError):
        from_post_in("AB", "CB")


def test_indented_lists_nodes_in_preorder():
    lines = indented(from_pre_in(PRE, IN)).splitlines()
    assert len(lines) == len(PRE)
    assert "".join(line.strip()[0] for line in lines) == PRE


def test_indented_marks_and_alignment():
    lines = indented(from_pre_in(PRE, IN)).splitlines()
    assert lines[0].startswith("    A(B)")
    assert lines[1].startswith("        B(L)")
    assert len({len(line) for line in lines}) == 1
    c_line = next(line for line in lines if line.strip().startswith("C("))
    assert "C(R)" in c_line


def test_indented_empty_tree():
    assert indented(None) == ""