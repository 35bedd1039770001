import pytest

from dslabs.arrays import (
    SparseMatrix,
    Triple,
    format_grid,
    packed_add,
    packed_multiply,
    packed_value,
    saddle_points,
    spiral_matrix,
)

A1 = [[1, 0, 3, 0], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 1, 1]]
B1 = [[3, 0, 0, 0], [0, 4, 0, 0], [0, 0, 1, 0], [0, 0, 0, 2]]
SADDLE = [[9, 7, 6, 8], [20, 26, 22, 25], [28, 36, 25, 30], [12, 4, 2, 6]]


def test_from_dense_round_trip():
    assert SparseMatrix.from_dense(A1).to_dense() == A1


def test_triples_are_row_major_and_non_zero():
    m = SparseMatrix.from_dense(A1)
    keys = [(t.r, t.c) for t in m.data]
    assert keys == sorted(keys)
    assert all(t.d != 0 for t in m.data)
    assert all(isinstance(t, Triple) for t in m.data)


def test_get_matches_dense():
    m = SparseMatrix.from_dense(A1)
    assert all(m.get(i, j) == A1[i][j] for i in range(4) for j in range(4))


def test_transpose():
    m = SparseMatrix.from_dense(A1)
    t = m.transpose()
    assert t.to_dense() == [list(col) for col in zip(*A1)]
    assert t.transpose() == m


def test_add_matches_dense_sum():
    s = SparseMatrix.from_dense(A1).add(SparseMatrix.from_dense(B1))
    assert s.to_dense() == [[x + y for x, y in zip(ra, rb)] for ra, rb in zip(A1, B1)]
    keys = [(t.r, t.c) for t in s.data]
    assert keys == sorted(keys)


def test_add_with_negation_cancels():
    a = SparseMatrix.from_dense(A1)
    neg = SparseMatrix.from_dense([[-v for v in row] for row in A1])
    assert a.add(neg).data == []


def test_add_shape_mismatch():
    with pytest.raises(ValueError):
        SparseMatrix.from_dense(A1).add(SparseMatrix.from_dense([[1, 2]]))


def test_multiply_by_identity():
    identity = [[int(i == j) for j in range(4)] for i in range(4)]
    a = SparseMatrix.from_dense(A1)
    assert a.multiply(SparseMatrix.from_dense(identity)) == a


def test_multiply_matches_dense_product():
    product = SparseMatrix.from_dense(A1).multiply(SparseMatrix.from_dense(B1))
    expected = [
        [sum(A1[i][k] * B1[k][j] for k in range(4)) for j in range(4)] for i in range(4)
    ]
    assert product.to_dense() == expected


def test_multiply_shape_mismatch():
    with pytest.raises(ValueError):
        SparseMatrix.from_dense([[1, 2, 3]]).multiply(SparseMatrix.from_dense([[1, 2]]))


def test_to_string_layout():
    m = SparseMatrix.from_dense(A1)
    lines = m.to_string().splitlines()
    assert lines[0] == f"\t4\t4\t{len(m.data)}"
    assert lines[1] == "\t------------------"
    assert lines[2:] == [f"\t{t.r}\t{t.c}\t{t.d}" for t in m.data]


def test_to_string_empty_matrix():
    assert SparseMatrix.from_dense([[0, 0], [0, 0]]).to_string() == ""


def test_spiral_small():
    assert spiral_matrix(3) == [[1, 2, 3], [8, 9, 4], [7, 6, 5]]


@pytest.mark.parametrize("n", [1, 2, 4, 5, 9])
def test_spiral_invariants(n):
    grid = spiral_matrix(n)
    assert sorted(v for row in grid for v in row) == list(range(1, n * n + 1))
    assert grid[0] == list(range(1, n + 1))
    where = {grid[i][j]: (i, j) for i in range(n) for j in range(n)}
    for k in range(1, n * n):
        (i1, j1), (i2, j2) = where[k], where[k + 1]
        assert abs(i1 - i2) + abs(j1 - j2) == 1


def test_spiral_negative():
    with pytest.raises(ValueError):
        spiral_matrix(-1)


def test_saddle_point_demo():
    assert saddle_points(SADDLE) == [(2, 2, 25)]


def test_saddle_point_none():
    assert saddle_points([[1, 2], [2, 1]]) == []


def test_saddle_points_satisfy_definition():
    for i, j, v in saddle_points(SADDLE):
        assert v == min(SADDLE[i]) == max(row[j] for row in SADDLE)


def _pack(dense):
    return [dense[i][j] for i in range(len(dense)) for j in range(i + 1)]


SYM = [[1, 2, 4, 7], [2, 3, 5, 8], [4, 5, 6, 9], [7, 8, 9, 10]]


def test_packed_value_round_trip():
    packed = _pack(SYM)
    assert all(packed_value(packed, i, j) == SYM[i][j] for i in range(4) for j in range(4))


def test_packed_add():
    ones = [1] * 10
    assert packed_add(_pack(SYM), ones, 4) == [[v + 1 for v in row] for row in SYM]


def test_packed_multiply_symmetric_product():
    product = packed_multiply(_pack(SYM), _pack(SYM), 4)
    assert product == [[sum(SYM[i][k] * SYM[k][j] for k in range(4)) for j in range(4)] for i in range(4)]
    assert product == [list(col) for col in zip(*product)]


def test_packed_too_short():
    with pytest.raises(ValueError):
        packed_add([1, 2, 3], [1, 2, 3], 4)


def test_packed_negative_index():
    with pytest.raises(IndexError):
        packed_value([1, 2, 3], -1, 0)


def test_format_grid_layout():
    rows = [[1, 22], [333, 4]]
    text = format_grid(rows)
    lines = text.splitlines()
    assert len(lines) == 2
    assert all(len(line) == 8 for line in lines)
    assert [[int(v) for v in line.split()] for line in lines] == rows
    assert text.endswith("\n")