"""Sparse matrices in triple form, spiral squares, saddle points and packed symmetric matrices."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence


@dataclass(frozen=True)
class Triple:
    """One non-zero entry of a sparse matrix."""

    r: int
    c: int
    d: int


@dataclass
class SparseMatrix:
    """A matrix stored as its non-zero triples in row-major order."""

    rows: int
    cols: int
    data: list[Triple] = field(default_factory=list)

    @classmethod
    def from_dense(cls, dense: Sequence[Sequence[int]]) -> SparseMatrix:
        """Collect the non-zero entries of a dense matrix."""
        rows = len(dense)
        cols = len(dense[0]) if rows else 0
        if any(len(row) != cols for row in dense):
            raise ValueError("all rows must have the same length")
        data = [
            Triple(i, j, value)
            for i, row in enumerate(dense)
            for j, value in enumerate(row)
            if value != 0
        ]
        return cls(rows, cols, data)

    def get(self, i: int, j: int) -> int:
        """Return the value at row i, column j (0 when not stored)."""
        return next((t.d for t in self.data if t.r == i and t.c == j), 0)

    def transpose(self) -> SparseMatrix:
        """Return the transposed matrix, its triples kept in row-major order."""
        data = [
            Triple(t.c, t.r, t.d)
            for column in range(self.cols)
            for t in self.data
            if t.c == column
        ]
        return SparseMatrix(self.cols, self.rows, data)

    def add(self, other: SparseMatrix) -> SparseMatrix:
        """Return self + other; the shapes must match."""
        if (self.rows, self.cols) != (other.rows, other.cols):
            raise ValueError("matrices of different shapes cannot be added")
        a, b = self.data, other.data
        result: list[Triple] = []
        i = j = 0
        while i < len(a) and j < len(b):
            x, y = a[i], b[j]
            if (x.r, x.c) < (y.r, y.c):
                result.append(x)
                i += 1
            elif (x.r, x.c) > (y.r, y.c):
                result.append(y)
                j += 1
            else:
                total = x.d + y.d
                if total != 0:
                    result.append(Triple(x.r, x.c, total))
                i += 1
                j += 1
        result.extend(a[i:])
        result.extend(b[j:])
        return SparseMatrix(self.rows, self.cols, result)

    def multiply(self, other: SparseMatrix) -> SparseMatrix:
        """Return self × other; self's column count must equal other's row count."""
        if self.cols != other.rows:
            raise ValueError("inner dimensions do not match")
        data = []
        for i in range(self.rows):
            for j in range(other.cols):
                total = sum(self.get(i, k) * other.get(k, j) for k in range(self.cols))
                if total != 0:
                    data.append(Triple(i, j, total))
        return SparseMatrix(self.rows, other.cols, data)

    def to_dense(self) -> list[list[int]]:
        """Expand into a full list-of-rows matrix."""
        grid = [[0] * self.cols for _ in range(self.rows)]
        for t in self.data:
            grid[t.r][t.c] = t.d
        return grid

    def to_string(self) -> str:
        """Render the triple table; an all-zero matrix renders as an empty string."""
        if not self.data:
            return ""
        lines = [
            f"\t{self.rows}\t{self.cols}\t{len(self.data)}",
            "\t------------------",
        ]
        lines.extend(f"\t{t.r}\t{t.c}\t{t.d}" for t in self.data)
        return "\n".join(lines) + "\n"


def _spiral_cells(n: int) -> Iterator[tuple[int, int]]:
    for lo in range((n + 1) // 2):
        hi = n - lo - 1
        yield from ((lo, j) for j in range(lo, hi + 1))
        yield from ((i, hi) for i in range(lo + 1, hi + 1))
        yield from ((hi, j) for j in range(hi - 1, lo - 1, -1))
        yield from ((i, lo) for i in range(hi - 1, lo, -1))


def spiral_matrix(n: int) -> list[list[int]]:
    """Return the n×n square filled clockwise from the top-left with 1..n²."""
    if n < 0:
        raise ValueError("order must not be negative")
    grid = [[0] * n for _ in range(n)]
    for number, (i, j) in enumerate(_spiral_cells(n), start=1):
        grid[i][j] = number
    return grid


def saddle_points(matrix: Sequence[Sequence[int]]) -> list[tuple[int, int, int]]:
    """Return (row, column, value) for every entry that is its row's minimum and its column's maximum."""
    row_min = [min(row) for row in matrix]
    col_max = [max(column) for column in zip(*matrix)]
    return [
        (i, j, matrix[i][j])
        for i, low in enumerate(row_min)
        for j, high in enumerate(col_max)
        if low == high
    ]


def _offset(i: int, j: int) -> int:
    if i < 0 or j < 0:
        raise IndexError("matrix indices must not be negative")
    if i < j:
        i, j = j, i
    return i * (i + 1) // 2 + j


def packed_value(packed: Sequence[int], i: int, j: int) -> int:
    """Return A[i][j] of a symmetric matrix stored as its lower triangle, row by row."""
    return packed[_offset(i, j)]


def _check_packed(packed: Sequence[int], n: int) -> None:
    if len(packed) < n * (n + 1) // 2:
        raise ValueError(f"a packed {n}x{n} matrix needs {n * (n + 1) // 2} values")


def packed_add(a: Sequence[int], b: Sequence[int], n: int) -> list[list[int]]:
    """Return the dense sum of two packed symmetric n×n matrices."""
    _check_packed(a, n)
    _check_packed(b, n)
    return [[packed_value(a, i, j) + packed_value(b, i, j) for j in range(n)] for i in range(n)]


def packed_multiply(a: Sequence[int], b: Sequence[int], n: int) -> list[list[int]]:
    """Return the dense product of two packed symmetric n×n matrices."""
    _check_packed(a, n)
    _check_packed(b, n)
    return [
        [sum(packed_value(a, i, k) * packed_value(b, k, j) for k in range(n)) for j in range(n)]
        for i in range(n)
    ]


def format_grid(rows: Sequence[Sequence[int]]) -> str:
    """Render a matrix with every value right-aligned in four columns."""
    return "".join("".join(f"{value:4d}" for value in row) + "\n" for row in rows)