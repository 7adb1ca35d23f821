"""XOR Gaussian elimination and dense matrices."""

from __future__ import annotations

from typing import Any, Iterable, MutableSequence, Sequence


def gauss_xor(mat: MutableSequence[MutableSequence[int]]) -> None:
    """Reduce a 0/1 matrix to row echelon form over GF(2), in place."""
    if not mat:
        return
    rows, cols = len(mat), len(mat[0])
    x = 0
    for y in range(cols):
        if x >= rows:
            break
        pivot = next((i for i in range(x, rows) if mat[i][y] != 0), None)
        if pivot is None:
            continue
        mat[x], mat[pivot] = mat[pivot], mat[x]
        top = mat[x]
        for row in mat[x + 1 :]:
            if row[y] != 0:
                for j in range(y, cols):
                    row[j] ^= top[j]
        x += 1


def mat_mul(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> list[list[float]]:
    """Product of an ``m x p`` and a ``p x n`` matrix given as nested lists."""
    inner = len(b)
    if any(len(row) != inner for row in a):
        raise ValueError("inner dimensions differ")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


class Matrix:
    """A rectangular matrix over any ring-like element type."""

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Iterable[Any]]) -> None:
        data = [list(r) for r in rows]
        if not data:
            raise ValueError("matrix needs at least one row")
        width = len(data[0])
        if any(len(r) != width for r in data):
            raise ValueError("rows differ in length")
        self._rows = data

    @classmethod
    def _from_rows(cls, rows: list[list[Any]]) -> Matrix:
        obj = cls.__new__(cls)
        obj._rows = rows
        return obj

    @classmethod
    def diagonal(cls, rows: int, cols: int, value: Any = 0) -> Matrix:
        """A ``rows x cols`` matrix with ``value`` on the main diagonal and zeros elsewhere."""
        return cls._from_rows(
            [[value if i == j else 0 for j in range(cols)] for i in range(rows)]
        )

    @property
    def shape(self) -> tuple[int, int]:
        return len(self._rows), len(self._rows[0]) if self._rows else 0

    def transpose(self) -> Matrix:
        return Matrix._from_rows([list(col) for col in zip(*self._rows)])

    def __neg__(self) -> Matrix:
        return Matrix._from_rows([[-v for v in row] for row in self._rows])

    def __pos__(self) -> Matrix:
        return self

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            raise ValueError("shapes differ")
        return Matrix._from_rows(
            [[x + y for x, y in zip(r1, r2)] for r1, r2 in zip(self._rows, other._rows)]
        )

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self + (-other)

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape[1] != other.shape[0]:
            raise ValueError("inner dimensions differ")
        cols = list(zip(*other._rows))
        result = []
        for row in self._rows:
            out = []
            for col in cols:
                acc = 0
                for x, y in zip(row, col):
                    acc += x * y
                out.append(acc)
            result.append(out)
        return Matrix._from_rows(result)

    __mul__ = __matmul__

    def pow(self, n: int) -> Matrix:
        """Raise a square matrix to a non-negative power."""
        rows, cols = self.shape
        if rows != cols:
            raise ValueError("matrix is not square")
        if n < 0:
            raise ValueError("exponent must be non-negative")
        result = Matrix.diagonal(rows, cols, 1)
        base = self
        while n:
            if n & 1:
                result = result @ base
            base = base @ base
            n >>= 1
        return result

    def to_list(self) -> list[list[Any]]:
        return [list(row) for row in self._rows]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self._rows!r})"