"""Dense real matrices with 1-based indexing, as used by the orbit algorithms."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from numbers import Real
from typing import Union

Index = Union[int, tuple[int, int]]

__all__ = [
    "Matrix",
    "SingularMatrixError",
    "zeros",
    "eye",
    "transpose",
    "union_vector",
]

_PIVOT_TOLERANCE = 1e-10


class SingularMatrixError(ValueError):
    """Raised when a matrix cannot be inverted."""


class Matrix:
    """A dense matrix of floats.

    Elements are addressed with 1-based indices: ``m[i, j]`` for row ``i`` and
    column ``j``, or ``m[n]`` for the ``n``-th element in row-major order.
    """

    __slots__ = ("n_row", "n_column", "_data")

    def __init__(self, n_row: int, n_column: int | None = None) -> None:
        if n_column is None:
            n_column = n_row
        if n_row <= 0 or n_column <= 0:
            raise ValueError(f"invalid matrix size {n_row}x{n_column}")
        self.n_row = n_row
        self.n_column = n_column
        self._data = [[0.0] * n_column for _ in range(n_row)]

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> Matrix:
        """Build a matrix from an iterable of equally long rows."""
        values = [[float(v) for v in row] for row in rows]
        if not values or not values[0]:
            raise ValueError("a matrix needs at least one row and one column")
        width = len(values[0])
        if any(len(row) != width for row in values):
            raise ValueError("all rows must have the same length")
        result = cls(len(values), width)
        result._data = values
        return result

    @property
    def shape(self) -> tuple[int, int]:
        return self.n_row, self.n_column

    def tolist(self) -> list[list[float]]:
        """Return the elements as a list of row lists."""
        return [list(row) for row in self._data]

    def copy(self) -> Matrix:
        return Matrix.from_rows(self._data)

    def __iter__(self) -> Iterator[float]:
        """Iterate over the elements in row-major order."""
        for row in self._data:
            yield from row

    def __len__(self) -> int:
        return self.n_row * self.n_column

    # ----------------------------------------------------------- element access

    def _locate(self, index: Index) -> tuple[int, int]:
        if isinstance(index, tuple):
            row, column = index
            if not (1 <= row <= self.n_row and 1 <= column <= self.n_column):
                raise IndexError(
                    f"index ({row}, {column}) out of range for "
                    f"{self.n_row}x{self.n_column} matrix"
                )
            return row - 1, column - 1
        if not 1 <= index <= self.n_row * self.n_column:
            raise IndexError(
                f"index {index} out of range for "
                f"{self.n_row}x{self.n_column} matrix"
            )
        return divmod(index - 1, self.n_column)

    def __getitem__(self, index: Index) -> float:
        i, j = self._locate(index)
        return self._data[i][j]

    def __setitem__(self, index: Index, value: float) -> None:
        i, j = self._locate(index)
        self._data[i][j] = float(value)

    # --------------------------------------------------------------- arithmetic

    def _check_same_shape(self, other: Matrix, what: str) -> None:
        if self.shape != other.shape:
            raise ValueError(
                f"{what}: shapes {self.n_row}x{self.n_column} and "
                f"{other.n_row}x{other.n_column} differ"
            )

    def _map(self, func) -> Matrix:
        return Matrix.from_rows([func(v) for v in row] for row in self._data)

    def _zip(self, other: Matrix, func) -> Matrix:
        return Matrix.from_rows(
            [func(a, b) for a, b in zip(row_a, row_b)]
            for row_a, row_b in zip(self._data, other._data)
        )

    def __add__(self, other: Matrix | float) -> Matrix:
        if isinstance(other, Matrix):
            self._check_same_shape(other, "matrix sum")
            return self._zip(other, lambda a, b: a + b)
        if isinstance(other, Real):
            s = float(other)
            return self._map(lambda v: v + s)
        return NotImplemented

    def __radd__(self, other: float) -> Matrix:
        if isinstance(other, Real):
            return self + other
        return NotImplemented

    def __sub__(self, other: Matrix | float) -> Matrix:
        if isinstance(other, Matrix):
            self._check_same_shape(other, "matrix difference")
            return self._zip(other, lambda a, b: a - b)
        if isinstance(other, Real):
            s = float(other)
            return self._map(lambda v: v - s)
        return NotImplemented

    def __rsub__(self, other: float) -> Matrix:
        if isinstance(other, Real):
            s = float(other)
            return self._map(lambda v: s - v)
        return NotImplemented

    def __neg__(self) -> Matrix:
        return self._map(lambda v: -v)

    def __mul__(self, other: Matrix | float) -> Matrix:
        if isinstance(other, Matrix):
            if self.n_column != other.n_row:
                raise ValueError(
                    f"matrix product: {self.n_row}x{self.n_column} times "
                    f"{other.n_row}x{other.n_column}"
                )
            columns = list(zip(*other._data))
            return Matrix.from_rows(
                [math.fsum(a * b for a, b in zip(row, col)) for col in columns]
                for row in self._data
            )
        if isinstance(other, Real):
            s = float(other)
            return self._map(lambda v: v * s)
        return NotImplemented

    def __rmul__(self, other: float) -> Matrix:
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def __truediv__(self, other: Matrix | float) -> Matrix:
        if isinstance(other, Matrix):
            if self.n_column != other.n_row or other.n_row != other.n_column:
                raise ValueError(
                    "matrix division: incompatible dimensions or divisor is not square"
                )
            return self * other.inverse()
        if isinstance(other, Real):
            if other == 0:
                raise ZeroDivisionError("matrix division by zero")
            s = float(other)
            return self._map(lambda v: v / s)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self._data!r})"

    def __str__(self) -> str:
        return "".join(
            "".join("%5.20f " % v for v in row) + "\n" for row in self._data
        )

    # ------------------------------------------------------------ vector tools

    def norm(self) -> float:
        """Frobenius norm: the square root of the sum of squared elements."""
        return math.sqrt(sum(v * v for v in self))

    def dot(self, other: Matrix) -> float:
        """Sum of element-wise products of two matrices of the same shape."""
        self._check_same_shape(other, "matrix dot")
        return sum(a * b for a, b in zip(self, other))

    def cross(self, other: Matrix) -> Matrix:
        """Cross product of two 3x1 column vectors."""
        if self.shape != (3, 1) or other.shape != (3, 1):
            raise ValueError("cross product needs two 3x1 vectors")
        v1, v2, v3 = self
        w1, w2, w3 = other
        return Matrix.from_rows(
            [[v2 * w3 - v3 * w2], [v3 * w1 - v1 * w3], [v1 * w2 - v2 * w1]]
        )

    def row(self, row: int) -> Matrix:
        """Return row ``row`` as a 1xN matrix."""
        if not 1 <= row <= self.n_row:
            raise IndexError(f"row index {row} out of range")
        return Matrix.from_rows([self._data[row - 1]])

    def column(self, column: int) -> Matrix:
        """Return column ``column`` as an Nx1 matrix."""
        if not 1 <= column <= self.n_column:
            raise IndexError(f"column index {column} out of range")
        return Matrix.from_rows([r[column - 1]] for r in self._data)

    def set_row(self, row: int, vector: Matrix) -> None:
        """Overwrite row ``row`` with a 1xN matrix."""
        if not 1 <= row <= self.n_row:
            raise IndexError(f"row index {row} out of range")
        if vector.shape != (1, self.n_column):
            raise ValueError("set_row: vector dimensions mismatch")
        self._data[row - 1] = list(vector)

    def set_column(self, column: int, vector: Matrix) -> None:
        """Overwrite column ``column`` with an Nx1 matrix."""
        if not 1 <= column <= self.n_column:
            raise IndexError(f"column index {column} out of range")
        if vector.shape != (self.n_row, 1):
            raise ValueError("set_column: vector dimensions mismatch")
        for target, value in zip(self._data, vector):
            target[column - 1] = value

    def extract(self, start: int, stop: int) -> Matrix:
        """Elements ``start`` to ``stop`` (inclusive, row-major) as a 1xN matrix."""
        total = self.n_row * self.n_column
        if not (1 <= start <= total and start <= stop <= total):
            raise IndexError(f"invalid range from {start} to {stop}")
        flat = list(self)
        return Matrix.from_rows([flat[start - 1 : stop]])

    def inverse(self) -> Matrix:
        """Inverse by Gauss-Jordan elimination with partial pivoting."""
        if self.n_row != self.n_column:
            raise ValueError("matrix inverse: matrix must be square")
        n = self.n_row
        work = self.tolist()
        inv = eye(n).tolist()

        for col in range(n):
            max_row = max(range(col, n), key=lambda r: abs(work[r][col]))
            if abs(work[max_row][col]) < _PIVOT_TOLERANCE:
                raise SingularMatrixError("matrix is singular (non-invertible)")
            if max_row != col:
                work[col], work[max_row] = work[max_row], work[col]
                inv[col], inv[max_row] = inv[max_row], inv[col]

            pivot = work[col][col]
            work[col] = [v / pivot for v in work[col]]
            inv[col] = [v / pivot for v in inv[col]]

            for r in range(n):
                if r == col:
                    continue
                factor = work[r][col]
                work[r] = [a - factor * b for a, b in zip(work[r], work[col])]
                inv[r] = [a - factor * b for a, b in zip(inv[r], inv[col])]

        return Matrix.from_rows(inv)


def zeros(n_row: int, n_column: int | None = None) -> Matrix:
    """An ``n_row`` x ``n_column`` matrix of zeros (square if one size is given)."""
    return Matrix(n_row, n_column)


def eye(n: int) -> Matrix:
    """The n x n identity matrix."""
    result = Matrix(n, n)
    for i in range(1, n + 1):
        result[i, i] = 1.0
    return result


def transpose(m: Matrix) -> Matrix:
    """The transpose of ``m``."""
    return Matrix.from_rows(zip(*m.tolist()))


def union_vector(v1: Matrix, v2: Matrix) -> Matrix:
    """Stack two row vectors into a 2xN matrix, or two column vectors into Nx2."""
    is_row = v1.n_row == 1 and v2.n_row == 1
    is_column = v1.n_column == 1 and v2.n_column == 1
    if not is_row and not is_column:
        raise ValueError("union_vector: inputs must be row or column vectors")
    if is_row:
        if v1.n_column != v2.n_column:
            raise ValueError("union_vector: row vectors must have equal columns")
        return Matrix.from_rows([list(v1), list(v2)])
    if v1.n_row != v2.n_row:
        raise ValueError("union_vector: column vectors must have equal rows")
    return Matrix.from_rows(zip(v1, v2))