"""
Matrix: dense, row-major, fixed-size grid of Scalars.

Cells live in one flat list of length rows * cols; cell (r, c) sits at
offset r * cols + c. The shape never changes after construction, and
mutation (set, item assignment, in-place operators) only replaces cells.

Error policy:
    DimensionMismatchError   incompatible operand shapes (+, -, matrix *,
                             determinant of a non-square matrix, and the
                             in-place += / -=)
    DimensionError           empty or ragged literals, non-positive sizes
    IndexError               out-of-range cell access

Examples:
    >>> m = matrix([1, 2], [3, 4])
    >>> str(m.determinant())
    '-2'
    >>> print(m.transpose(), end='')
    [ 1 3 ]
    [ 2 4 ]
"""

from __future__ import annotations

import numbers
import warnings
from collections.abc import Iterator, Sequence
from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.constants import COFACTOR_WARN_SIZE
from pylinalg.core.exceptions import DimensionError, DimensionMismatchError
from pylinalg.core.validation import (
    check_2d,
    check_array,
    check_dimension,
    check_index,
    check_nonempty,
    check_rectangular,
    check_same_shape,
)
from pylinalg.matrices._determinant import cofactor_determinant
from pylinalg.scalar import Rational, Real, Scalar

_ZERO = Real(0.0)


class Matrix:
    """
    Dense matrix of Scalars.

    Construction:
        Matrix(rows, cols)            all cells Real(0.0)
        Matrix.from_rows([[1, 2], [3, 4]])
        Matrix.identity(n)            exact Rational identity
        Matrix.from_array(ndarray)    int dtype -> Rational, float -> Real
    """

    __slots__ = ("_rows", "_cols", "_data")

    def __init__(self, rows: int, cols: int):
        self._rows = check_dimension(rows, "rows")
        self._cols = check_dimension(cols, "cols")
        self._data: list[Scalar] = [_ZERO] * (self._rows * self._cols)

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        return cls(rows, cols)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]]) -> Matrix:
        """
        Build a matrix from a rectangular sequence of rows.

        Cells are converted with Scalar.of, so ints become exact
        Rationals and floats become Reals.

        Raises:
            DimensionError: If rows is empty or ragged
            ValidationError: If a cell is not a number
        """
        n_rows, n_cols = check_rectangular(rows, "rows")
        result = cls(n_rows, n_cols)
        result._data = [Scalar.of(value) for row in rows for value in row]
        return result

    @classmethod
    def identity(cls, n: int) -> Matrix:
        result = cls(n, n)
        result._data = [Rational(1 if i == j else 0) for i in range(n) for j in range(n)]
        return result

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Build a matrix from a 2-D numpy array (or array-like).

        Integer dtypes map to exact Rationals, floating dtypes to Reals.
        """
        arr = check_array(array, "array")
        check_2d(arr, "array")
        check_nonempty(arr, "array")
        return cls.from_rows(arr.tolist())

    def to_array(self, dtype: Any = np.float64) -> NDArray[Any]:
        """Cell values as a (rows, cols) numpy array."""
        values = np.array([float(cell) for cell in self._data], dtype=dtype)
        return values.reshape(self._rows, self._cols)

    # -----------------------------------------------------------------
    # Shape and cell access
    # -----------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return self._rows, self._cols

    def dim(self) -> tuple[int, int]:
        """Dimensions as (rows, cols)."""
        return self._rows, self._cols

    def is_square(self) -> bool:
        return self._rows == self._cols

    def _offset(self, row: Any, col: Any) -> int:
        row = check_index(row, self._rows, "row")
        col = check_index(col, self._cols, "column")
        return row * self._cols + col

    def get(self, row: int, col: int) -> Scalar:
        return self._data[self._offset(row, col)]

    def set(self, row: int, col: int, value: Any) -> None:
        self._data[self._offset(row, col)] = Scalar.of(value)

    def __getitem__(self, key: tuple[int, int]) -> Scalar:
        row, col = _unpack_key(key)
        return self.get(row, col)

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        row, col = _unpack_key(key)
        self.set(row, col, value)

    def row(self, index: int) -> tuple[Scalar, ...]:
        index = check_index(index, self._rows, "row")
        start = index * self._cols
        return tuple(self._data[start:start + self._cols])

    def col(self, index: int) -> tuple[Scalar, ...]:
        index = check_index(index, self._cols, "column")
        return tuple(self._data[index::self._cols])

    def __iter__(self) -> Iterator[tuple[Scalar, ...]]:
        for i in range(self._rows):
            yield self.row(i)

    def copy(self) -> Matrix:
        result = Matrix(self._rows, self._cols)
        result._data = list(self._data)
        return result

    # -----------------------------------------------------------------
    # Structural operations
    # -----------------------------------------------------------------

    def transpose(self) -> Matrix:
        """New cols x rows matrix with cell (j, i) = self[i, j]."""
        result = Matrix(self._cols, self._rows)
        result._data = [
            self._data[i * self._cols + j]
            for j in range(self._cols)
            for i in range(self._rows)
        ]
        return result

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def minor(self, row: int, col: int) -> Matrix:
        """
        Submatrix with one row and one column deleted.

        Raises:
            DimensionError: If the matrix has a single row or column
            IndexError: If row or col is out of range
        """
        row = check_index(row, self._rows, "row")
        col = check_index(col, self._cols, "column")
        if self._rows < 2 or self._cols < 2:
            raise DimensionError(
                f"minor: needs at least 2 rows and 2 columns, got shape {self.shape}"
            )
        result = Matrix(self._rows - 1, self._cols - 1)
        result._data = [
            self._data[i * self._cols + j]
            for i in range(self._rows) if i != row
            for j in range(self._cols) if j != col
        ]
        return result

    def determinant(self) -> Scalar:
        """
        Determinant by cofactor expansion along the first row.

        All-Rational matrices give an exact Rational result.

        Raises:
            DimensionMismatchError: If the matrix is not square
        """
        if not self.is_square():
            raise DimensionMismatchError(
                f"determinant: matrix must be square, got shape {self.shape}",
                operation="determinant",
                left_shape=self.shape,
            )
        if self._rows > COFACTOR_WARN_SIZE:
            warnings.warn(
                f"determinant of a {self._rows}x{self._cols} matrix by cofactor "
                f"expansion needs O(n!) operations and may be very slow",
                RuntimeWarning,
                stacklevel=2,
            )
        return cofactor_determinant(self)

    # -----------------------------------------------------------------
    # Arithmetic
    # -----------------------------------------------------------------

    def _map(self, fn: Callable[[Scalar], Scalar]) -> Matrix:
        result = Matrix(self._rows, self._cols)
        result._data = [fn(cell) for cell in self._data]
        return result

    def _zip(self, other: Matrix, fn: Callable[[Scalar, Scalar], Scalar]) -> Matrix:
        result = Matrix(self._rows, self._cols)
        result._data = [fn(a, b) for a, b in zip(self._data, other._data)]
        return result

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.shape, other.shape, "add")
        return self._zip(other, lambda a, b: a + b)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.shape, other.shape, "subtract")
        return self._zip(other, lambda a, b: a - b)

    def __iadd__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.shape, other.shape, "add")
        self._data = [a + b for a, b in zip(self._data, other._data)]
        return self

    def __isub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.shape, other.shape, "subtract")
        self._data = [a - b for a, b in zip(self._data, other._data)]
        return self

    def matmul(self, other: Matrix) -> Matrix:
        """
        Row-by-column product; each cell accumulates from Real(0.0).

        Raises:
            DimensionMismatchError: If self.cols != other.rows
        """
        if self._cols != other._rows:
            raise DimensionMismatchError(
                f"matmul: inner dimensions differ, {self.shape} x {other.shape}",
                operation="matmul",
                left_shape=self.shape,
                right_shape=other.shape,
            )
        result = Matrix(self._rows, other._cols)
        data = []
        for i in range(self._rows):
            for j in range(other._cols):
                total: Scalar = _ZERO
                for k in range(self._cols):
                    total += self._data[i * self._cols + k] * other._data[k * other._cols + j]
                data.append(total)
        result._data = data
        return result

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.matmul(other)

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return self.matmul(other)
        scalar = _scalar_operand(other)
        if scalar is None:
            return NotImplemented
        return self._map(lambda cell: cell * scalar)

    def __rmul__(self, other):
        scalar = _scalar_operand(other)
        if scalar is None:
            return NotImplemented
        return self._map(lambda cell: cell * scalar)

    def __imul__(self, other):
        # matrix *= matrix may change the shape; fall back to __mul__
        scalar = _scalar_operand(other)
        if scalar is None:
            return NotImplemented
        self._data = [cell * scalar for cell in self._data]
        return self

    def __truediv__(self, other):
        scalar = _scalar_operand(other)
        if scalar is None:
            return NotImplemented
        return self._map(lambda cell: cell / scalar)

    def __itruediv__(self, other):
        scalar = _scalar_operand(other)
        if scalar is None:
            return NotImplemented
        self._data = [cell / scalar for cell in self._data]
        return self

    def __neg__(self) -> Matrix:
        return self._map(lambda cell: -cell)

    # -----------------------------------------------------------------
    # Comparison and formatting
    # -----------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    __hash__ = None

    def __str__(self) -> str:
        lines = []
        for i in range(self._rows):
            cells = " ".join(str(cell) for cell in self.row(i))
            lines.append(f"[ {cells} ]\n")
        return "".join(lines)

    def __repr__(self) -> str:
        rows = ", ".join(
            "[" + ", ".join(str(cell) for cell in self.row(i)) + "]"
            for i in range(self._rows)
        )
        return f"Matrix({self._rows}x{self._cols}, [{rows}])"


def matrix(*rows: Sequence[Any]) -> Matrix:
    """
    Build a Matrix from row literals.

    >>> matrix([1, 2], [3, 4]).dim()
    (2, 2)
    """
    return Matrix.from_rows(rows)


def _unpack_key(key: Any) -> tuple[int, int]:
    if not isinstance(key, tuple) or len(key) != 2:
        raise TypeError(f"Matrix indices must be (row, col) tuples, got {key!r}")
    return key


def _scalar_operand(value: Any) -> Scalar | None:
    if isinstance(value, Scalar):
        return value
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return None
    return Scalar.of(value)
