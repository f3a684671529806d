"""
Vector: 1-D sequence of Real Scalars.

Built only on Scalar's public contract. Every stored cell is forced to
Real with Scalar.to_real(), so vector arithmetic is always floating point.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable, Iterator
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import DimensionMismatchError
from pylinalg.core.validation import (
    check_1d,
    check_array,
    check_dimension,
    check_index,
    check_nonempty,
    check_same_shape,
)
from pylinalg.scalar import Real, Scalar


class Vector:
    """Real-valued vector; length fixed at construction."""

    __slots__ = ("_cells",)

    def __init__(self, values: Iterable[Any] = ()):
        self._cells: list[Real] = [Scalar.of(v).to_real() for v in values]

    @classmethod
    def zeros(cls, size: int) -> Vector:
        return cls([0.0] * check_dimension(size, "size"))

    @classmethod
    def from_array(cls, array: ArrayLike) -> Vector:
        arr = check_array(array, "array")
        check_1d(arr, "array")
        check_nonempty(arr, "array")
        return cls(arr.tolist())

    def to_array(self) -> NDArray[np.float64]:
        return np.array([cell.value for cell in self._cells], dtype=np.float64)

    # -----------------------------------------------------------------
    # Sequence protocol
    # -----------------------------------------------------------------

    def dim(self) -> int:
        return len(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Real]:
        return iter(self._cells)

    def __getitem__(self, index: int) -> Real:
        return self._cells[check_index(index, len(self._cells), "vector")]

    def __setitem__(self, index: int, value: Any) -> None:
        self._cells[check_index(index, len(self._cells), "vector")] = Scalar.of(value).to_real()

    def to_rationals(self) -> tuple[Scalar, ...]:
        """Each cell approximated by a fraction (see Scalar.to_rational)."""
        return tuple(cell.to_rational() for cell in self._cells)

    # -----------------------------------------------------------------
    # Products and metrics
    # -----------------------------------------------------------------

    def _check_same_dim(self, other: Vector, operation: str) -> None:
        check_same_shape((self.dim(),), (other.dim(),), operation)

    def dot(self, other: Vector) -> Real:
        """Sum of cellwise products."""
        self._check_same_dim(other, "dot")
        result = Real(0.0)
        for a, b in zip(self._cells, other._cells):
            result = result + a * b
        return result

    def cross(self, other: Vector) -> Vector:
        """
        Cross product of two 3-D vectors.

        Raises:
            DimensionMismatchError: If either vector is not 3-D
        """
        if self.dim() != 3 or other.dim() != 3:
            raise DimensionMismatchError(
                f"cross: both vectors must be 3-D, got {self.dim()} and {other.dim()}",
                operation="cross",
                left_shape=(self.dim(),),
                right_shape=(other.dim(),),
            )
        a, b = self._cells, other._cells
        return Vector([
            a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0],
        ])

    def norm(self) -> Real:
        """Euclidean length."""
        return self.dot(self).sqrt()

    def normalize(self) -> Vector:
        """Unit vector in the same direction (nan cells for the zero vector)."""
        return self / self.norm()

    def distance(self, other: Vector) -> Real:
        return (self - other).norm()

    def angle(self, other: Vector) -> Real:
        """Angle in radians between the two vectors."""
        cosine = float(self.dot(other) / (self.norm() * other.norm()))
        if math.isnan(cosine):
            return Real(math.nan)
        # rounding can push |cos| slightly past 1
        return Real(math.acos(max(-1.0, min(1.0, cosine))))

    # -----------------------------------------------------------------
    # Arithmetic
    # -----------------------------------------------------------------

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_dim(other, "add")
        return Vector(a + b for a, b in zip(self._cells, other._cells))

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_dim(other, "subtract")
        return Vector(a - b for a, b in zip(self._cells, other._cells))

    def __iadd__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_dim(other, "add")
        self._cells = [a + b for a, b in zip(self._cells, other._cells)]
        return self

    def __isub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_dim(other, "subtract")
        self._cells = [a - b for a, b in zip(self._cells, other._cells)]
        return self

    def __mul__(self, other):
        scalar = _real_operand(other)
        if scalar is None:
            return NotImplemented
        return Vector(cell * scalar for cell in self._cells)

    __rmul__ = __mul__

    def __truediv__(self, other):
        scalar = _real_operand(other)
        if scalar is None:
            return NotImplemented
        return Vector(cell / scalar for cell in self._cells)

    def __imul__(self, other):
        scalar = _real_operand(other)
        if scalar is None:
            return NotImplemented
        self._cells = [cell * scalar for cell in self._cells]
        return self

    def __itruediv__(self, other):
        scalar = _real_operand(other)
        if scalar is None:
            return NotImplemented
        self._cells = [cell / scalar for cell in self._cells]
        return self

    def __neg__(self) -> Vector:
        return Vector(-cell for cell in self._cells)

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None

    def __str__(self) -> str:
        return "[" + ", ".join(str(cell) for cell in self._cells) + "]"

    def __repr__(self) -> str:
        return f"Vector({self})"


def vector(*values: Any) -> Vector:
    """
    Build a Vector from literals; every cell becomes Real.

    >>> str(vector(1, 2, 3))
    '[1.0, 2.0, 3.0]'
    """
    return Vector(values)


def _real_operand(value: Any) -> Real | None:
    if isinstance(value, Scalar):
        return value.to_real()
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return None
    return Scalar.of(value).to_real()
