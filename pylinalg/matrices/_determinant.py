"""
Determinant by cofactor (Laplace) expansion along the first row.

No pivoting and no row reduction: the expansion only uses Scalar
+, - and *, so a matrix of Rationals yields an exact Rational result.
Cost is O(n!), acceptable for small matrices only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pylinalg.scalar import Rational, Scalar

if TYPE_CHECKING:
    from pylinalg.matrices.dense import Matrix

_PLUS = Rational(1)
_MINUS = Rational(-1)


def cofactor_determinant(matrix: Matrix) -> Scalar:
    """
    Determinant of a square matrix.

    The caller has already checked squareness.
        1x1: the single cell
        2x2: a*d - b*c
        nxn: sum over columns i of (-1)^i * m[0, i] * det(minor(0, i))
    """
    n = matrix.rows
    if n == 1:
        return matrix.get(0, 0)
    if n == 2:
        return matrix.get(0, 0) * matrix.get(1, 1) - matrix.get(0, 1) * matrix.get(1, 0)

    det: Scalar = Rational(0)
    for i in range(n):
        sign = _PLUS if i % 2 == 0 else _MINUS
        det = det + matrix.get(0, i) * cofactor_determinant(matrix.minor(0, i)) * sign
    return det
