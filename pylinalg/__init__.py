"""
pylinalg: a small linear-algebra toolkit over a dual exact/real scalar.

Numbers are Scalars, either exact Rationals (reduced fractions) or Reals
(IEEE doubles). Mixing a Real into any operation promotes the result to
Real; everything built only from integers stays exact, including matrix
determinants.

Submodules:
    scalar: Scalar / Rational / Real numeric tower
    matrices: dense Matrix with arithmetic, transpose and determinant
    vectors: real-valued Vector with dot and cross products
    core: exceptions, validators and tunable constants
"""

__version__ = "0.1.0"

from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    DimensionError,
    DimensionMismatchError,
    NumericalError,
    ZeroDenominatorError,
    NonFiniteError,
)
from pylinalg.scalar import Scalar, Rational, Real, lnum
from pylinalg.matrices import Matrix, matrix
from pylinalg.vectors import Vector, vector

__all__ = [
    "__version__",
    # Numbers
    "Scalar",
    "Rational",
    "Real",
    "lnum",
    # Containers
    "Matrix",
    "matrix",
    "Vector",
    "vector",
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "DimensionMismatchError",
    "NumericalError",
    "ZeroDenominatorError",
    "NonFiniteError",
]
