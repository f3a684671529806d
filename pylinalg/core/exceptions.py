"""
Exception hierarchy for pylinalg.

All exceptions inherit from PyLinalgError to allow catching any
library-specific error. Matrix and vector shape failures derive from
DimensionError; arithmetic failures derive from NumericalError.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinalgError(Exception):
    """Base exception for all pylinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs (cell values, dimensions, arrays)
    fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Shape of an input is malformed.

    Raised for empty or ragged literals, non-positive dimensions and
    arrays of the wrong dimensionality.
    """
    pass


class DimensionMismatchError(DimensionError):
    """
    Operand shapes are incompatible for an operation.

    The recoverable error of the matrix engine: raised by elementwise
    add/subtract on different shapes, by matrix products whose inner
    dimensions disagree and by determinant of a non-square matrix.

    Attributes:
        operation: Name of the failing operation ('add', 'matmul', ...)
        left_shape: Shape of the left (or only) operand
        right_shape: Shape of the right operand, if any
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, ...] | None = None,
        right_shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class NumericalError(PyLinalgError):
    """
    Numerical computation failed.

    Base class for errors arising from scalar arithmetic.
    """
    pass


class ZeroDenominatorError(NumericalError, ZeroDivisionError):
    """
    An exact rational with a zero denominator was requested.

    Raised by Rational construction with denominator 0 and by exact
    division by a zero Rational. Also a ZeroDivisionError, so callers
    using the builtin exception keep working.

    Attributes:
        numerator: Numerator of the rejected fraction
    """

    def __init__(self, message: str, numerator: int | None = None):
        super().__init__(message)
        self.numerator = numerator


class NonFiniteError(NumericalError):
    """
    A NaN or infinite float cannot be represented exactly.

    Attributes:
        value: The offending float
    """

    def __init__(self, message: str, value: float | None = None):
        super().__init__(message)
        self.value = value
