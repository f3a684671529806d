"""
Input validation utilities for pylinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Booleans are never accepted as numbers
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

import numbers
from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    ValidationError,
)


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a matrix/vector dimension is a positive integer.

    Args:
        value: Dimension to check
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        ValidationError: If value is not an integer
        DimensionError: If value is not positive
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected a positive integer, got {type(value).__name__}"
        )
    value = int(value)
    if value < 1:
        raise DimensionError(f"{name}: must be >= 1, got {value}")
    return value


def check_numeric(value: Any, name: str) -> None:
    """
    Verify value is a plain number (int, float, Fraction or numpy scalar).

    Args:
        value: Value to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If value is a bool, complex or non-numeric
    """
    if isinstance(value, (bool, np.bool_)):
        raise ValidationError(f"{name}: booleans are not numbers, got {value!r}")
    if not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected int or float, got {type(value).__name__}"
        )


def check_rectangular(rows: Sequence[Sequence[Any]], name: str) -> tuple[int, int]:
    """
    Verify a nested sequence is a non-empty rectangular grid.

    Args:
        rows: Sequence of rows
        name: Parameter name for error messages

    Returns:
        (n_rows, n_cols)

    Raises:
        DimensionError: If empty, if any row is empty, or if rows are ragged
    """
    if isinstance(rows, (str, bytes)) or not isinstance(rows, Sequence):
        raise DimensionError(
            f"{name}: expected a sequence of rows, got {type(rows).__name__}"
        )
    if len(rows) == 0:
        raise DimensionError(f"{name}: needs at least one row, got 0")

    lengths = []
    for i, row in enumerate(rows):
        if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
            raise DimensionError(
                f"{name}: row {i} is not a sequence, got {type(row).__name__}"
            )
        lengths.append(len(row))

    n_cols = lengths[0]
    if n_cols == 0:
        raise DimensionError(f"{name}: rows need at least one column, got 0")
    ragged = [i for i, length in enumerate(lengths) if length != n_cols]
    if ragged:
        raise DimensionError(
            f"{name}: ragged rows {ragged} (expected {n_cols} columns, "
            f"got {[lengths[i] for i in ragged]})"
        )
    return len(rows), n_cols


def check_index(index: Any, size: int, name: str) -> int:
    """
    Verify an index lies in [0, size).

    Out-of-range access is a programming error, so this raises the builtin
    IndexError rather than a pylinalg exception.

    Args:
        index: Index to check
        size: Length of the indexed axis
        name: Axis name for error messages

    Returns:
        The index as a plain int

    Raises:
        TypeError: If index is not an integer
        IndexError: If index is negative or >= size
    """
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        raise TypeError(f"{name} index must be an integer, got {type(index).__name__}")
    index = int(index)
    if not 0 <= index < size:
        raise IndexError(f"{name} index {index} out of range for size {size}")
    return index


def check_same_shape(
    left: tuple[int, ...],
    right: tuple[int, ...],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes.

    Args:
        left: Shape of the left operand
        right: Shape of the right operand
        operation: Operation name for error messages

    Raises:
        DimensionMismatchError: If shapes differ
    """
    if left != right:
        raise DimensionMismatchError(
            f"{operation}: shapes {left} and {right} differ",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_array(array: ArrayLike, name: str) -> NDArray[Any]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Integer dtypes are
    kept as-is (they map to exact rationals); bool, object and non-numeric
    dtypes are rejected.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with integer or floating dtype

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.dtype == np.bool_:
        raise ValidationError(f"{name}: bool dtype, expected numeric data")

    if not (np.issubdtype(result.dtype, np.integer) or np.issubdtype(result.dtype, np.floating)):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected integer or float data"
        )

    return result


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[Any], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[Any], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_nonempty(array: NDArray[Any], name: str) -> None:
    """
    Verify array has no zero-length axis.

    Raises:
        DimensionError: If any axis has length 0
    """
    if array.size == 0:
        raise DimensionError(f"{name}: empty array with shape {array.shape}")
