"""
pytest configuration and shared fixtures.
"""

import pytest

from pylinalg import Matrix, matrix, vector


@pytest.fixture
def int_2x2():
    """Exact 2x2 matrix with determinant -2."""
    return matrix([1, 2], [3, 4])


@pytest.fixture
def int_3x3_singular():
    """Exact 3x3 matrix with linearly dependent rows."""
    return matrix([1, 2, 3], [4, 5, 6], [7, 8, 9])


@pytest.fixture
def real_2x3():
    """Floating 2x3 matrix."""
    return matrix([1.0, 2.0, 3.0], [4.0, 5.0, 6.0])


@pytest.fixture
def hilbert_4():
    """4x4 Hilbert matrix with exact Rational cells."""
    from pylinalg import Rational
    return Matrix.from_rows(
        [[Rational(1, i + j + 1) for j in range(4)] for i in range(4)]
    )


@pytest.fixture
def basis():
    """Standard basis of R^3."""
    return vector(1, 0, 0), vector(0, 1, 0), vector(0, 0, 1)
