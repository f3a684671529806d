"""
Tests for determinant by cofactor expansion.

Validates:
    - Base cases (1x1, 2x2) and the general expansion
    - Exactness for all-Rational matrices, promotion for Real ones
    - DimensionMismatchError on non-square input
    - Cost warning above COFACTOR_WARN_SIZE
    - Agreement with numpy.linalg.det on random integer matrices
"""

import warnings

import numpy as np
import pytest

from pylinalg import DimensionMismatchError, Matrix, Rational, Real, matrix
from pylinalg.core.constants import COFACTOR_WARN_SIZE
from pylinalg.matrices._determinant import cofactor_determinant


class TestBaseCases:

    def test_1x1_returns_cell(self):
        assert matrix([Rational(7, 3)]).determinant() == Rational(7, 3)

    def test_1x1_real(self):
        assert matrix([2.5]).determinant() == Real(2.5)

    def test_2x2(self, int_2x2):
        assert int_2x2.determinant() == Rational(-2)

    def test_2x2_real(self):
        assert matrix([1.0, 2.0], [3.0, 4.0]).determinant() == Real(-2.0)

    def test_2x2_mixed_promotes(self):
        det = matrix([1, 2.0], [3, 4]).determinant()
        assert det.is_real()
        assert det == Real(-2.0)


class TestCofactorExpansion:

    def test_singular_3x3(self, int_3x3_singular):
        assert int_3x3_singular.determinant() == Rational(0)

    def test_3x3(self):
        m = matrix([2, 0, 1], [1, 3, 2], [1, 1, 2])
        assert m.determinant() == Rational(6)

    def test_sign_alternation(self):
        # only the middle cofactor of the first row contributes
        m = matrix([0, 1, 0], [1, 0, 0], [0, 0, 1])
        assert m.determinant() == Rational(-1)

    def test_4x4_permutation(self):
        m = matrix([0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1], [1, 0, 0, 0])
        assert m.determinant() == Rational(-1)

    def test_hilbert_exact(self, hilbert_4):
        det = hilbert_4.determinant()
        assert det.is_rational()
        assert det == Rational(1, 6048000)

    def test_exact_division_keeps_exactness(self):
        m = matrix([2, 1, 1], [1, 3, 2], [1, 0, 0]) / 3
        det = m.determinant()
        assert det.is_rational()
        assert det == Rational(-1, 27)

    def test_real_3x3_is_real(self):
        m = matrix([1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 10.0])
        det = m.determinant()
        assert det.is_real()
        assert det.isclose(Real(-3.0))

    def test_transpose_invariant(self, hilbert_4):
        assert hilbert_4.T.determinant() == hilbert_4.determinant()

    def test_helper_matches_method(self, int_3x3_singular):
        assert cofactor_determinant(int_3x3_singular) == int_3x3_singular.determinant()

    @pytest.mark.parametrize("n", [3, 4, 5])
    def test_against_numpy(self, n):
        rng = np.random.default_rng(42 + n)
        values = rng.integers(-5, 6, size=(n, n))
        det = Matrix.from_array(values).determinant()
        assert det.is_rational()
        assert float(det) == pytest.approx(np.linalg.det(values), abs=1e-6)


class TestErrors:

    def test_non_square(self, real_2x3):
        with pytest.raises(DimensionMismatchError) as exc_info:
            real_2x3.determinant()
        assert exc_info.value.operation == "determinant"
        assert exc_info.value.left_shape == (2, 3)

    def test_column_vector(self):
        with pytest.raises(DimensionMismatchError):
            matrix([1], [2]).determinant()


class TestCostWarning:

    def test_warns_above_threshold(self, monkeypatch):
        monkeypatch.setattr("pylinalg.matrices.dense.COFACTOR_WARN_SIZE", 2)
        with pytest.warns(RuntimeWarning, match=r"O\(n!\)"):
            assert Matrix.identity(3).determinant() == Rational(1)

    def test_silent_at_threshold(self):
        m = Matrix.identity(4)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            m.determinant()
