"""
Tests for the real-valued Vector.

Validates:
    - Every cell is forced to Real
    - dot / cross products, norm, distance, angle
    - Elementwise and scalar arithmetic, in-place forms
    - DimensionMismatchError on length mismatch
"""

import math

import numpy as np
import pytest

from pylinalg import (
    DimensionError,
    DimensionMismatchError,
    Rational,
    Real,
    Vector,
    vector,
)


class TestConstruction:

    def test_dim(self):
        assert vector(1, 2, 3).dim() == 3
        assert len(vector(1, 2)) == 2

    def test_cells_forced_real(self):
        v = vector(1, Rational(1, 2), 2.5)
        assert all(cell.is_real() for cell in v)
        assert v[1] == Real(0.5)

    def test_zeros(self):
        assert Vector.zeros(3) == vector(0, 0, 0)

    def test_zeros_rejects_zero_size(self):
        with pytest.raises(DimensionError):
            Vector.zeros(0)

    def test_from_array(self):
        assert Vector.from_array(np.array([1, 2, 3])) == vector(1, 2, 3)

    def test_from_array_rejects_2d(self):
        with pytest.raises(DimensionError):
            Vector.from_array(np.zeros((2, 2)))

    def test_to_array(self):
        np.testing.assert_array_equal(vector(1, 2, 3).to_array(), [1.0, 2.0, 3.0])

    def test_to_rationals(self):
        assert vector(0.5, 0.25).to_rationals() == (Rational(1, 2), Rational(1, 4))


class TestIndexing:

    def test_index(self):
        v = vector(1, 2, 3)
        assert v[0] == Real(1.0)
        assert v[2] == Real(3.0)

    def test_index_assignment_forces_real(self):
        v = vector(1, 2, 3)
        v[0] = 4
        v[1] = Rational(5)
        v[2] = 6.0
        assert v == vector(4, 5, 6)

    def test_out_of_range(self):
        with pytest.raises(IndexError):
            vector(1, 2)[2]

    def test_iteration(self):
        assert list(vector(1, 2, 3)) == [Real(1.0), Real(2.0), Real(3.0)]


class TestProducts:

    def test_dot_product(self):
        assert vector(1, 2, 3).dot(vector(4, 5, 6)) == Real(32.0)

    def test_dot_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            vector(1, 2).dot(vector(1, 2, 3))

    def test_cross_product(self):
        assert vector(1, 2, 3).cross(vector(4, 5, 6)) == vector(-3, 6, -3)

    def test_cross_basis(self, basis):
        e1, e2, e3 = basis
        assert e1.cross(e2) == e3
        assert e2.cross(e1) == -e3

    def test_cross_requires_3d(self):
        with pytest.raises(DimensionMismatchError) as exc_info:
            vector(1, 2).cross(vector(3, 4))
        assert exc_info.value.operation == "cross"


class TestMetrics:

    def test_norm(self):
        assert vector(3, 4).norm() == Real(5.0)

    def test_normalize(self):
        unit = vector(0, 3, 4).normalize()
        assert unit == vector(0, 0.6, 0.8)
        assert unit.norm().isclose(Real(1.0))

    def test_distance(self):
        assert vector(1, 1).distance(vector(4, 5)) == Real(5.0)

    def test_angle_orthogonal(self, basis):
        e1, e2, _ = basis
        assert e1.angle(e2).isclose(Real(math.pi / 2))

    def test_angle_parallel(self):
        assert vector(1, 0).angle(vector(3, 0)) == Real(0.0)

    def test_angle_with_zero_vector(self):
        assert math.isnan(vector(0, 0).angle(vector(1, 0)).value)


class TestArithmetic:

    def test_add(self):
        assert vector(1, 2, 3) + vector(4, 5, 6) == vector(5, 7, 9)

    def test_sub(self):
        assert vector(1, 2, 3) - vector(4, 5, 6) == vector(-3, -3, -3)

    def test_add_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            vector(1, 2) + vector(1, 2, 3)

    def test_mul(self):
        assert vector(1, 2, 3) * Real(2.0) == vector(2, 4, 6)

    def test_rmul_with_rational(self):
        result = Rational(1, 2) * vector(2, 4)
        assert result == vector(1, 2)
        assert all(cell.is_real() for cell in result)

    def test_div(self):
        assert vector(2, 4, 6) / Real(2.0) == vector(1, 2, 3)

    def test_mul_assign(self):
        v = vector(1, 2, 3)
        v *= Real(2.0)
        assert v == vector(2, 4, 6)

    def test_div_assign(self):
        v = vector(2, 4, 6)
        v /= 2
        assert v == vector(1, 2, 3)

    def test_add_assign(self):
        v = vector(1, 2, 3)
        alias = v
        v += vector(4, 5, 6)
        assert alias is v
        assert v == vector(5, 7, 9)

    def test_sub_assign(self):
        v = vector(1, 2, 3)
        v -= vector(4, 5, 6)
        assert v == vector(-3, -3, -3)

    def test_sub_assign_mismatch(self):
        v = vector(1, 2, 3)
        with pytest.raises(DimensionMismatchError):
            v -= vector(1)

    def test_vector_times_vector_unsupported(self):
        with pytest.raises(TypeError):
            vector(1, 2) * vector(1, 2)


class TestFormatting:

    def test_to_string(self):
        assert str(vector(1, 2, 3)) == "[1.0, 2.0, 3.0]"

    def test_repr(self):
        assert repr(vector(0.5)) == "Vector([0.5])"
