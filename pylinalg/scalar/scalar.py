"""
Scalar: a number that is either an exact rational or a floating real.

The numeric tower has exactly two variants:

    Rational(numerator, denominator)   exact, always in lowest terms,
                                       denominator > 0
    Real(value)                        IEEE double

Promotion rule (applied by _promote for every binary operator):
    Rational op Rational  -> Rational, computed exactly and re-reduced
    anything op Real      -> Real, Rational operands converted to float first

Scalars are immutable; compound assignment (+=, ...) rebinds the name to
the binary result. Equality is variant-sensitive: Rational(2) != Real(2.0).
Ordering compares mathematical value.

Examples:
    >>> Scalar.rational(2, 4)
    Rational(numerator=1, denominator=2)
    >>> str(lnum(1) / lnum(3) + lnum(1) / lnum(6))
    '1/2'
    >>> (lnum(1) + lnum(0.5)).is_real()
    True
"""

from __future__ import annotations

import math
import numbers
import operator
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Callable

from pylinalg.core.constants import MAX_APPROX_DENOMINATOR, ToleranceTier, select_tolerance
from pylinalg.core.exceptions import (
    NonFiniteError,
    ValidationError,
    ZeroDenominatorError,
)
from pylinalg.core.validation import check_numeric
from pylinalg.scalar import _arith
from pylinalg.scalar._arith import Pair


class Scalar:
    """
    Abstract base of the Rational / Real sum type.

    Never instantiated directly; use Scalar.rational, Scalar.real or
    Scalar.of (alias lnum).
    """

    __slots__ = ()

    # -----------------------------------------------------------------
    # Construction
    # -----------------------------------------------------------------

    @staticmethod
    def rational(numerator: int, denominator: int = 1) -> Rational:
        """Exact fraction, reduced by the gcd of numerator and denominator."""
        return Rational(numerator, denominator)

    @staticmethod
    def real(value: float) -> Real:
        """Floating value, stored as-is."""
        return Real(value)

    @staticmethod
    def of(value: Any) -> Scalar:
        """
        Convert a literal to a Scalar.

        int -> Rational(value, 1), Fraction -> Rational, float -> Real,
        Scalar -> itself.

        Raises:
            ValidationError: If value is a bool or not a real number
        """
        if isinstance(value, Scalar):
            return value
        check_numeric(value, "value")
        return _coerce(value)

    # -----------------------------------------------------------------
    # Variant predicates and conversions
    # -----------------------------------------------------------------

    def is_rational(self) -> bool:
        return isinstance(self, Rational)

    def is_real(self) -> bool:
        return isinstance(self, Real)

    def to_rational(self) -> Rational:
        raise NotImplementedError

    def to_real(self) -> Real:
        raise NotImplementedError

    def __float__(self) -> float:
        raise NotImplementedError

    def __int__(self) -> int:
        raise NotImplementedError

    def __trunc__(self) -> int:
        return int(self)

    def __bool__(self) -> bool:
        return float(self) != 0.0

    # -----------------------------------------------------------------
    # Arithmetic
    # -----------------------------------------------------------------

    def __add__(self, other):
        return _promote(self, other, _arith.add_exact, operator.add)

    def __radd__(self, other):
        return _promote(other, self, _arith.add_exact, operator.add)

    def __sub__(self, other):
        return _promote(self, other, _arith.sub_exact, operator.sub)

    def __rsub__(self, other):
        return _promote(other, self, _arith.sub_exact, operator.sub)

    def __mul__(self, other):
        return _promote(self, other, _arith.mul_exact, operator.mul)

    def __rmul__(self, other):
        return _promote(other, self, _arith.mul_exact, operator.mul)

    def __truediv__(self, other):
        return _promote(self, other, _arith.div_exact, _arith.ieee_divide)

    def __rtruediv__(self, other):
        return _promote(other, self, _arith.div_exact, _arith.ieee_divide)

    def __pow__(self, exponent):
        exponent = _coerce(exponent)
        if exponent is None:
            return NotImplemented
        if (
            isinstance(self, Rational)
            and isinstance(exponent, Rational)
            and exponent.denominator == 1
        ):
            return Rational(*_arith.pow_exact(self._pair(), exponent.numerator))
        return Real(_arith.ieee_power(float(self), float(exponent)))

    def __rpow__(self, base):
        base = _coerce(base)
        if base is None:
            return NotImplemented
        return base ** self

    def __neg__(self) -> Scalar:
        raise NotImplementedError

    def __pos__(self) -> Scalar:
        return self

    def inverse(self) -> Scalar:
        """Multiplicative inverse, 1 / self."""
        return Rational(1) / self

    def sqrt(self) -> Real:
        """Square root as a Real (nan for negative values)."""
        return Real(_arith.ieee_sqrt(float(self)))

    def cbrt(self) -> Real:
        """Real cube root; defined for negative values."""
        return Real(_arith.ieee_cbrt(float(self)))

    def exp(self) -> Real:
        """e raised to self, inf on overflow."""
        return Real(_arith.ieee_exp(float(self)))

    # -----------------------------------------------------------------
    # Comparison
    # -----------------------------------------------------------------

    def __lt__(self, other):
        return _order(self, other, operator.lt)

    def __le__(self, other):
        return _order(self, other, operator.le)

    def __gt__(self, other):
        return _order(self, other, operator.gt)

    def __ge__(self, other):
        return _order(self, other, operator.ge)

    def isclose(self, other: Any, tier: ToleranceTier | None = None) -> bool:
        """
        Value comparison that ignores the variant.

        Two Rationals are compared exactly unless a tier is given; any Real
        operand uses the REAL_FP64 tier.
        """
        other = Scalar.of(other)
        if tier is None:
            tier = select_tolerance(self.is_rational(), other.is_rational())
        if tier.rtol == 0.0 and tier.atol == 0.0:
            if isinstance(self, Rational) and isinstance(other, Rational):
                return self == other
            return float(self) == float(other)
        return math.isclose(
            float(self), float(other), rel_tol=tier.rtol, abs_tol=tier.atol
        )


@dataclass(frozen=True, slots=True)
class Rational(Scalar):
    """
    Exact fraction in lowest terms.

    Invariants (enforced on every construction):
        gcd(numerator, denominator) == 1
        denominator > 0

    Raises:
        ValidationError: If either part is not an integer
        ZeroDenominatorError: If denominator is 0
    """
    numerator: int
    denominator: int = 1

    def __post_init__(self):
        num = _check_integer(self.numerator, "numerator")
        den = _check_integer(self.denominator, "denominator")
        if den == 0:
            raise ZeroDenominatorError(
                f"Rational denominator must be non-zero (numerator={num})",
                numerator=num,
            )
        num, den = _arith.reduce_pair(num, den)
        object.__setattr__(self, "numerator", num)
        object.__setattr__(self, "denominator", den)

    def _pair(self) -> Pair:
        return self.numerator, self.denominator

    def to_rational(self) -> Rational:
        return self

    def to_real(self) -> Real:
        return Real(float(self))

    def to_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    def __float__(self) -> float:
        return _arith.ratio_to_float(self.numerator, self.denominator)

    def __int__(self) -> int:
        return _arith.truncate_div(self.numerator, self.denominator)

    def __bool__(self) -> bool:
        return self.numerator != 0

    def __neg__(self) -> Rational:
        return Rational(-self.numerator, self.denominator)

    def __abs__(self) -> Rational:
        return Rational(abs(self.numerator), self.denominator)

    def __str__(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"


@dataclass(frozen=True, slots=True)
class Real(Scalar):
    """
    Double-precision value. No normalization is applied.

    Raises:
        ValidationError: If value is a bool or not a real number
        NonFiniteError: If an integer value is beyond the float range
    """
    value: float

    def __post_init__(self):
        check_numeric(self.value, "value")
        try:
            value = float(self.value)
        except OverflowError as exc:
            raise NonFiniteError(
                f"value {self.value!r} is too large for a float",
                value=math.inf if self.value > 0 else -math.inf,
            ) from exc
        object.__setattr__(self, "value", value)

    def to_rational(self) -> Rational:
        """
        Best fraction with denominator <= MAX_APPROX_DENOMINATOR.

        Lossy: Real(x).to_rational().to_real() equals x only when x is
        such a fraction.

        Raises:
            NonFiniteError: If the value is NaN or infinite
        """
        return Rational(*_arith.approximate_fraction(self.value, MAX_APPROX_DENOMINATOR))

    def to_real(self) -> Real:
        return self

    def __float__(self) -> float:
        return self.value

    def __int__(self) -> int:
        if not math.isfinite(self.value):
            raise NonFiniteError(
                f"cannot convert non-finite value {self.value} to int",
                value=self.value,
            )
        return math.trunc(self.value)

    def __neg__(self) -> Real:
        return Real(-self.value)

    def __abs__(self) -> Real:
        return Real(abs(self.value))

    def __str__(self) -> str:
        return str(self.value)


def lnum(value: Any) -> Scalar:
    """Shorthand for Scalar.of."""
    return Scalar.of(value)


# ═══════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════


def _check_integer(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(f"{name}: expected an integer, got {value!r}")
    return int(value)


def _coerce(value: Any) -> Scalar | None:
    """Operand coercion for the dunder methods; None means NotImplemented."""
    if isinstance(value, Scalar):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        return Rational(int(value), 1)
    if isinstance(value, Fraction):
        return Rational(value.numerator, value.denominator)
    if isinstance(value, numbers.Real):
        return Real(value)
    return None


def _promote(
    left: Any,
    right: Any,
    exact_op: Callable[[Pair, Pair], Pair],
    real_op: Callable[[float, float], float],
):
    """Apply the promotion rule: exact if both Rational, else float."""
    left = _coerce(left)
    right = _coerce(right)
    if left is None or right is None:
        return NotImplemented
    if isinstance(left, Rational) and isinstance(right, Rational):
        return Rational(*exact_op(left._pair(), right._pair()))
    return Real(real_op(float(left), float(right)))


def _order(left: Scalar, right: Any, op: Callable[[Any, Any], bool]):
    right = _coerce(right)
    if right is None:
        return NotImplemented
    if isinstance(left, Rational) and isinstance(right, Rational):
        # denominators are positive, so cross-multiplying keeps the order
        return op(left.numerator * right.denominator, right.numerator * left.denominator)
    return op(float(left), float(right))
