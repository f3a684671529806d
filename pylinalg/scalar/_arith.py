"""
Arithmetic kernels for the scalar numeric tower.

Exact kernels operate on (numerator, denominator) integer pairs and return
unreduced pairs; reduction happens once, in the Rational constructor.
Float kernels follow IEEE 754: division by zero and domain errors produce
inf/nan instead of raising, which plain Python floats do not do.
"""

from __future__ import annotations

import math

import numpy as np

from pylinalg.core.exceptions import NonFiniteError

Pair = tuple[int, int]


# ═══════════════════════════════════════════════════════════════════════
# Exact (numerator, denominator) kernels
# ═══════════════════════════════════════════════════════════════════════


def reduce_pair(numerator: int, denominator: int) -> Pair:
    """
    Divide out the gcd and move the sign onto the numerator.

    The caller guarantees denominator != 0, so the gcd is positive.
    Zero reduces to 0/1.
    """
    g = math.gcd(numerator, denominator)
    numerator //= g
    denominator //= g
    if denominator < 0:
        return -numerator, -denominator
    return numerator, denominator


def add_exact(a: Pair, b: Pair) -> Pair:
    return a[0] * b[1] + b[0] * a[1], a[1] * b[1]


def sub_exact(a: Pair, b: Pair) -> Pair:
    return a[0] * b[1] - b[0] * a[1], a[1] * b[1]


def mul_exact(a: Pair, b: Pair) -> Pair:
    return a[0] * b[0], a[1] * b[1]


def div_exact(a: Pair, b: Pair) -> Pair:
    # b[0] == 0 yields a zero denominator; the constructor rejects it
    return a[0] * b[1], a[1] * b[0]


def pow_exact(a: Pair, exponent: int) -> Pair:
    if exponent >= 0:
        return a[0] ** exponent, a[1] ** exponent
    return a[1] ** -exponent, a[0] ** -exponent


def truncate_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero (denominator > 0)."""
    quotient = abs(numerator) // denominator
    return -quotient if numerator < 0 else quotient


# ═══════════════════════════════════════════════════════════════════════
# IEEE float kernels
# ═══════════════════════════════════════════════════════════════════════


def ieee_divide(x: float, y: float) -> float:
    """x / y with IEEE semantics: 1/0 -> inf, 0/0 -> nan."""
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(x) / np.float64(y))


def ieee_sqrt(x: float) -> float:
    """Square root, nan for negative input."""
    with np.errstate(invalid='ignore'):
        return float(np.sqrt(np.float64(x)))


def ieee_power(x: float, y: float) -> float:
    """x ** y, nan where the real result is undefined (never complex)."""
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        return float(np.power(np.float64(x), np.float64(y)))


def ieee_cbrt(x: float) -> float:
    """Real cube root, negative for negative input."""
    with np.errstate(invalid='ignore'):
        return float(np.cbrt(np.float64(x)))


def ieee_exp(x: float) -> float:
    """e ** x, inf on overflow."""
    with np.errstate(over='ignore', invalid='ignore'):
        return float(np.exp(np.float64(x)))


def ratio_to_float(numerator: int, denominator: int) -> float:
    """
    Correctly rounded numerator / denominator.

    Raises:
        NonFiniteError: If the quotient is beyond the float range
    """
    try:
        return numerator / denominator
    except OverflowError as exc:
        raise NonFiniteError(
            f"{numerator}/{denominator} is too large for a float",
            value=math.inf if numerator > 0 else -math.inf,
        ) from exc


# ═══════════════════════════════════════════════════════════════════════
# Float -> fraction approximation
# ═══════════════════════════════════════════════════════════════════════


def round_half_away(x: float) -> int:
    """Round to the nearest integer, halves away from zero (not banker's)."""
    magnitude = abs(x)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return -whole if x < 0 else whole


def approximate_fraction(value: float, max_denominator: int) -> Pair:
    """
    Best fraction approximating value with denominator in 1..max_denominator.

    Starts from the nearest integer and walks the denominators upward,
    replacing the best candidate only on a strictly smaller error, so ties
    keep the smaller denominator. The result is not reduced.

    Args:
        value: Finite float to approximate
        max_denominator: Largest denominator tried

    Returns:
        (numerator, denominator) with 1 <= denominator <= max_denominator

    Raises:
        NonFiniteError: If value is NaN or infinite
    """
    if not math.isfinite(value):
        raise NonFiniteError(
            f"cannot approximate non-finite value {value} by a fraction",
            value=value,
        )

    best_num = round_half_away(value)
    best_den = 1
    best_err = abs(value - best_num)

    for den in range(2, max_denominator + 1):
        num = round_half_away(value * den)
        err = abs(value - num / den)
        if err < best_err:
            best_num, best_den, best_err = num, den, err

    return best_num, best_den
