"""
Tunable constants and tolerance tiers.

Defines the numeric knobs of the scalar and matrix engines:
- MAX_APPROX_DENOMINATOR: search bound of the float -> rational approximation
- COFACTOR_WARN_SIZE: largest square matrix whose determinant is computed
  without a cost warning
- Tolerance tiers for value comparisons of exact and floating scalars

Used by the scalar and matrix modules and by the test suite.
"""

from dataclasses import dataclass
from typing import Final


# Denominators 1..100 are tried when approximating a float by a fraction.
# Changing it changes to_rational() output for most non-dyadic floats.
MAX_APPROX_DENOMINATOR: Final[int] = 100

# Cofactor expansion is O(n!): 8x8 already needs ~40k 2x2 evaluations.
COFACTOR_WARN_SIZE: Final[int] = 8


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Two Rationals are compared exactly, never with a tolerance
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact rational arithmetic: bitwise equal values',
)

# Anything that went through float arithmetic
REAL_FP64 = ToleranceTier(
    rtol=1e-9,
    atol=1e-12,
    name='real_fp64',
    description='Double precision: a few ulps of accumulated rounding',
)

# Round trips through the bounded rational approximation
APPROX_RATIONAL = ToleranceTier(
    rtol=0.0,
    atol=1.0 / (2 * MAX_APPROX_DENOMINATOR),
    name='approx_rational',
    description='Best fraction with denominator <= MAX_APPROX_DENOMINATOR',
)


def select_tolerance(*exact_flags: bool) -> ToleranceTier:
    """Select the tier for a comparison: EXACT only if every operand is exact."""
    if exact_flags and all(exact_flags):
        return EXACT
    return REAL_FP64
