"""
Core infrastructure for pylinalg.

Shared abstractions used by the scalar, matrix and vector subpackages.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    constants: Approximation bound, cost thresholds, tolerance tiers
"""

from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    DimensionError,
    DimensionMismatchError,
    NumericalError,
    ZeroDenominatorError,
    NonFiniteError,
)
from pylinalg.core.constants import (
    MAX_APPROX_DENOMINATOR,
    COFACTOR_WARN_SIZE,
    ToleranceTier,
    EXACT,
    REAL_FP64,
    APPROX_RATIONAL,
)

__all__ = [
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "DimensionMismatchError",
    "NumericalError",
    "ZeroDenominatorError",
    "NonFiniteError",
    # Constants
    "MAX_APPROX_DENOMINATOR",
    "COFACTOR_WARN_SIZE",
    "ToleranceTier",
    "EXACT",
    "REAL_FP64",
    "APPROX_RATIONAL",
]
