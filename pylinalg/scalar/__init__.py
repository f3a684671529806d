"""
Scalar numeric tower.

Public API:
    Scalar        - abstract base; Scalar.rational / Scalar.real / Scalar.of
    Rational      - exact fraction in lowest terms
    Real          - IEEE double
    lnum(value)   - literal -> Scalar (int -> Rational, float -> Real)
"""

from pylinalg.scalar.scalar import Scalar, Rational, Real, lnum

__all__ = [
    "Scalar",
    "Rational",
    "Real",
    "lnum",
]
