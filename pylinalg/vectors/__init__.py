"""
Real-valued vector built on the Scalar contract.

Public API:
    Vector              - 1-D vector of Real Scalars
    vector(*values)     - Vector from literals
"""

from pylinalg.vectors.dense import Vector, vector

__all__ = [
    "Vector",
    "vector",
]
