"""
Dense matrix engine over the Scalar numeric tower.

Public API:
    Matrix          - dense row-major matrix of Scalars
    matrix(*rows)   - Matrix from row literals
"""

from pylinalg.matrices.dense import Matrix, matrix

__all__ = [
    "Matrix",
    "matrix",
]
