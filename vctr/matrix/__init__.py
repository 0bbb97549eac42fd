"""
Matrix module.

Public API:
    Matrix  - row-major matrix built from nested sequences or Vectors
"""

from vctr.matrix.matrix import Matrix

__all__ = [
    "Matrix",
]
