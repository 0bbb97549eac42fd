"""
Vector arithmetic module.

Public API:
    Vector               - owning, fixed-length numeric vector
    Cursor               - random-access position within a Vector
    dot_product(a, b)    - sum of pairwise products
    are_perpendicular()  - dot product is exactly zero
    magnitude(v)         - Euclidean norm
    scale(v, s)          - in-place scalar multiplication
    unit_vector(v)       - normalised copy
"""

from vctr.vector.vector import Vector
from vctr.vector.cursor import Cursor
from vctr.vector.operations import (
    dot_product,
    are_perpendicular,
    magnitude,
    scale,
    unit_vector,
)

__all__ = [
    "Vector",
    "Cursor",
    "dot_product",
    "are_perpendicular",
    "magnitude",
    "scale",
    "unit_vector",
]
