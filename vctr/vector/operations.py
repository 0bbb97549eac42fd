"""
Free functions over Vectors.

Provides dot_product() and the operations layered on it, plus functional
forms of magnitude() and scale(). Each call validates its operands before
any computation, then dispatches to the sequential or parallel backend
selected by the active ExecutionPolicy.
"""

from __future__ import annotations

import math
from typing import Any
import numpy as np

from vctr.core.compute.policy import ExecutionPolicy
from vctr.core.exceptions import (
    DegenerateOperandError,
    ValidationError,
    NON_FINITE_MAGNITUDE_MESSAGE,
    NULL_DOT_PRODUCT_MESSAGE,
    ZERO_MAGNITUDE_MESSAGE,
)
from vctr.core.validation import check_same_dimensions
from vctr.vector.backends import select_backend
from vctr.vector.vector import Vector


def _ensure_vector(value: object, name: str) -> Vector:
    if not isinstance(value, Vector):
        raise ValidationError(f"{name}: expected Vector, got {type(value).__name__}")
    return value


def dot_product(
    left: Vector,
    right: Vector,
    *,
    policy: ExecutionPolicy | None = None,
) -> Any:
    """
    Sum of pairwise products of two equal-length vectors.

    Parameters
    ----------
    left, right : Vector
        Operands of equal dimensions.
    policy : ExecutionPolicy, optional
        Overrides the default execution policy for this call.

    Returns
    -------
    Python scalar of the operands' promoted type (int for integer vectors).

    Raises
    ------
    DimensionError
        If the operands have different dimensions.
    DegenerateOperandError
        If both operands have zero dimensions.
    """
    left = _ensure_vector(left, "left")
    right = _ensure_vector(right, "right")
    n = left.dimensions()
    check_same_dimensions(n, right.dimensions())
    if n == 0:
        raise DegenerateOperandError(NULL_DOT_PRODUCT_MESSAGE, operation='dot_product')

    backend = select_backend('dot', n, policy)
    return backend.dot(left._data, right._data).item()


def are_perpendicular(
    left: Vector,
    right: Vector,
    *,
    policy: ExecutionPolicy | None = None,
) -> bool:
    """
    True if the dot product of ``left`` and ``right`` is exactly zero.

    Errors from dot_product() propagate unchanged. The comparison is
    exact; wrap dot_product() with a tolerance for float data.
    """
    return dot_product(left, right, policy=policy) == 0


def magnitude(vector: Vector, *, policy: ExecutionPolicy | None = None) -> float:
    """Euclidean norm of ``vector``. See Vector.magnitude()."""
    return _ensure_vector(vector, "vector").magnitude(policy=policy)


def scale(
    vector: Vector,
    scalar: Any,
    *,
    policy: ExecutionPolicy | None = None,
) -> Vector:
    """
    Multiply every element of ``vector`` by ``scalar`` in place.

    Returns the same vector for chaining. See Vector.scale().
    """
    _ensure_vector(vector, "vector").scale(scalar, policy=policy)
    return vector


def unit_vector(vector: Vector, *, policy: ExecutionPolicy | None = None) -> Vector:
    """
    New vector with the direction of ``vector`` and magnitude 1.

    The result is floating point (float64 for integer or float64 input,
    float32 for float32 input, complex for complex input). The division
    runs in double precision, so elements near either end of the float
    range still give an accurate direction.

    Raises
    ------
    DegenerateOperandError
        If ``vector`` has zero magnitude, including zero dimensions, or
        its magnitude is not finite (an element is inf or nan, or the
        norm exceeds the float64 range).
    """
    vector = _ensure_vector(vector, "vector")
    length = vector.magnitude(policy=policy)
    if length == 0.0:
        raise DegenerateOperandError(ZERO_MAGNITUDE_MESSAGE, operation='unit_vector')
    if not math.isfinite(length):
        raise DegenerateOperandError(NON_FINITE_MAGNITUDE_MESSAGE, operation='unit_vector')

    dtype = np.result_type(vector.dtype, np.float32)
    if np.issubdtype(vector.dtype, np.integer):
        dtype = np.dtype(np.float64)
    result = Vector(vector, dtype=np.result_type(vector.dtype, np.float64))
    reciprocal = 1.0 / length
    if math.isfinite(reciprocal):
        result.scale(reciprocal, policy=policy)
    else:
        # subnormal length; its reciprocal overflows
        np.divide(result._data, length, out=result._data)
    if result.dtype != dtype:
        result = Vector(result, dtype=dtype)
    return result
