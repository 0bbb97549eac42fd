"""
Input validation utilities for vctr.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Integer data stays integer; only floats are floats
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from vctr.core.exceptions import (
    DimensionError,
    OutOfBoundsError,
    ValidationError,
    UNEQUAL_SIZES_MESSAGE,
)


def check_elements(
    elements: ArrayLike,
    name: str,
    dtype: DTypeLike | None = None,
) -> NDArray[Any]:
    """
    Validate and copy an element sequence into a fresh 1D numpy array.

    The returned array never aliases the input, so the caller owns it
    exclusively.

    Args:
        elements: Input to validate
        name: Parameter name for error messages
        dtype: Optional element dtype to convert to

    Returns:
        Owned 1D numpy.ndarray with numeric dtype

    Raises:
        ValidationError: If input cannot be converted to a numeric 1D array
    """
    try:
        result = np.array(elements, dtype=dtype, copy=True)
    except (ValueError, TypeError, OverflowError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    # An empty list converts to float64; treat it as an empty integer vector
    # unless the caller asked for something else.
    if result.size == 0 and dtype is None and result.ndim == 1:
        result = result.astype(np.int64)

    check_numeric_dtype(result.dtype, name)
    check_1d(result, name)
    return result


def check_numeric_dtype(dtype: np.dtype, name: str) -> None:
    """
    Verify dtype is an integer, floating or complex number type.

    Args:
        dtype: Dtype to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If dtype is object, bool, string or otherwise non-numeric
    """
    if dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if dtype == np.bool_ or not np.issubdtype(dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {dtype}, expected numeric data"
        )


def check_1d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        ValidationError: If array is not 1D
    """
    if array.ndim != 1:
        raise ValidationError(
            f"{name}: expected 1D sequence, got {array.ndim}D with shape {array.shape}"
        )


def check_size(size: Any, name: str) -> int:
    """
    Verify a dimension count is a non-negative integer.

    Args:
        size: Value to check
        name: Parameter name for error messages

    Returns:
        The size as a Python int

    Raises:
        ValidationError: If size is not an integer or is negative
    """
    if isinstance(size, bool) or not isinstance(size, numbers.Integral):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(size).__name__}"
        )
    size = int(size)
    if size < 0:
        raise ValidationError(f"{name}: must be non-negative, got {size}")
    return size


def check_scalar(value: Any, name: str) -> None:
    """
    Verify value is a real or complex number (not a bool).

    Raises:
        ValidationError: If value is not a number
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Number):
        raise ValidationError(
            f"{name}: expected a number, got {type(value).__name__}"
        )


def coerce_scalar(value: Any, dtype: np.dtype, name: str) -> Any:
    """
    Verify a scalar can be stored in ``dtype`` without losing information.

    Integer storage accepts integers and integral floats (2.0) within the
    dtype's range, real storage accepts any real number, complex storage
    accepts any number.

    Args:
        value: Scalar to check
        dtype: Element dtype of the destination buffer
        name: Parameter name for error messages

    Returns:
        The scalar, converted to int for integer storage

    Raises:
        ValidationError: If value is not a number, would be truncated, or
            lies outside the range of an integer dtype
    """
    check_scalar(value, name)
    if np.issubdtype(dtype, np.integer):
        if isinstance(value, numbers.Integral):
            result = int(value)
        elif isinstance(value, numbers.Real) and float(value).is_integer():
            result = int(value)
        else:
            raise ValidationError(
                f"{name}: {value!r} cannot be stored in {dtype} elements without truncation"
            )
        info = np.iinfo(dtype)
        if result < info.min or result > info.max:
            raise ValidationError(
                f"{name}: {value!r} is outside the range of {dtype} elements "
                f"[{info.min}, {info.max}]"
            )
        return result
    if np.issubdtype(dtype, np.floating) and not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: complex value {value!r} cannot be stored in {dtype} elements"
        )
    return value


def check_castable(source: np.dtype, target: np.dtype, name: str) -> None:
    """
    Verify elements of ``source`` dtype convert to ``target`` within one kind.

    Integer to float and float to complex widen and pass; float to integer
    or complex to float would drop information and fail.

    Raises:
        ValidationError: If the conversion crosses to a narrower kind
    """
    if not np.can_cast(source, target, casting='same_kind'):
        raise ValidationError(
            f"{name}: {source} elements cannot be stored as {target} without truncation"
        )


def check_index(index: Any, dimensions: int) -> int:
    """
    Verify an element offset lies in ``[0, dimensions)``.

    Offsets are unsigned: negative indices are out of bounds rather than
    counted from the end.

    Args:
        index: Offset to check
        dimensions: Element count of the container

    Returns:
        The index as a Python int

    Raises:
        ValidationError: If index is not an integer
        OutOfBoundsError: If index is outside the container
    """
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        raise ValidationError(
            f"index: expected an integer offset, got {type(index).__name__}"
        )
    index = int(index)
    if index < 0 or index >= dimensions:
        raise OutOfBoundsError(index=index, dimensions=dimensions)
    return index


def check_same_dimensions(left: int, right: int) -> None:
    """
    Verify two operands have the same element count.

    Args:
        left: Dimensions of the left operand
        right: Dimensions of the right operand

    Raises:
        DimensionError: If the counts differ
    """
    if left != right:
        raise DimensionError(UNEQUAL_SIZES_MESSAGE, expected=left, actual=right)
