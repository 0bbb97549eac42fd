"""
Sequential reference backend for vector kernels.

One plain pass over the buffer on the calling thread. This is the
reference every other backend is validated against.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray


def sum_of_squares_kernel(data: NDArray[Any], scale: float = 1.0) -> float:
    """
    Float64 sum of squared magnitudes of ``data / scale``.

    Dividing by the largest absolute element first keeps the squares
    inside the float64 range for very large or very small elements.
    """
    if np.iscomplexobj(data):
        values = data.astype(np.complex128, copy=False)
        if scale != 1.0:
            values = values / scale
        return float(np.vdot(values, values).real)
    values = data.astype(np.float64, copy=False)
    if scale != 1.0:
        values = values / scale
    return float(np.dot(values, values))


def max_abs_kernel(data: NDArray[Any]) -> float:
    """Largest absolute element of a non-empty buffer, as a Python float."""
    if np.iscomplexobj(data):
        return float(np.max(np.abs(data.astype(np.complex128, copy=False))))
    return float(np.max(np.abs(data.astype(np.float64, copy=False))))


class SequentialBackend:
    """Sequential reference backend for vector kernels."""

    @property
    def name(self) -> str:
        return 'cpu_sequential'

    def add(self, left: NDArray[Any], right: NDArray[Any]) -> NDArray[Any]:
        return np.add(left, right)

    def subtract(self, left: NDArray[Any], right: NDArray[Any]) -> NDArray[Any]:
        return np.subtract(left, right)

    def scale(self, data: NDArray[Any], scalar: Any) -> None:
        np.multiply(data, scalar, out=data)

    def dot(self, left: NDArray[Any], right: NDArray[Any]) -> Any:
        return np.dot(left, right)

    def sum_of_squares(self, data: NDArray[Any], scale: float = 1.0) -> float:
        return sum_of_squares_kernel(data, scale)

    def max_abs(self, data: NDArray[Any]) -> float:
        return max_abs_kernel(data)
