"""
Vector: an owning, fixed-length numeric container.

Each Vector exclusively owns a contiguous 1D numpy buffer. Copying clones
the buffer; moving hands the buffer to a new owner and leaves the source
as an empty vector. No two live Vectors ever share a buffer.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable, Iterator
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from vctr.core.compute.policy import ExecutionPolicy
from vctr.core.exceptions import ValidationError
from vctr.core.validation import (
    check_elements,
    check_index,
    check_numeric_dtype,
    check_same_dimensions,
    check_size,
    coerce_scalar,
)
from vctr.vector.backends import select_backend
from vctr.vector.cursor import Cursor


class Vector:
    """
    Dense mathematical vector with bounds-checked access.

    Construction:
        Vector([1, 2, 3])           # explicit elements
        Vector(7)                   # size alone, zero-initialised
        Vector.filled(7, 0.5)       # size with a fill value
        Vector.zeros(7, dtype=np.float32)

    The element dtype is inferred from the input (Python ints become
    int64, floats become float64) unless ``dtype`` is given.

    Arithmetic (``+``, ``-``), ``scale`` and ``magnitude`` run sequentially
    for short vectors and fan out across worker threads once the length
    exceeds the active ExecutionPolicy's threshold. The result is the
    same either way.
    """

    __slots__ = ('_data',)

    def __init__(self, elements: ArrayLike | int = (), *, dtype: DTypeLike | None = None):
        if isinstance(elements, numbers.Integral) and not isinstance(elements, bool):
            self._data = self._allocate(check_size(elements, "dimensions"), dtype)
        elif isinstance(elements, Vector):
            self._data = check_elements(
                elements._data, "elements",
                dtype=elements.dtype if dtype is None else dtype,
            )
        else:
            if not isinstance(elements, (np.ndarray, list, tuple)):
                if not isinstance(elements, Iterable):
                    raise ValidationError(
                        f"elements: expected a sequence or a size, got {type(elements).__name__}"
                    )
                elements = list(elements)
            self._data = check_elements(elements, "elements", dtype=dtype)

    @staticmethod
    def _allocate(size: int, dtype: DTypeLike | None) -> NDArray[Any]:
        dtype = np.dtype(np.int64 if dtype is None else dtype)
        check_numeric_dtype(dtype, "dtype")
        return np.zeros(size, dtype=dtype)

    @classmethod
    def _adopt(cls, data: NDArray[Any]) -> Vector:
        """Wrap a freshly computed buffer without copying it."""
        vector = cls.__new__(cls)
        vector._data = data
        return vector

    @classmethod
    def zeros(cls, size: int, *, dtype: DTypeLike | None = None) -> Vector:
        """Vector of ``size`` zero elements (int64 unless ``dtype`` is given)."""
        return cls._adopt(cls._allocate(check_size(size, "size"), dtype))

    @classmethod
    def filled(cls, size: int, value: Any, *, dtype: DTypeLike | None = None) -> Vector:
        """
        Vector of ``size`` elements all equal to ``value``.

        Parameters
        ----------
        size : int
            Number of elements.
        value : number
            Fill value. Determines the dtype when ``dtype`` is None.
        dtype : dtype, optional
            Element dtype.
        """
        size = check_size(size, "size")
        if dtype is None:
            dtype = check_elements([value], "value").dtype
        data = cls._allocate(size, dtype)
        data.fill(coerce_scalar(value, data.dtype, "value"))
        return cls._adopt(data)

    # ------------------------------------------------------------------
    # Ownership
    # ------------------------------------------------------------------

    def copy(self) -> Vector:
        """Return a Vector owning an independent clone of this buffer."""
        return Vector._adopt(self._data.copy())

    def __copy__(self) -> Vector:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Vector:
        return self.copy()

    def assign(self, other: Vector) -> Vector:
        """
        Replace this vector's contents with a clone of ``other``'s.

        Self-assignment is a no-op. Cursors previously obtained from this
        vector become stale.
        """
        _check_vector(other, "other")
        if other is not self:
            self._data = other._data.copy()
        return self

    def move(self) -> Vector:
        """
        Transfer this vector's buffer to a new Vector.

        The buffer is handed over without reallocation; this vector is
        left with zero dimensions.
        """
        moved = Vector._adopt(self._data)
        self._data = np.empty(0, dtype=moved._data.dtype)
        return moved

    def move_from(self, other: Vector) -> Vector:
        """
        Take ownership of ``other``'s buffer, leaving ``other`` empty.

        Self-move is a no-op.
        """
        _check_vector(other, "other")
        if other is not self:
            self._data = other._data
            other._data = np.empty(0, dtype=self._data.dtype)
        return self

    # ------------------------------------------------------------------
    # Element access & iteration
    # ------------------------------------------------------------------

    def dimensions(self) -> int:
        """Number of elements."""
        return self._data.shape[0]

    def __len__(self) -> int:
        return self._data.shape[0]

    @property
    def dtype(self) -> np.dtype:
        """Element dtype."""
        return self._data.dtype

    def __getitem__(self, index: int) -> Any:
        return self._data[check_index(index, self._data.shape[0])].item()

    def __setitem__(self, index: int, value: Any) -> None:
        index = check_index(index, self._data.shape[0])
        self._data[index] = coerce_scalar(value, self._data.dtype, "value")

    def begin(self) -> Cursor:
        """Cursor at the first element."""
        return Cursor(self, 0)

    def end(self) -> Cursor:
        """Cursor one past the last element."""
        return Cursor(self, self._data.shape[0])

    def __iter__(self) -> Iterator[Any]:
        data = self._data
        for i in range(data.shape[0]):
            yield data[i].item()

    def tolist(self) -> list[Any]:
        """Elements as a list of Python scalars."""
        return self._data.tolist()

    def to_numpy(self) -> NDArray[Any]:
        """Independent numpy copy of the elements."""
        return self._data.copy()

    def __repr__(self) -> str:
        return f"Vector({self._data.tolist()}, dtype={self._data.dtype})"

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        if self._data.shape[0] != other._data.shape[0]:
            return False
        for left, right in zip(self._data, other._data):
            if left != right:
                return False
        return True

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # mutable

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _elementwise(self, other: Vector, operation: str) -> Vector:
        n = self._data.shape[0]
        check_same_dimensions(n, other._data.shape[0])
        if n == 0:
            return Vector.zeros(0, dtype=np.result_type(self._data, other._data))
        backend = select_backend('elementwise', n)
        return Vector._adopt(getattr(backend, operation)(self._data, other._data))

    def __add__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._elementwise(other, 'add')

    def __sub__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._elementwise(other, 'subtract')

    def scale(self, scalar: Any, *, policy: ExecutionPolicy | None = None) -> None:
        """
        Multiply every element by ``scalar`` in place.

        Raises
        ------
        ValidationError
            If ``scalar`` is not a number, or the result cannot be stored
            in this vector's dtype (e.g. scaling int64 elements by 0.5).
        """
        scalar = coerce_scalar(scalar, self._data.dtype, "scalar")
        n = self._data.shape[0]
        if n == 0:
            return
        select_backend('elementwise', n, policy).scale(self._data, scalar)

    def magnitude(self, *, policy: ExecutionPolicy | None = None) -> float:
        """
        Euclidean norm, accumulated in float64 regardless of element dtype.

        Elements are divided by the largest absolute element before
        squaring, so the result is accurate wherever the norm itself is
        representable in float64. A zero-dimension vector has magnitude
        0.0. On the parallel path the summation order differs from the
        sequential pass, so float results may differ in the last bits.
        """
        n = self._data.shape[0]
        if n == 0:
            return 0.0
        backend = select_backend('reduction', n, policy)
        peak = backend.max_abs(self._data)
        if peak == 0.0 or not math.isfinite(peak):
            return peak
        return peak * math.sqrt(backend.sum_of_squares(self._data, peak))


def _check_vector(value: object, name: str) -> None:
    if not isinstance(value, Vector):
        raise ValidationError(f"{name}: expected Vector, got {type(value).__name__}")
