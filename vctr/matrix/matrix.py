"""
Matrix: a row-major numeric container built from rows of equal length.

Follows the same ownership contract as Vector: copying clones the buffer,
moving transfers it and leaves the source as a 0 x 0 matrix. Row lengths
are checked before anything is allocated.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any
import numpy as np
from numpy.typing import DTypeLike, NDArray

from vctr.core.exceptions import (
    DimensionError,
    ValidationError,
    INVALID_COLUMN_SIZE_MESSAGE,
)
from vctr.core.validation import (
    check_castable,
    check_elements,
    check_index,
    check_numeric_dtype,
    check_size,
    coerce_scalar,
)
from vctr.vector.vector import Vector


class Matrix:
    """
    Dense row-major matrix with bounds-checked element access.

    Construction:
        Matrix([[1, 2, 3], [4, 5, 6]])
        Matrix.from_vectors([Vector([1, 2]), Vector([3, 4])])
        Matrix.filled(2, 3, 0.0)
    """

    __slots__ = ('_data',)

    def __init__(self, rows: Iterable[Iterable[Any]] = (), *, dtype: DTypeLike | None = None):
        rows = [list(row) for row in _check_rows(rows)]
        _check_column_sizes([len(row) for row in rows])
        self._data = self._build(rows, dtype)

    @staticmethod
    def _build(rows: list, dtype: DTypeLike | None) -> NDArray[Any]:
        """Internal builder; rows are already known to have equal lengths."""
        if not rows:
            dtype = np.dtype(np.int64 if dtype is None else dtype)
            check_numeric_dtype(dtype, "dtype")
            return np.zeros((0, 0), dtype=dtype)

        flat = check_elements(
            [value for row in rows for value in row], "rows", dtype=dtype
        )
        return flat.reshape(len(rows), len(rows[0]))

    @classmethod
    def _adopt(cls, data: NDArray[Any]) -> Matrix:
        matrix = cls.__new__(cls)
        matrix._data = data
        return matrix

    @classmethod
    def from_vectors(cls, vectors: Iterable[Vector], *, dtype: DTypeLike | None = None) -> Matrix:
        """
        Build a matrix whose rows are copies of ``vectors``.

        Raises
        ------
        DimensionError
            If the vectors have unequal dimensions. Raised before any
            allocation.
        ValidationError
            If ``dtype`` would truncate a row, e.g. float rows stored as
            integers.
        """
        vectors = list(vectors)
        for i, vector in enumerate(vectors):
            if not isinstance(vector, Vector):
                raise ValidationError(
                    f"vectors[{i}]: expected Vector, got {type(vector).__name__}"
                )
        _check_column_sizes([vector.dimensions() for vector in vectors])

        if not vectors:
            return cls._adopt(cls._build([], dtype))
        if dtype is None:
            dtype = np.result_type(*(vector.dtype for vector in vectors))
        dtype = np.dtype(dtype)
        check_numeric_dtype(dtype, "dtype")
        for i, vector in enumerate(vectors):
            check_castable(vector.dtype, dtype, f"vectors[{i}]")
        data = np.empty((len(vectors), vectors[0].dimensions()), dtype=dtype)
        for i, vector in enumerate(vectors):
            data[i] = vector._data
        return cls._adopt(data)

    @classmethod
    def filled(
        cls,
        num_rows: int,
        num_cols: int,
        value: Any,
        *,
        dtype: DTypeLike | None = None,
    ) -> Matrix:
        """``num_rows x num_cols`` matrix with every element equal to ``value``."""
        num_rows = check_size(num_rows, "num_rows")
        num_cols = check_size(num_cols, "num_cols")
        if dtype is None:
            dtype = check_elements([value], "value").dtype
        dtype = np.dtype(dtype)
        check_numeric_dtype(dtype, "dtype")
        data = np.full((num_rows, num_cols), coerce_scalar(value, dtype, "value"), dtype=dtype)
        return cls._adopt(data)

    # ------------------------------------------------------------------
    # Ownership
    # ------------------------------------------------------------------

    def copy(self) -> Matrix:
        return Matrix._adopt(self._data.copy())

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Matrix:
        return self.copy()

    def assign(self, other: Matrix) -> Matrix:
        """Replace contents with a clone of ``other``'s; self-assignment is a no-op."""
        _check_matrix(other)
        if other is not self:
            self._data = other._data.copy()
        return self

    def move(self) -> Matrix:
        """Transfer the buffer to a new Matrix, leaving this one 0 x 0."""
        moved = Matrix._adopt(self._data)
        self._data = np.zeros((0, 0), dtype=moved._data.dtype)
        return moved

    def move_from(self, other: Matrix) -> Matrix:
        """Take ownership of ``other``'s buffer, leaving ``other`` 0 x 0."""
        _check_matrix(other)
        if other is not self:
            self._data = other._data
            other._data = np.zeros((0, 0), dtype=self._data.dtype)
        return self

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def num_rows(self) -> int:
        return self._data.shape[0]

    def num_cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self._data.shape

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def _check_position(self, position: Any) -> tuple[int, int]:
        if not isinstance(position, tuple) or len(position) != 2:
            raise ValidationError(
                f"index: expected a (row, column) pair, got {position!r}"
            )
        row, col = position
        return (
            check_index(row, self._data.shape[0]),
            check_index(col, self._data.shape[1]),
        )

    def __getitem__(self, position: tuple[int, int]) -> Any:
        row, col = self._check_position(position)
        return self._data[row, col].item()

    def __setitem__(self, position: tuple[int, int], value: Any) -> None:
        row, col = self._check_position(position)
        self._data[row, col] = coerce_scalar(value, self._data.dtype, "value")

    def row(self, index: int) -> Vector:
        """Copy of row ``index`` as a Vector."""
        index = check_index(index, self._data.shape[0])
        return Vector(self._data[index])

    def tolist(self) -> list[list[Any]]:
        return self._data.tolist()

    def to_numpy(self) -> NDArray[Any]:
        return self._data.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._data.shape == other._data.shape and bool(np.all(self._data == other._data))

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Matrix(num_rows={self.num_rows()}, num_cols={self.num_cols()}, dtype={self.dtype})"


def _check_rows(rows: Any) -> Iterable[Any]:
    if isinstance(rows, np.ndarray):
        if rows.ndim != 2:
            raise ValidationError(
                f"rows: expected 2D array, got {rows.ndim}D with shape {rows.shape}"
            )
        return rows
    if not isinstance(rows, Iterable):
        raise ValidationError(f"rows: expected a sequence of rows, got {type(rows).__name__}")
    rows = list(rows)
    for i, row in enumerate(rows):
        if not isinstance(row, Iterable):
            raise ValidationError(f"rows[{i}]: expected a sequence, got {type(row).__name__}")
    return rows


def _check_column_sizes(sizes: list[int]) -> None:
    """Every row must have as many columns as the first."""
    if not sizes:
        return
    expected = sizes[0]
    for size in sizes[1:]:
        if size != expected:
            raise DimensionError(INVALID_COLUMN_SIZE_MESSAGE, expected=expected, actual=size)


def _check_matrix(value: object) -> None:
    if not isinstance(value, Matrix):
        raise ValidationError(f"other: expected Matrix, got {type(value).__name__}")
