"""
Random-access cursor over a Vector's elements.

A Cursor is a non-owning position into the buffer a Vector held when the
cursor was obtained. It stays valid while the vector keeps that buffer;
once the buffer is moved away or replaced (move, move_from, assign) the
cursor is stale and dereferencing it raises StaleCursorError.
"""

from __future__ import annotations

import functools
import numbers
from typing import Any, TYPE_CHECKING

from vctr.core.exceptions import StaleCursorError, ValidationError
from vctr.core.validation import check_index, coerce_scalar

if TYPE_CHECKING:
    from numpy.typing import NDArray
    from vctr.vector.vector import Vector


@functools.total_ordering
class Cursor:
    """
    Position within a Vector supporting random-access arithmetic.

    Operations:
        cursor.value            dereference (read/write)
        cursor.increment()      ++cursor, returns the cursor
        cursor.post_increment() cursor++, returns a copy of the old position
        cursor.decrement()      --cursor
        cursor.post_decrement() cursor--
        cursor + n, cursor - n  new cursor n positions away
        cursor += n, cursor -= n
        end - begin             distance in elements
    """

    __slots__ = ('_vector', '_buffer', '_position')

    def __init__(self, vector: Vector, position: int = 0):
        self._vector = vector
        self._buffer = vector._data
        self._position = int(position)

    @classmethod
    def _at(cls, source: Cursor, position: int) -> Cursor:
        cursor = cls.__new__(cls)
        cursor._vector = source._vector
        cursor._buffer = source._buffer
        cursor._position = position
        return cursor

    @property
    def position(self) -> int:
        """Zero-based offset from the first element."""
        return self._position

    @property
    def is_valid(self) -> bool:
        """True while the vector still owns the buffer this cursor walks."""
        return self._vector._data is self._buffer

    def _live_buffer(self) -> NDArray[Any]:
        if not self.is_valid:
            raise StaleCursorError()
        return self._buffer

    @property
    def value(self) -> Any:
        buffer = self._live_buffer()
        return buffer[check_index(self._position, buffer.shape[0])].item()

    @value.setter
    def value(self, value: Any) -> None:
        buffer = self._live_buffer()
        index = check_index(self._position, buffer.shape[0])
        buffer[index] = coerce_scalar(value, buffer.dtype, "value")

    def copy(self) -> Cursor:
        return Cursor._at(self, self._position)

    def increment(self) -> Cursor:
        self._position += 1
        return self

    def post_increment(self) -> Cursor:
        previous = self.copy()
        self._position += 1
        return previous

    def decrement(self) -> Cursor:
        self._position -= 1
        return self

    def post_decrement(self) -> Cursor:
        previous = self.copy()
        self._position -= 1
        return previous

    def __add__(self, n: int) -> Cursor:
        if not _is_offset(n):
            return NotImplemented
        return Cursor._at(self, self._position + int(n))

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, Cursor):
            self._check_same_sequence(other)
            return self._position - other._position
        if not _is_offset(other):
            return NotImplemented
        return Cursor._at(self, self._position - int(other))

    def __iadd__(self, n: int) -> Cursor:
        if not _is_offset(n):
            return NotImplemented
        self._position += int(n)
        return self

    def __isub__(self, n: int) -> Cursor:
        if not _is_offset(n):
            return NotImplemented
        self._position -= int(n)
        return self

    def _check_same_sequence(self, other: Cursor) -> None:
        if self._buffer is not other._buffer:
            raise ValidationError("cursors refer to different vectors")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self._buffer is other._buffer and self._position == other._position

    def __lt__(self, other: Cursor) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        self._check_same_sequence(other)
        return self._position < other._position

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        state = "" if self.is_valid else ", stale"
        return f"Cursor(position={self._position}{state})"


def _is_offset(n: object) -> bool:
    return isinstance(n, numbers.Integral) and not isinstance(n, bool)
