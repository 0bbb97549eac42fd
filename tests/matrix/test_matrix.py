"""
Tests for Matrix construction, ownership and element access.
"""

import numpy as np
import pytest

from vctr import Matrix, Vector
from vctr.core.exceptions import DimensionError, OutOfBoundsError, ValidationError


class TestConstruction:

    def test_from_nested_lists(self):
        m = Matrix([[1, 2, 3], [4, 5, 6]])
        assert m.num_rows() == 2
        assert m.num_cols() == 3
        assert m.shape == (2, 3)
        assert m.tolist() == [[1, 2, 3], [4, 5, 6]]

    def test_ragged_rows_rejected(self):
        with pytest.raises(DimensionError, match=r"^Invalid column size\.$") as exc_info:
            Matrix([[1, 2, 3], [4, 5]])
        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2

    def test_from_vectors(self):
        m = Matrix.from_vectors([Vector([1, 2]), Vector([3, 4]), Vector([5, 6])])
        assert m.shape == (3, 2)
        assert m[2, 1] == 6

    def test_from_vectors_size_mismatch(self):
        with pytest.raises(DimensionError, match="Invalid column size"):
            Matrix.from_vectors([Vector([1, 2]), Vector([1, 2, 3])])

    def test_from_vectors_copies(self):
        v = Vector([1, 2])
        m = Matrix.from_vectors([v])
        v[0] = 100
        assert m[0, 0] == 1

    def test_from_vectors_promotes_dtype(self):
        m = Matrix.from_vectors([Vector([1, 2]), Vector([0.5, 1.5])])
        assert m.dtype == np.float64

    def test_from_vectors_rejects_non_vectors(self):
        with pytest.raises(ValidationError):
            Matrix.from_vectors([[1, 2]])

    def test_from_vectors_explicit_float_dtype(self):
        m = Matrix.from_vectors([Vector([1, 2]), Vector([3, 4])], dtype=np.float32)
        assert m.dtype == np.float32
        assert m.tolist() == [[1.0, 2.0], [3.0, 4.0]]

    def test_from_vectors_rejects_truncating_dtype(self):
        with pytest.raises(ValidationError, match=r"vectors\[1\].*truncation"):
            Matrix.from_vectors([Vector([1, 2]), Vector([0.5, 1.5])], dtype=np.int64)

    def test_from_vectors_rejects_complex_to_real(self):
        with pytest.raises(ValidationError, match="truncation"):
            Matrix.from_vectors([Vector([1 + 1j])], dtype=np.float64)

    def test_empty(self):
        assert Matrix().shape == (0, 0)
        assert Matrix.from_vectors([]).shape == (0, 0)

    def test_filled(self):
        m = Matrix.filled(2, 3, 7)
        assert m.tolist() == [[7, 7, 7], [7, 7, 7]]

    def test_filled_negative_size(self):
        with pytest.raises(ValidationError):
            Matrix.filled(-1, 2, 0)

    def test_from_numpy(self):
        m = Matrix(np.arange(6).reshape(2, 3))
        assert m[1, 2] == 5

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            Matrix([["a", "b"]])

    def test_repr(self):
        assert repr(Matrix([[1.0]])) == "Matrix(num_rows=1, num_cols=1, dtype=float64)"


class TestAccess:

    def test_read_write(self):
        m = Matrix.filled(2, 2, 0)
        m[1, 0] = 9
        assert m[1, 0] == 9
        assert m.tolist() == [[0, 0], [9, 0]]

    @pytest.mark.parametrize("position", [(2, 0), (0, 2), (-1, 0)])
    def test_out_of_bounds(self, position):
        with pytest.raises(OutOfBoundsError):
            Matrix.filled(2, 2, 0)[position]

    def test_single_index_rejected(self):
        with pytest.raises(ValidationError):
            Matrix.filled(2, 2, 0)[0]

    def test_row_is_vector_copy(self):
        m = Matrix([[1, 2], [3, 4]])
        row = m.row(1)
        assert row == Vector([3, 4])
        row[0] = 0
        assert m[1, 0] == 3

    def test_row_out_of_bounds(self):
        with pytest.raises(OutOfBoundsError):
            Matrix([[1, 2]]).row(1)


class TestOwnership:

    def test_copy_independent(self):
        m1 = Matrix([[1, 2], [3, 4]])
        m2 = m1.copy()
        m2[0, 0] = 10
        assert m1[0, 0] == 1

    def test_move(self):
        m1 = Matrix([[1, 2], [3, 4]])
        m2 = m1.move()
        assert m2.shape == (2, 2)
        assert m1.shape == (0, 0)

    def test_move_from_and_self_move(self):
        m1 = Matrix([[1, 2]])
        m2 = Matrix()
        m2.move_from(m1)
        assert m2.tolist() == [[1, 2]]
        assert m1.shape == (0, 0)
        m2.move_from(m2)
        assert m2.tolist() == [[1, 2]]

    def test_assign_and_self_assign(self):
        m1 = Matrix([[1, 2]])
        m2 = Matrix()
        m2.assign(m1)
        assert m2 == m1
        m2.assign(m2)
        assert m2 == m1

    def test_equality(self):
        assert Matrix([[1, 2]]) == Matrix([[1, 2]])
        assert Matrix([[1, 2]]) != Matrix([[1], [2]])
        assert Matrix([[1, 2]]) != Matrix([[1, 3]])
