"""
Tests for elementwise addition, subtraction and in-place scaling.

Covers the size-mismatch contract, the zero-length case, operand
immutability and equivalence of the sequential and parallel paths.
"""

import numpy as np
import pytest

from vctr import ExecutionPolicy, Vector, execution_policy, scale
from vctr.core.exceptions import DimensionError, ValidationError


class TestAddSubtract:

    def test_add(self):
        assert Vector([1, 2, 3]) + Vector([10, 20, 30]) == Vector([11, 22, 33])

    def test_subtract(self):
        assert Vector([10, 20, 30]) - Vector([1, 2, 3]) == Vector([9, 18, 27])

    def test_operands_unmodified(self):
        a, b = Vector([1, 2]), Vector([3, 4])
        result = a + b
        assert a.tolist() == [1, 2]
        assert b.tolist() == [3, 4]
        result[0] = 100
        assert a[0] == 1

    def test_result_is_new_vector(self):
        a, b = Vector([1, 2]), Vector([0, 0])
        assert (a + b) is not a

    def test_add_size_mismatch(self):
        with pytest.raises(DimensionError, match=r"^unequal vector sizes\.$"):
            Vector([1, 2]) + Vector([1, 2, 3])

    def test_subtract_size_mismatch(self):
        with pytest.raises(DimensionError, match=r"^unequal vector sizes\.$"):
            Vector([1, 2, 3]) - Vector([1])

    def test_size_mismatch_with_one_empty(self):
        with pytest.raises(DimensionError):
            Vector([]) + Vector([1])

    def test_zero_length_add(self):
        result = Vector([]) + Vector([])
        assert result.dimensions() == 0

    def test_zero_length_subtract(self):
        result = Vector(0) - Vector(0)
        assert result == Vector([])

    def test_float_promotion(self):
        result = Vector([1, 2]) + Vector([0.5, 0.5])
        assert result.dtype == np.float64
        assert result.tolist() == [1.5, 2.5]

    def test_non_vector_operand(self):
        with pytest.raises(TypeError):
            Vector([1, 2]) + [1, 2]

    def test_add_subtract_inverse(self, rng):
        for n in (1, 5, 999, 1000, 1001, 4096):
            a = Vector(rng.integers(-10**6, 10**6, size=n))
            b = Vector(rng.integers(-10**6, 10**6, size=n))
            assert (a + b) - b == a

    def test_large_add_takes_parallel_path(self, large_int_pair):
        a, b = large_int_pair
        expected = (a.to_numpy() + b.to_numpy()).tolist()
        assert (a + b).tolist() == expected


class TestPathEquivalence:
    """Sequential and parallel paths give identical elementwise results."""

    @pytest.mark.parametrize("n", [10, 999, 1000, 1001, 5000])
    def test_integer_add_subtract_identical(self, rng, n):
        a = Vector(rng.integers(-1000, 1000, size=n))
        b = Vector(rng.integers(-1000, 1000, size=n))

        with execution_policy(mode='sequential'):
            seq_add, seq_sub = a + b, a - b
        with execution_policy(mode='parallel', max_workers=4):
            par_add, par_sub = a + b, a - b

        assert seq_add.to_numpy().tobytes() == par_add.to_numpy().tobytes()
        assert seq_sub.to_numpy().tobytes() == par_sub.to_numpy().tobytes()

    def test_float_elementwise_identical(self, rng):
        a = Vector(rng.standard_normal(3001))
        b = Vector(rng.standard_normal(3001))
        with execution_policy(mode='sequential'):
            seq = a + b
        with execution_policy(mode='parallel', max_workers=3):
            par = a + b
        np.testing.assert_array_equal(seq.to_numpy(), par.to_numpy())

    def test_threshold_only_changes_path(self, rng):
        a = Vector(rng.integers(0, 100, size=50))
        b = Vector(rng.integers(0, 100, size=50))
        with execution_policy(elementwise_threshold=10, max_workers=4):
            low = a + b
        with execution_policy(elementwise_threshold=10**6):
            high = a + b
        assert low == high


class TestScale:

    def test_scale_in_place(self):
        v = Vector([1, 2, 3])
        assert v.scale(3) is None
        assert v.tolist() == [3, 6, 9]

    def test_scale_function_returns_vector(self):
        v = Vector([1.0, 2.0])
        assert scale(v, 0.5) is v
        assert v.tolist() == [0.5, 1.0]

    def test_scale_empty(self):
        v = Vector([])
        v.scale(5)
        assert v.dimensions() == 0

    def test_scale_integer_by_fraction_rejected(self):
        v = Vector([1, 2, 3])
        with pytest.raises(ValidationError, match="truncation"):
            v.scale(0.5)
        assert v.tolist() == [1, 2, 3]

    def test_scale_integer_by_integral_float(self):
        v = Vector([1, 2, 3])
        v.scale(2.0)
        assert v.tolist() == [2, 4, 6]
        assert np.issubdtype(v.dtype, np.integer)

    def test_scale_rejects_non_number(self):
        with pytest.raises(ValidationError):
            Vector([1.0]).scale("2")

    @pytest.mark.parametrize("elements, dtype, scalar", [
        ([1], np.int8, 1000),
        ([1, 2], np.uint16, -1),
        ([1], np.int64, 2**70),
    ])
    def test_scale_by_out_of_range_integer_rejected(self, elements, dtype, scalar):
        v = Vector(elements, dtype=dtype)
        with pytest.raises(ValidationError, match="outside the range"):
            v.scale(scalar)
        assert v.tolist() == elements

    def test_scale_paths_identical(self, rng):
        data = rng.integers(-1000, 1000, size=4000)
        seq, par = Vector(data), Vector(data)
        seq.scale(-7, policy=ExecutionPolicy(mode='sequential'))
        par.scale(-7, policy=ExecutionPolicy(mode='parallel', max_workers=4))
        assert seq == par
        assert seq.tolist() == (data * -7).tolist()
