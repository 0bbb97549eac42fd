"""
Tests for the linear-system solve entry point.
"""

import pytest

from vctr.core.exceptions import SolverNotImplementedError
from vctr.linsolve import SolveAlgorithm, solve_combinations


class TestSolveCombinations:
    """solve_combinations() is not implemented for any algorithm."""

    def test_raises_not_implemented(self):
        a = [[4, 3, 2]]
        b = [1, 2, 3]
        x = [-1] * len(a)
        with pytest.raises(SolverNotImplementedError, match=r"^not yet implemented$"):
            solve_combinations(a, b, x)

    def test_output_untouched(self):
        x = [-1]
        with pytest.raises(NotImplementedError):
            solve_combinations([[4, 3, 2]], [1, 2, 3], x)
        assert x == [-1]

    def test_explicit_algorithm(self):
        with pytest.raises(SolverNotImplementedError) as exc_info:
            solve_combinations([[1]], [1], [0], algorithm=SolveAlgorithm.LU_DECOMPOSITION)
        assert exc_info.value.algorithm is SolveAlgorithm.LU_DECOMPOSITION

    def test_default_algorithm_is_lu(self):
        with pytest.raises(SolverNotImplementedError) as exc_info:
            solve_combinations([[1]], [1], [0])
        assert exc_info.value.algorithm is SolveAlgorithm.LU_DECOMPOSITION
