"""
Linear-system solve entry point.

solve_combinations() finds the coefficients x for which the columns of a
combine to b. No algorithm is implemented yet: every call raises
SolverNotImplementedError and leaves ``x`` untouched.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from enum import Enum

from vctr.core.exceptions import SolverNotImplementedError, NOT_IMPLEMENTED_MESSAGE


class SolveAlgorithm(Enum):
    """Algorithms accepted by solve_combinations()."""
    LU_DECOMPOSITION = 'lu_decomposition'


def solve_combinations(
    a: Sequence[Sequence[int]],
    b: Sequence[int],
    x: MutableSequence[int],
    algorithm: SolveAlgorithm = SolveAlgorithm.LU_DECOMPOSITION,
) -> None:
    """
    Solve ``a @ x = b`` for ``x``, writing the result into ``x``.

    Parameters
    ----------
    a : sequence of sequences
        Coefficient matrix, row-major.
    b : sequence
        Right-hand-side column.
    x : mutable sequence
        Output column, populated in place.
    algorithm : SolveAlgorithm
        Solve strategy.

    Raises
    ------
    SolverNotImplementedError
        Always; no solve algorithm is available.
    """
    raise SolverNotImplementedError(NOT_IMPLEMENTED_MESSAGE, algorithm=algorithm)
