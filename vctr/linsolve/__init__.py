"""
Linear-system solving.

Public API:
    SolveAlgorithm        - algorithm selector
    solve_combinations()  - solve a @ x = b (not yet implemented)
"""

from vctr.linsolve.solvers import SolveAlgorithm, solve_combinations

__all__ = [
    "SolveAlgorithm",
    "solve_combinations",
]
