"""
vctr: lightweight numeric vector and matrix primitives for Python.

Owning, fixed-size containers backed by numpy buffers, with arithmetic
that runs sequentially for short vectors and fans out across worker
threads for long ones.

Submodules:
    vector: Vector, Cursor and vector operations
    matrix: Matrix built from rows or Vectors
    linsolve: Linear-system solving (stub)
    core: Exceptions, validation, execution policy
"""

__version__ = "0.1.0"

from vctr import vector
from vctr import matrix
from vctr import linsolve
from vctr.vector import (
    Vector,
    Cursor,
    dot_product,
    are_perpendicular,
    magnitude,
    scale,
    unit_vector,
)
from vctr.matrix import Matrix
from vctr.linsolve import SolveAlgorithm, solve_combinations
from vctr.core.compute.policy import (
    ExecutionPolicy,
    get_default_policy,
    current_policy,
    set_default_policy,
    execution_policy,
)

__all__ = [
    "__version__",
    "vector",
    "matrix",
    "linsolve",
    "Vector",
    "Cursor",
    "dot_product",
    "are_perpendicular",
    "magnitude",
    "scale",
    "unit_vector",
    "Matrix",
    "SolveAlgorithm",
    "solve_combinations",
    "ExecutionPolicy",
    "get_default_policy",
    "current_policy",
    "set_default_policy",
    "execution_policy",
]
