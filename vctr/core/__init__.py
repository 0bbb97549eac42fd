"""
Core infrastructure for vctr.

This module provides shared abstractions and utilities used by the
vector, matrix and linsolve subpackages.

Key components:
    protocols: ExecutionBackend protocol
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Execution policy and tolerance tiers
"""

from vctr.core.protocols import ExecutionBackend
from vctr.core.exceptions import (
    VctrError,
    ValidationError,
    DimensionError,
    OutOfBoundsError,
    NumericalError,
    DegenerateOperandError,
    StaleCursorError,
    SolverNotImplementedError,
)

__all__ = [
    # Protocols
    "ExecutionBackend",
    # Exceptions
    "VctrError",
    "ValidationError",
    "DimensionError",
    "OutOfBoundsError",
    "NumericalError",
    "DegenerateOperandError",
    "StaleCursorError",
    "SolverNotImplementedError",
]
