"""
Shared compute infrastructure for vctr.

IMPORTANT: This is NOT where the kernels live. Those go in
vector/backends/. This module decides which kernel runs and how its
results may be compared.

Submodules:
    policy: Execution policy, thresholds and default-policy configuration
    tolerances: Tolerance tiers for sequential vs. parallel results
"""

from vctr.core.compute.policy import (
    ExecutionPolicy,
    DEFAULT_ELEMENTWISE_THRESHOLD,
    DEFAULT_REDUCTION_THRESHOLD,
    DEFAULT_DOT_THRESHOLD,
    get_default_policy,
    current_policy,
    set_default_policy,
    resolve_policy,
    execution_policy,
)
from vctr.core.compute.tolerances import ToleranceTier, select_tolerance

__all__ = [
    # Policy
    "ExecutionPolicy",
    "DEFAULT_ELEMENTWISE_THRESHOLD",
    "DEFAULT_REDUCTION_THRESHOLD",
    "DEFAULT_DOT_THRESHOLD",
    "get_default_policy",
    "current_policy",
    "set_default_policy",
    "resolve_policy",
    "execution_policy",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
]
