"""
Tolerance tiers for comparing results across execution paths.

Integer kernels are exact on every path. Floating-point reductions
(magnitude, dot product) sum in a different order when the parallel path
runs: each chunk accumulates separately and the partial sums are combined
afterwards. The least-significant bits of the result may therefore differ
from the sequential pass. This is accepted nondeterminism, not a bug.

Used by the test suite and by callers who compare results produced under
different policies.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Integer or elementwise results: bit-identical on both paths
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Integer kernels and elementwise float kernels, identical',
)

# Sequential float64 reduction compared against a closed-form value
SEQUENTIAL_FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-14,
    name='sequential_fp64',
    description='Sequential double precision reduction',
)

# Parallel float64 reduction compared against the sequential pass
PARALLEL_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='parallel_fp64',
    description='Chunked double precision reduction, reordered summation',
)

# Parallel reduction over float32 storage (accumulated in float64 for
# magnitude, in float32 for the dot product)
PARALLEL_FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='parallel_fp32',
    description='Chunked single precision reduction, reordered summation',
)


def select_tolerance(
    backend_name: str,
    dtype: np.dtype | type = np.float64,
) -> ToleranceTier:
    """Select the tolerance tier for results from a given backend and dtype."""
    dtype = np.dtype(dtype)
    if not np.issubdtype(dtype, np.inexact):
        return EXACT
    if 'parallel' in backend_name:
        if np.finfo(dtype).bits <= 32:
            return PARALLEL_FP32
        return PARALLEL_FP64
    return SEQUENTIAL_FP64
