"""
Execution backends for vector kernels.

    sequential: plain single-threaded pass (reference)
    parallel: chunked fan-out across a thread pool
"""

from __future__ import annotations

import warnings

from vctr.core.compute.policy import ExecutionPolicy, WorkKind, resolve_policy
from vctr.core.protocols import ExecutionBackend
from vctr.vector.backends.sequential import SequentialBackend
from vctr.vector.backends.parallel import ParallelBackend


_SEQUENTIAL = SequentialBackend()


def select_backend(
    kind: WorkKind,
    n: int,
    policy: ExecutionPolicy | None = None,
) -> ExecutionBackend:
    """
    Select the backend for one call.

    Parameters
    ----------
    kind : str
        'elementwise', 'reduction' or 'dot'.
    n : int
        Operand length.
    policy : ExecutionPolicy, optional
        Policy to apply. If None, uses the current default.
    """
    policy = resolve_policy(policy)
    if not policy.use_parallel(kind, n):
        return _SEQUENTIAL

    workers = policy.workers
    if workers == 1 and policy.mode == 'parallel':
        warnings.warn(
            "Parallel execution requested with a single worker; "
            "the kernel will run on one thread.",
            RuntimeWarning,
            stacklevel=3,
        )
    return ParallelBackend(workers)


__all__ = [
    "SequentialBackend",
    "ParallelBackend",
    "select_backend",
]
