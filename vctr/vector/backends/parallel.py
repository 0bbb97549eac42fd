"""
Parallel backend for vector kernels using a thread pool.

The index range is split into contiguous chunks, one task per chunk is
submitted to a ThreadPoolExecutor shared by every backend with the same
worker count, and the call blocks until every chunk has finished. numpy
releases the GIL inside its kernels, so chunks run concurrently on
separate cores.

Elementwise kernels write disjoint slices of one output buffer and are
bit-identical to the sequential backend. Reductions combine per-chunk
partial sums in chunk order; for floating-point data the result may
differ from the sequential pass in the last bits (see
vctr.core.compute.tolerances).
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable
import numpy as np
from numpy.typing import NDArray

from vctr.vector.backends.sequential import max_abs_kernel, sum_of_squares_kernel


def chunk_bounds(n: int, n_chunks: int) -> list[tuple[int, int]]:
    """
    Split ``range(n)`` into at most ``n_chunks`` contiguous, non-empty spans.

    Returns a single empty span for ``n == 0``.
    """
    n_chunks = max(1, min(n_chunks, n))
    edges = np.linspace(0, n, n_chunks + 1).astype(np.intp)
    return [(int(start), int(stop)) for start, stop in zip(edges[:-1], edges[1:])]


_executors: dict[int, ThreadPoolExecutor] = {}
_executors_lock = threading.Lock()


def get_executor(workers: int) -> ThreadPoolExecutor:
    """
    Shared thread pool for ``workers`` threads, created on first use.

    Pools live for the rest of the process so repeated calls above the
    threshold do not pay thread start-up each time.
    """
    with _executors_lock:
        executor = _executors.get(workers)
        if executor is None:
            executor = ThreadPoolExecutor(
                max_workers=workers, thread_name_prefix=f'vctr-{workers}'
            )
            _executors[workers] = executor
        return executor


class ParallelBackend:
    """
    Thread-pool backend for vector kernels.

    Parameters
    ----------
    workers : int
        Number of worker threads (and chunks) per call.
    """

    def __init__(self, workers: int):
        if workers < 1:
            raise ValueError(f"ParallelBackend requires at least 1 worker, got {workers}")
        self.workers = workers

    @property
    def name(self) -> str:
        return 'cpu_parallel'

    def _run(self, n: int, task: Callable[[int, int], Any]) -> list[Any]:
        """Run ``task(start, stop)`` for each chunk and return results in chunk order."""
        bounds = chunk_bounds(n, self.workers)
        if len(bounds) == 1:
            start, stop = bounds[0]
            return [task(start, stop)]

        executor = get_executor(self.workers)
        futures = [executor.submit(task, start, stop) for start, stop in bounds]
        return [future.result() for future in futures]

    def _elementwise(
        self,
        ufunc: np.ufunc,
        left: NDArray[Any],
        right: NDArray[Any],
    ) -> NDArray[Any]:
        out = np.empty(left.shape[0], dtype=np.result_type(left, right))

        def task(start: int, stop: int) -> None:
            ufunc(left[start:stop], right[start:stop], out=out[start:stop])

        self._run(left.shape[0], task)
        return out

    def add(self, left: NDArray[Any], right: NDArray[Any]) -> NDArray[Any]:
        return self._elementwise(np.add, left, right)

    def subtract(self, left: NDArray[Any], right: NDArray[Any]) -> NDArray[Any]:
        return self._elementwise(np.subtract, left, right)

    def scale(self, data: NDArray[Any], scalar: Any) -> None:
        def task(start: int, stop: int) -> None:
            chunk = data[start:stop]
            np.multiply(chunk, scalar, out=chunk)

        self._run(data.shape[0], task)

    def dot(self, left: NDArray[Any], right: NDArray[Any]) -> Any:
        partials = self._run(
            left.shape[0],
            lambda start, stop: np.dot(left[start:stop], right[start:stop]),
        )
        total = partials[0]
        for partial in partials[1:]:
            total = total + partial
        return total

    def sum_of_squares(self, data: NDArray[Any], scale: float = 1.0) -> float:
        partials = self._run(
            data.shape[0],
            lambda start, stop: sum_of_squares_kernel(data[start:stop], scale),
        )
        return float(sum(partials))

    def max_abs(self, data: NDArray[Any]) -> float:
        partials = self._run(
            data.shape[0],
            lambda start, stop: max_abs_kernel(data[start:stop]),
        )
        return float(np.max(partials))
