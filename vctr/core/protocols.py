"""
Core protocols for vctr.

These define structural interfaces that execution backends must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so
that a backend is anything with the right methods.

Design Principles:
    - Minimal contracts: backends work on raw numpy buffers, never on Vectors
    - Validation happens before dispatch; backends assume equal lengths
    - Backends are stateless apart from construction-time configuration
"""

from typing import Protocol, Any, runtime_checkable

from numpy.typing import NDArray


@runtime_checkable
class ExecutionBackend(Protocol):
    """
    Protocol for elementwise and reduction kernels.

    Each backend implements one execution strategy (a plain sequential
    pass, or a chunked fan-out across worker threads). The dispatch layer
    picks one per call from the active ExecutionPolicy.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{strategy}'
        Examples: 'cpu_sequential', 'cpu_parallel'
        """
        ...

    def add(self, left: NDArray[Any], right: NDArray[Any]) -> NDArray[Any]:
        """Return a new buffer holding ``left + right``."""
        ...

    def subtract(self, left: NDArray[Any], right: NDArray[Any]) -> NDArray[Any]:
        """Return a new buffer holding ``left - right``."""
        ...

    def scale(self, data: NDArray[Any], scalar: Any) -> None:
        """Multiply ``data`` by ``scalar`` in place."""
        ...

    def dot(self, left: NDArray[Any], right: NDArray[Any]) -> Any:
        """Return the sum of pairwise products as a numpy scalar."""
        ...

    def sum_of_squares(self, data: NDArray[Any], scale: float = 1.0) -> float:
        """Return the float64 sum of squared elements of ``data / scale``."""
        ...

    def max_abs(self, data: NDArray[Any]) -> float:
        """Return the largest absolute element of a non-empty buffer."""
        ...
