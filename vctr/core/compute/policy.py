"""
Execution policy: when to run a kernel sequentially and when to fan out.

Every arithmetic or reduction operation makes one strategy decision per
call by comparing the operand length against a threshold for its kind of
work. Crossing the threshold changes performance only, never the result
(up to floating-point accumulation order for reductions).

Configuration is layered:
    - per call: pass ``policy=`` to a free function
    - scoped: ``with execution_policy(mode='sequential'): ...``  (per thread)
    - process-wide: ``set_default_policy(ExecutionPolicy(...))``
"""

from __future__ import annotations

import os
import threading
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from typing import Iterator, Literal

from vctr.core.exceptions import ValidationError


ExecutionMode = Literal['auto', 'sequential', 'parallel']
WorkKind = Literal['elementwise', 'reduction', 'dot']

# Crossover points below which thread fan-out costs more than it saves.
DEFAULT_ELEMENTWISE_THRESHOLD = 1000
DEFAULT_REDUCTION_THRESHOLD = 1000
DEFAULT_DOT_THRESHOLD = 1000

_MODES = ('auto', 'sequential', 'parallel')


@dataclass(frozen=True)
class ExecutionPolicy:
    """
    Immutable strategy selection for vector kernels.

    Attributes:
        mode: 'auto' applies the thresholds; 'sequential' and 'parallel'
            force one path regardless of size
        elementwise_threshold: Length above which add, subtract and scale
            run in parallel
        reduction_threshold: Length above which magnitude runs in parallel
        dot_threshold: Length above which the dot product runs in parallel
        max_workers: Worker threads for the parallel path; None uses the
            CPU count
    """
    mode: ExecutionMode = 'auto'
    elementwise_threshold: int = DEFAULT_ELEMENTWISE_THRESHOLD
    reduction_threshold: int = DEFAULT_REDUCTION_THRESHOLD
    dot_threshold: int = DEFAULT_DOT_THRESHOLD
    max_workers: int | None = None

    def __post_init__(self) -> None:
        if self.mode not in _MODES:
            raise ValidationError(
                f"mode: expected one of {_MODES}, got {self.mode!r}"
            )
        for field_name in ('elementwise_threshold', 'reduction_threshold', 'dot_threshold'):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValidationError(
                    f"{field_name}: expected a non-negative integer, got {value!r}"
                )
        if self.max_workers is not None:
            if isinstance(self.max_workers, bool) or not isinstance(self.max_workers, int) \
                    or self.max_workers < 1:
                raise ValidationError(
                    f"max_workers: expected a positive integer or None, got {self.max_workers!r}"
                )

    def threshold(self, kind: WorkKind) -> int:
        """Threshold that applies to ``kind`` of work."""
        if kind == 'elementwise':
            return self.elementwise_threshold
        if kind == 'reduction':
            return self.reduction_threshold
        if kind == 'dot':
            return self.dot_threshold
        raise ValidationError(f"kind: unknown work kind {kind!r}")

    def use_parallel(self, kind: WorkKind, n: int) -> bool:
        """
        Decide the execution path for one call.

        Args:
            kind: 'elementwise', 'reduction' or 'dot'
            n: Operand length

        Returns:
            True if the parallel path should run
        """
        if self.mode == 'sequential':
            return False
        if self.mode == 'parallel':
            return True
        return n > self.threshold(kind)

    @property
    def workers(self) -> int:
        """Resolved worker count for the parallel path."""
        if self.max_workers is not None:
            return self.max_workers
        return os.cpu_count() or 1


_lock = threading.Lock()
_default_policy = ExecutionPolicy()

# Scoped overrides from execution_policy(); local to each thread and
# asyncio task, so overlapping blocks never see each other's policy.
_scoped_policy: ContextVar[ExecutionPolicy | None] = ContextVar(
    'vctr_scoped_policy', default=None
)


def get_default_policy() -> ExecutionPolicy:
    """Return the process-wide policy, ignoring any scoped override."""
    return _default_policy


def set_default_policy(policy: ExecutionPolicy) -> ExecutionPolicy:
    """
    Replace the process-wide policy.

    Args:
        policy: New default

    Returns:
        The policy that was previously in effect
    """
    global _default_policy
    if not isinstance(policy, ExecutionPolicy):
        raise ValidationError(
            f"policy: expected ExecutionPolicy, got {type(policy).__name__}"
        )
    with _lock:
        previous = _default_policy
        _default_policy = policy
    return previous


def current_policy() -> ExecutionPolicy:
    """Return the innermost scoped policy, or the process-wide default."""
    scoped = _scoped_policy.get()
    if scoped is not None:
        return scoped
    return _default_policy


def resolve_policy(policy: ExecutionPolicy | None) -> ExecutionPolicy:
    """Return ``policy``, or the current policy when it is None."""
    if policy is None:
        return current_policy()
    if not isinstance(policy, ExecutionPolicy):
        raise ValidationError(
            f"policy: expected ExecutionPolicy, got {type(policy).__name__}"
        )
    return policy


@contextmanager
def execution_policy(**overrides) -> Iterator[ExecutionPolicy]:
    """
    Temporarily override fields of the current policy.

    The override applies to the calling thread (or asyncio task) only and
    never changes the process-wide default. Blocks nest.

    Usage:
        with execution_policy(mode='sequential'):
            total = a + b

    Args:
        **overrides: ExecutionPolicy fields to replace

    Yields:
        The policy in effect inside the block
    """
    policy = replace(current_policy(), **overrides)
    token = _scoped_policy.set(policy)
    try:
        yield policy
    finally:
        _scoped_policy.reset(token)
