"""
Reduction strategy abstractions.

This module defines `ReductionStrategy`, the runtime state used to select
between the sequential and parallel summation paths. Arrays expose their
current strategy via a ``reduction_strategy`` property; the control-path
dispatcher routes ``sum()`` on that value.
"""

from enum import Enum


class ReductionStrategy(Enum):
    """
    Enumeration of full-array accumulation strategies.

    Attributes
    ----------
    SEQUENTIAL : ReductionStrategy
        Single-threaded left fold in row-major order.
    PARALLEL : ReductionStrategy
        Partitioned accumulation on a worker pool, partials combined in
        partition order.
    """

    SEQUENTIAL = "sequential"
    PARALLEL = "parallel"

    @classmethod
    def for_size(cls, size: int, parallel_threshold: int) -> "ReductionStrategy":
        """
        Select a strategy for an array of `size` elements.

        Sizes strictly greater than `parallel_threshold` use the parallel path.
        """
        if size > parallel_threshold:
            return cls.PARALLEL
        return cls.SEQUENTIAL

    def __str__(self) -> str:
        return self.value
