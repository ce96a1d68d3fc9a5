"""
Reduction mixin defining the public NDArray reduction API.

This module declares :class:`NDArrayMixinReduction`. It implements the two
summation strategies directly (`sequential_sum`, `parallel_sum`) and declares
`sum`, whose concrete behavior is registered elsewhere via the control-path
dispatch mechanism keyed on ``self.reduction_strategy``. The array therefore
exposes a single, stable ``sum()`` while the strategy is chosen at runtime
from its size and the active `ReductionSettings`.
"""

from __future__ import annotations

from abc import ABC

from ...._settings import get_settings
from ....ops.reduce_cpu import left_fold_sum, partitioned_sum


class NDArrayMixinReduction(ABC):
    """
    Mixin defining full-array reductions.

    Notes
    -----
    - Assumes the host class provides ``_storage_for(op)`` and ``size``.
    - Every reduction covers all elements; there are no axis reductions.
    """

    def sum(self) -> float:
        """
        Sum all elements using the policy-selected strategy.

        Arrays with more elements than the configured parallel threshold
        (1_000_000 by default) are summed with `parallel_sum`; all others
        with `sequential_sum`.

        Returns
        -------
        float
            The sum of all elements.

        Notes
        -----
        The two strategies agree up to floating-point reassociation.
        """

    def sequential_sum(self) -> float:
        """
        Sum all elements with a single-threaded left fold in row-major order,
        starting from 0.0.
        """
        return left_fold_sum(self._storage_for("sequential_sum").flat())

    def parallel_sum(self) -> float:
        """
        Sum all elements by folding contiguous partitions on worker threads.

        Partial sums are combined in partition order, so the result is
        deterministic for a given worker count.
        """
        flat = self._storage_for("parallel_sum").flat()
        return partitioned_sum(flat, get_settings().max_workers)

    def mean(self) -> float:
        """Arithmetic mean of all elements, ``sum() / size``."""
        return self.sum() / self.size
