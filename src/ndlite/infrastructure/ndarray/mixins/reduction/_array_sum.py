"""
Strategy-specific implementations of NDArray.sum using control-path dispatch.

This module registers the sequential and parallel implementations of
``NDArray.sum`` through `ndarray_control_path_manager`. At runtime the
implementation is selected from ``self.reduction_strategy``.
"""

from ..._ndarray_builder import ndarray_control_path_manager
from .....domain._reduction import ReductionStrategy

from ._base import NDArrayMixinReduction as NMR


@ndarray_control_path_manager(NMR, NMR.sum, ReductionStrategy.SEQUENTIAL)
def _sum_sequential(self) -> float:
    """Sequential path of NDArray.sum: a single-threaded left fold."""
    return self.sequential_sum()


@ndarray_control_path_manager(NMR, NMR.sum, ReductionStrategy.PARALLEL)
def _sum_parallel(self) -> float:
    """Parallel path of NDArray.sum: partitioned accumulation on a thread pool."""
    return self.parallel_sum()
