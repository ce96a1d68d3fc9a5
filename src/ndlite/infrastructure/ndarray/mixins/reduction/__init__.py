"""
Reduction mixin and strategy-specific implementations for NDArray.

This package aggregates full-array reductions:

- ``sum``            : dispatched on ``reduction_strategy``
- ``sequential_sum`` : single-threaded left fold
- ``parallel_sum``   : partitioned accumulation on worker threads
- ``mean``           : ``sum() / size``

The ``_array_sum`` module is imported for side effects so that the
control paths of ``sum`` are registered; it is not used directly.

Public API
----------
- ``NDArrayMixinReduction``
"""

from ._array_sum import *
from ._base import NDArrayMixinReduction

__all__ = [
    NDArrayMixinReduction.__name__,
]
