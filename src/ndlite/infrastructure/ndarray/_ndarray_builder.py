"""
NDArray control-path manager for strategy-specific dispatch.

This module defines the shared control-path manager used to register and
resolve strategy-specific implementations of NDArray methods.

The manager is created by specializing the generic `create_path_builder`
utility with the state attribute name ``"reduction_strategy"``. Method
dispatch is therefore performed on the runtime value of
``self.reduction_strategy``, which depends on the array's size and the active
`ReductionSettings`.

Typical usage
-------------
    @ndarray_control_path_manager(Mixin, Mixin.sum, ReductionStrategy.SEQUENTIAL)
    def sum_sequential(self): ...

    @ndarray_control_path_manager(Mixin, Mixin.sum, ReductionStrategy.PARALLEL)
    def sum_parallel(self): ...
"""

from ...domain.utils._control_path import create_path_builder

# Control-path manager that dispatches NDArray methods on `self.reduction_strategy`
ndarray_control_path_manager = create_path_builder("reduction_strategy")
