"""
Memory mixins for NDArray.

- ``clone`` / ``copy`` : deep copy with extrema carried over
- ``to_numpy``         : independent NumPy copy
- ``tolist``           : nested Python lists

Public API
----------
- ``NDArrayMixinMemory``
"""

from ._base import NDArrayMixinMemory

__all__ = [
    NDArrayMixinMemory.__name__,
]
