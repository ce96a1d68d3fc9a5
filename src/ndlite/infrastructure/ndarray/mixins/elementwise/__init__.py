"""
Elementwise transform engine for NDArray.

Only the mixin class is exported:

- ``NDArrayMixinElementwise``
"""

from ._base import NDArrayMixinElementwise

__all__ = [
    NDArrayMixinElementwise.__name__,
]
