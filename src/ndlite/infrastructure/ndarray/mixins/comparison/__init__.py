"""
Comparison and logical mixins for NDArray.

This package aggregates mask-producing elementwise operations:

- ``gt``/``ge``/``lt``/``le``/``eq``/``ne`` and the ordering operators
- ``clamp``
- ``logical_and``/``logical_or``/``logical_xor`` and ``&``/``|``/``^``

Public API
----------
- ``NDArrayMixinComparison``
- ``NDArrayMixinLogical``
"""

from ._base import NDArrayMixinComparison
from ._logical import NDArrayMixinLogical

__all__ = [
    NDArrayMixinComparison.__name__,
    NDArrayMixinLogical.__name__,
]
