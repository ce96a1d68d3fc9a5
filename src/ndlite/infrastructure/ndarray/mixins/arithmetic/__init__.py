"""
Arithmetic mixins for NDArray.

This package aggregates elementwise arithmetic:

- ``NDArrayMixinArithmetic``: ``+ - * /`` against scalars and same-shape arrays
- ``NDArrayMixinProducts``: ``multiply``, ``maximum``, ``minimum``, ``atan2``,
  ``hypot`` and the legacy ``dot``/``cross`` names
"""

from ._base import NDArrayMixinArithmetic
from ._products import NDArrayMixinProducts

__all__ = [
    NDArrayMixinArithmetic.__name__,
    NDArrayMixinProducts.__name__,
]
