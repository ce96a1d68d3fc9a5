"""
Unary mixins for NDArray.

This package aggregates the unary elementwise catalogue:

- trigonometric/hyperbolic functions
- exponentials and logarithms with the fixed bases 2, 10, e and π
- powers and roots
- rounding
- classification predicates (1.0/0.0 results)

Every operation is a unary map on the elementwise engine and returns a new
array of the same shape. The families are combined into a single exported
mixin:

- ``NDArrayMixinUnary``
"""

from ._classification import NDArrayMixinClassification
from ._exponential import NDArrayMixinExponential
from ._power import NDArrayMixinPower
from ._rounding import NDArrayMixinRounding
from ._trigonometric import NDArrayMixinTrigonometric


class NDArrayMixinUnary(
    NDArrayMixinTrigonometric,
    NDArrayMixinExponential,
    NDArrayMixinPower,
    NDArrayMixinRounding,
    NDArrayMixinClassification,
):
    pass


__all__ = [
    NDArrayMixinUnary.__name__,
]
