"""
Pairwise product and combination operations.

This module declares :class:`NDArrayMixinProducts`: binary elementwise
operations beyond the four basic operators.

``dot`` and ``cross`` are kept for callers that already use those names, but
they compute the *elementwise* product (not an inner or vector cross product).
They warn and delegate to :meth:`multiply`.
"""

from __future__ import annotations

import warnings
from abc import ABC
from typing import Any, Union

import numpy as np

Number = Union[int, float]


class NDArrayMixinProducts(ABC):
    """Mixin implementing elementwise products and pairwise combinations."""

    def multiply(self, other: Union[Any, Number]) -> Any:
        """
        Elementwise (Hadamard) product.

        Parameters
        ----------
        other : Union[NDArray, Number, Sequence]
            Scalar, or array-like of the same shape.
        """
        return self._scalar_or_zip(other, np.multiply, "multiply")

    def dot(self, other: Any) -> Any:
        """
        Elementwise product under a legacy name.

        This is *not* an inner product; the result has the operands' shape.
        Prefer :meth:`multiply`.
        """
        warnings.warn(
            "NDArray.dot computes an elementwise product, not an inner product; "
            "use NDArray.multiply instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        return self._zip(other, np.multiply, "dot")

    def cross(self, other: Any) -> Any:
        """
        Elementwise product under a legacy name.

        This is *not* a vector cross product. Prefer :meth:`multiply`.
        """
        warnings.warn(
            "NDArray.cross computes an elementwise product, not a cross product; "
            "use NDArray.multiply instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        return self._zip(other, np.multiply, "cross")

    def maximum(self, other: Union[Any, Number]) -> Any:
        """Elementwise maximum (NaN propagates)."""
        return self._scalar_or_zip(other, np.maximum, "maximum")

    def minimum(self, other: Union[Any, Number]) -> Any:
        """Elementwise minimum (NaN propagates)."""
        return self._scalar_or_zip(other, np.minimum, "minimum")

    def atan2(self, other: Union[Any, Number]) -> Any:
        """Elementwise ``atan2(self, other)``, quadrant-aware."""
        return self._scalar_or_zip(other, np.arctan2, "atan2")

    def hypot(self, other: Union[Any, Number]) -> Any:
        """Elementwise ``sqrt(self**2 + other**2)`` without intermediate overflow."""
        return self._scalar_or_zip(other, np.hypot, "hypot")
