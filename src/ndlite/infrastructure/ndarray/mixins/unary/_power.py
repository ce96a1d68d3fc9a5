"""
Power and root elementwise operations.
"""

from __future__ import annotations

import numbers
from abc import ABC
from typing import Any, Union

import numpy as np

Number = Union[int, float]


class NDArrayMixinPower(ABC):
    """Mixin implementing the power/root family."""

    def pow(self, exponent: Union[Any, Number]) -> Any:
        """
        Elementwise power.

        Parameters
        ----------
        exponent : Union[NDArray, Number, Sequence]
            Scalar exponent, or array-like of exponents with the same shape.
        """
        return self._scalar_or_zip(exponent, np.power, "pow")

    def square(self) -> Any:
        return self._map(np.square, "square")

    def sqrt(self) -> Any:
        """Elementwise square root; negative inputs yield NaN."""
        return self._map(np.sqrt, "sqrt")

    def cbrt(self) -> Any:
        """Elementwise real cube root (defined for negative inputs)."""
        return self._map(np.cbrt, "cbrt")

    def root(self, n: Number) -> Any:
        """
        Elementwise n-th root.

        Odd integer roots are real for negative inputs (``root(-8, 3) == -2``);
        other roots of negative inputs yield NaN.

        Raises
        ------
        ValueError
            If ``n == 0``.
        """
        if n == 0:
            raise ValueError("root() is undefined for n == 0")
        inv = 1.0 / float(n)
        if isinstance(n, numbers.Integral) and int(n) % 2 == 1:
            return self._map(
                lambda x: np.copysign(np.power(np.abs(x), inv), x), "root"
            )
        return self._map(lambda x: np.power(x, inv), "root")
