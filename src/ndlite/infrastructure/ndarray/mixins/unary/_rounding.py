"""
Rounding elementwise operations.

``round`` rounds half away from zero (``round(2.5) == 3``,
``round(-2.5) == -3``), unlike NumPy's round-half-to-even.
"""

from __future__ import annotations

from abc import ABC
from typing import Any

import numpy as np


def _round_half_away(x: np.ndarray) -> np.ndarray:
    return np.copysign(np.floor(np.abs(x) + 0.5), x)


def _signum(x: np.ndarray) -> np.ndarray:
    # copysign keeps the sign of zero; NaN stays NaN.
    return np.where(np.isnan(x), np.nan, np.copysign(1.0, x))


class NDArrayMixinRounding(ABC):
    """Mixin implementing the rounding family."""

    def floor(self) -> Any:
        return self._map(np.floor, "floor")

    def ceil(self) -> Any:
        return self._map(np.ceil, "ceil")

    def round(self) -> Any:
        """Round to the nearest integer, halves away from zero."""
        return self._map(_round_half_away, "round")

    def trunc(self) -> Any:
        """Round toward zero."""
        return self._map(np.trunc, "trunc")

    def fract(self) -> Any:
        """Fractional part ``x - trunc(x)``; keeps the sign of `x`."""
        return self._map(lambda x: x - np.trunc(x), "fract")

    def signum(self) -> Any:
        """
        ``1.0`` for positive values and ``+0.0``, ``-1.0`` for negative values
        and ``-0.0``, NaN for NaN.
        """
        return self._map(_signum, "signum")
