"""
Trigonometric and hyperbolic elementwise operations.

Angles are in radians. Out-of-domain inputs (e.g. ``asin(2.0)``) produce NaN.
"""

from __future__ import annotations

from abc import ABC
from typing import Any

import numpy as np


class NDArrayMixinTrigonometric(ABC):
    """Mixin implementing the trigonometric family."""

    def sin(self) -> Any:
        return self._map(np.sin, "sin")

    def cos(self) -> Any:
        return self._map(np.cos, "cos")

    def tan(self) -> Any:
        return self._map(np.tan, "tan")

    def asin(self) -> Any:
        return self._map(np.arcsin, "asin")

    def acos(self) -> Any:
        return self._map(np.arccos, "acos")

    def atan(self) -> Any:
        return self._map(np.arctan, "atan")

    def sinh(self) -> Any:
        return self._map(np.sinh, "sinh")

    def cosh(self) -> Any:
        return self._map(np.cosh, "cosh")

    def tanh(self) -> Any:
        return self._map(np.tanh, "tanh")

    def asinh(self) -> Any:
        return self._map(np.arcsinh, "asinh")

    def acosh(self) -> Any:
        return self._map(np.arccosh, "acosh")

    def atanh(self) -> Any:
        return self._map(np.arctanh, "atanh")

    def to_degrees(self) -> Any:
        """Convert radians to degrees."""
        return self._map(np.degrees, "to_degrees")

    def to_radians(self) -> Any:
        """Convert degrees to radians."""
        return self._map(np.radians, "to_radians")
