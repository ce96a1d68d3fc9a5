"""
Arithmetic mixin defining elementwise NDArray operators.

This module declares :class:`NDArrayMixinArithmetic`, which provides addition,
subtraction, multiplication and division against scalars and same-shaped
arrays, along with the matching Python operators.

Operand rules
-------------
- Scalars (``int``/``float``/NumPy reals) on either side are applied as unary
  maps; no scalar is lifted into a full array.
- Arrays and nested sequences must match the receiver's shape exactly;
  mismatches raise `ShapeMismatchError`. There is no broadcasting.
"""

from __future__ import annotations

from abc import ABC
from typing import Any, Union

import numpy as np

from ..._storage import is_scalar

Number = Union[int, float]
"""Scalar types accepted by NDArray arithmetic operators."""


def _require_scalar(value: Any, op: str) -> float:
    if not is_scalar(value):
        raise TypeError(f"{op} expects a real scalar, got {type(value)!r}")
    return float(value)


class NDArrayMixinArithmetic(ABC):
    """
    Mixin implementing elementwise arithmetic.

    Notes
    -----
    Every method returns a new array whose extrema are rescanned from the
    result.
    """

    # ----------------------------
    # Scalar forms
    # ----------------------------
    def add_scalar(self, value: Number) -> Any:
        """Return ``self + value`` elementwise."""
        v = _require_scalar(value, "add_scalar")
        return self._map(lambda x: np.add(x, v), "add_scalar")

    def sub_scalar(self, value: Number) -> Any:
        """Return ``self - value`` elementwise."""
        v = _require_scalar(value, "sub_scalar")
        return self._map(lambda x: np.subtract(x, v), "sub_scalar")

    def mul_scalar(self, value: Number) -> Any:
        """Return ``self * value`` elementwise."""
        v = _require_scalar(value, "mul_scalar")
        return self._map(lambda x: np.multiply(x, v), "mul_scalar")

    def div_scalar(self, value: Number) -> Any:
        """
        Return ``self / value`` elementwise.

        Division by zero follows IEEE semantics (``±inf`` or ``nan``).
        """
        v = _require_scalar(value, "div_scalar")
        return self._map(lambda x: np.divide(x, v), "div_scalar")

    # ----------------------------
    # Scalar-or-array forms
    # ----------------------------
    def add(self, other: Union[Any, Number]) -> Any:
        """
        Elementwise addition.

        Parameters
        ----------
        other : Union[NDArray, Number, Sequence]
            Scalar, or array-like of the same shape.
        """
        return self._scalar_or_zip(other, np.add, "add")

    def sub(self, other: Union[Any, Number]) -> Any:
        """Elementwise subtraction ``self - other``."""
        return self._scalar_or_zip(other, np.subtract, "sub")

    def mul(self, other: Union[Any, Number]) -> Any:
        """Elementwise multiplication ``self * other``."""
        return self._scalar_or_zip(other, np.multiply, "mul")

    def div(self, other: Union[Any, Number]) -> Any:
        """Elementwise true division ``self / other``."""
        return self._scalar_or_zip(other, np.divide, "div")

    def neg(self) -> Any:
        """Elementwise negation."""
        return self._map(np.negative, "neg")

    def abs(self) -> Any:
        """Elementwise absolute value."""
        return self._map(np.abs, "abs")

    def recip(self) -> Any:
        """Elementwise reciprocal ``1 / x``."""
        return self._map(np.reciprocal, "recip")

    # ----------------------------
    # Operators
    # ----------------------------
    def __add__(self, other: Union[Any, Number]) -> Any:
        return self.add(other)

    def __radd__(self, other: Union[Any, Number]) -> Any:
        return self.add(other)

    def __sub__(self, other: Union[Any, Number]) -> Any:
        return self.sub(other)

    def __rsub__(self, other: Union[Any, Number]) -> Any:
        """Right-hand subtraction to support ``scalar - NDArray``."""
        if is_scalar(other):
            v = float(other)
            return self._map(lambda x: np.subtract(v, x), "rsub")
        return self._as_operand(other).sub(self)

    def __mul__(self, other: Union[Any, Number]) -> Any:
        return self.mul(other)

    def __rmul__(self, other: Union[Any, Number]) -> Any:
        return self.mul(other)

    def __truediv__(self, other: Union[Any, Number]) -> Any:
        return self.div(other)

    def __rtruediv__(self, other: Union[Any, Number]) -> Any:
        """Right-hand division to support ``scalar / NDArray``."""
        if is_scalar(other):
            v = float(other)
            return self._map(lambda x: np.divide(v, x), "rtruediv")
        return self._as_operand(other).div(self)

    def __neg__(self) -> Any:
        return self.neg()

    def __pos__(self) -> Any:
        return self._map(np.positive, "pos")

    def __abs__(self) -> Any:
        return self.abs()

    def __pow__(self, other: Union[Any, Number]) -> Any:
        return self.pow(other)

    def __rpow__(self, other: Union[Any, Number]) -> Any:
        """Right-hand power to support ``scalar ** NDArray``."""
        if is_scalar(other):
            v = float(other)
            return self._map(lambda x: np.power(v, x), "rpow")
        return self._as_operand(other).pow(self)
