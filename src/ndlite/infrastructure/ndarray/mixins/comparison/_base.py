"""
Comparison mixin defining elementwise NDArray comparisons.

This module declares :class:`NDArrayMixinComparison`, which provides
greater-than, greater-or-equal, less-than, less-or-equal, equal and not-equal
comparisons against scalars and same-shaped arrays, plus `clamp`.

The outputs are numeric masks (``float64``) rather than boolean arrays, where
``1.0`` represents ``True`` and ``0.0`` represents ``False``. This makes them
convenient for use in subsequent arithmetic expressions.

``==`` and ``!=`` are *not* mapped to `eq`/`ne`: on arrays they keep their
structural meaning and return a single ``bool``.
"""

from __future__ import annotations

from abc import ABC
from typing import Any, Union

import numpy as np

from ....ops.elementwise_cpu import as_mask
from ..._storage import is_scalar

Number = Union[int, float]
"""Scalar types accepted by comparison operators."""


class NDArrayMixinComparison(ABC):
    """
    Mixin implementing elementwise comparisons.

    Notes
    -----
    - Scalar operands are compared directly; they are never lifted into full
      arrays.
    - Broadcasting is not supported; array operand shapes must match.
    - Comparisons involving NaN are false (``ne`` is true).
    """

    def gt(self, other: Union[Any, Number]) -> Any:
        """1.0 where ``self > other``, 0.0 elsewhere."""
        return self._scalar_or_zip(other, as_mask(np.greater), "gt")

    def ge(self, other: Union[Any, Number]) -> Any:
        """1.0 where ``self >= other``, 0.0 elsewhere."""
        return self._scalar_or_zip(other, as_mask(np.greater_equal), "ge")

    def lt(self, other: Union[Any, Number]) -> Any:
        """1.0 where ``self < other``, 0.0 elsewhere."""
        return self._scalar_or_zip(other, as_mask(np.less), "lt")

    def le(self, other: Union[Any, Number]) -> Any:
        """1.0 where ``self <= other``, 0.0 elsewhere."""
        return self._scalar_or_zip(other, as_mask(np.less_equal), "le")

    def eq(self, other: Union[Any, Number]) -> Any:
        """1.0 where elements are equal, 0.0 elsewhere."""
        return self._scalar_or_zip(other, as_mask(np.equal), "eq")

    def ne(self, other: Union[Any, Number]) -> Any:
        """1.0 where elements differ, 0.0 elsewhere."""
        return self._scalar_or_zip(other, as_mask(np.not_equal), "ne")

    def clamp(self, lo: Number, hi: Number) -> Any:
        """
        Limit every element to the closed range ``[lo, hi]``.

        NaN elements stay NaN.

        Raises
        ------
        TypeError
            If a bound is not a real scalar.
        ValueError
            If ``lo > hi``.
        """
        if not (is_scalar(lo) and is_scalar(hi)):
            raise TypeError(f"clamp bounds must be real scalars, got {lo!r}, {hi!r}")
        lo_, hi_ = float(lo), float(hi)
        if lo_ > hi_:
            raise ValueError(f"clamp requires lo <= hi, got lo={lo_}, hi={hi_}")
        return self._map(lambda x: np.clip(x, lo_, hi_), "clamp")

    # ----------------------------
    # Operators
    # ----------------------------
    def __gt__(self, other: Union[Any, Number]) -> Any:
        return self.gt(other)

    def __ge__(self, other: Union[Any, Number]) -> Any:
        return self.ge(other)

    def __lt__(self, other: Union[Any, Number]) -> Any:
        return self.lt(other)

    def __le__(self, other: Union[Any, Number]) -> Any:
        return self.le(other)
