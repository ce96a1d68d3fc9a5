"""
Classification predicates.

Each predicate returns an array of the same shape holding 1.0 where the
condition holds and 0.0 elsewhere.
"""

from __future__ import annotations

from abc import ABC
from typing import Any

import numpy as np

from ....ops.elementwise_cpu import as_mask


class NDArrayMixinClassification(ABC):
    """Mixin implementing the sign/classification predicates."""

    def is_finite(self) -> Any:
        return self._map(as_mask(np.isfinite), "is_finite")

    def is_nan(self) -> Any:
        return self._map(as_mask(np.isnan), "is_nan")

    def is_infinite(self) -> Any:
        return self._map(as_mask(np.isinf), "is_infinite")

    def is_zero(self) -> Any:
        """1.0 where the element equals 0.0 (either sign)."""
        return self._map(as_mask(lambda x: np.equal(x, 0.0)), "is_zero")

    def is_one(self) -> Any:
        return self._map(as_mask(lambda x: np.equal(x, 1.0)), "is_one")

    def is_positive(self) -> Any:
        """1.0 where the element is strictly greater than zero."""
        return self._map(as_mask(lambda x: np.greater(x, 0.0)), "is_positive")

    def is_negative(self) -> Any:
        """1.0 where the element is strictly less than zero."""
        return self._map(as_mask(lambda x: np.less(x, 0.0)), "is_negative")
