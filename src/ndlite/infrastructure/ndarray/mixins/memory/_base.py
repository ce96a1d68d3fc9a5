"""
Memory mixin: copies and exports of array storage.

Every method here returns data that is independent of the receiver; mutating
the result never affects the array.
"""

from __future__ import annotations

from abc import ABC
from typing import Any

import numpy as np


class NDArrayMixinMemory(ABC):
    """
    Mixin implementing copy and export operations.

    Notes
    -----
    Assumes the host class provides ``_storage_for(op)`` and
    ``_from_storage(storage, extrema)``.
    """

    def clone(self) -> Any:
        """
        Return a deep copy of this array.

        The copy owns a fresh buffer and carries over the cached extrema.
        """
        storage = self._storage_for("clone")
        return self._from_storage(storage.copy(), extrema=(self.min(), self.max()))

    def copy(self) -> Any:
        """Alias of :meth:`clone`."""
        return self.clone()

    def to_numpy(self) -> np.ndarray:
        """
        Return the elements as a new ``float64`` NumPy array of the same shape.
        """
        return self._storage_for("to_numpy").buffer.copy(order="C")

    def tolist(self) -> list:
        """
        Return the elements as nested Python lists mirroring the rank.

        A rank-2 array of shape ``(2, 3)`` becomes a list of two lists of
        three floats.
        """
        return self._storage_for("tolist").buffer.tolist()

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        """Export for NumPy; the result is always a fresh copy."""
        if copy is False:
            raise ValueError("NDArray cannot be exposed to NumPy without a copy")
        out = self.to_numpy()
        return out if dtype is None else out.astype(dtype, copy=False)
