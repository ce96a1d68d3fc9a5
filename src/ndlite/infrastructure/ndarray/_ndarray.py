"""
Concrete NDArray implementation (NumPy backend).

This module provides `NDArray`, the dense floating-point array of rank 1
through 4 that satisfies the domain-level `INDArray` protocol. The class is
assembled from mixins, each owning one operation group:

- `NDArrayMixinElementwise`: the transform engine (unary/binary maps),
- `NDArrayMixinArithmetic`, `NDArrayMixinProducts`: arithmetic catalogue,
- `NDArrayMixinUnary`: trigonometric, exponential, power, rounding and
  classification catalogue,
- `NDArrayMixinComparison`, `NDArrayMixinLogical`: mask-producing operations,
- `NDArrayMixinReduction`: ``sum`` (strategy-dispatched) and friends,
- `NDArrayMixinMemory`: copies and exports,
- `NDArrayShapeAndIndexingMixin`: flatten, reshape and element access.

Design notes
------------
- Each array exclusively owns one `ArrayStorage`. Nothing is shared between
  arrays; every non-consuming operation allocates a fresh buffer.
- ``min`` and ``max`` are computed once when the array is created and cached.
  Transforms always rescan their output; reshape and clone copy the cache.
- Consuming transforms move the storage into their result and leave the
  receiver without storage. Any later use raises `ArrayConsumedError`.
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from ...domain._errors import ArrayConsumedError
from ...domain._reduction import ReductionStrategy
from ...domain._shape import Rank, Shape
from .._settings import get_settings
from ..ops.reduce_cpu import scan_extrema
from ._shape_and_indexing import NDArrayShapeAndIndexingMixin
from ._storage import ArrayStorage

from .mixins.elementwise import NDArrayMixinElementwise
from .mixins.arithmetic import NDArrayMixinArithmetic, NDArrayMixinProducts
from .mixins.unary import NDArrayMixinUnary
from .mixins.comparison import NDArrayMixinComparison, NDArrayMixinLogical
from .mixins.reduction import NDArrayMixinReduction
from .mixins.memory import NDArrayMixinMemory


class NDArray(
    NDArrayShapeAndIndexingMixin,
    NDArrayMixinMemory,
    NDArrayMixinReduction,
    NDArrayMixinLogical,
    NDArrayMixinComparison,
    NDArrayMixinUnary,
    NDArrayMixinProducts,
    NDArrayMixinArithmetic,
    NDArrayMixinElementwise,
):
    """
    Dense ``float64`` array of rank 1 through 4.

    Parameters
    ----------
    storage : ArrayStorage
        Rank-tagged storage this array takes exclusive ownership of.
    extrema : Optional[tuple[float, float]], optional
        Known ``(min, max)`` of the elements. When omitted they are computed
        by a full scan.

    Notes
    -----
    Arrays are normally built with the factory functions (`asarray`,
    `from_rank2`, `zeros`, ...) rather than by calling this constructor.
    """

    # Keep NumPy from handling mixed expressions such as ``np.float64(2) * a``;
    # the reflected operators on this class apply instead.
    __array_ufunc__ = None

    __hash__ = None

    def __init__(
        self,
        storage: ArrayStorage,
        *,
        extrema: Optional[tuple[float, float]] = None,
    ) -> None:
        if not isinstance(storage, ArrayStorage):
            raise TypeError(
                f"NDArray expects an ArrayStorage, got {type(storage)!r}"
            )
        self._storage: Optional[ArrayStorage] = storage
        if extrema is None:
            extrema = scan_extrema(storage.buffer)
        self._extrema: Optional[tuple[float, float]] = (
            float(extrema[0]),
            float(extrema[1]),
        )

    # ----------------------------
    # Construction helpers
    # ----------------------------
    @classmethod
    def _from_storage(
        cls,
        storage: ArrayStorage,
        extrema: Optional[tuple[float, float]] = None,
    ) -> "NDArray":
        return cls(storage, extrema=extrema)

    def _new_from_buffer(self, buffer: np.ndarray) -> "NDArray":
        """Wrap a freshly computed buffer; extrema are rescanned."""
        return type(self)(ArrayStorage.from_buffer(buffer))

    # ----------------------------
    # Ownership
    # ----------------------------
    def _storage_for(self, op: str) -> ArrayStorage:
        """
        Return the live storage.

        Raises
        ------
        ArrayConsumedError
            If a consuming transform has already taken the storage.
        """
        if self._storage is None:
            raise ArrayConsumedError(op)
        return self._storage

    def _buffer_for(self, op: str) -> np.ndarray:
        return self._storage_for(op).buffer

    def _consume(self, op: str) -> ArrayStorage:
        """Detach and return the storage, leaving this array consumed."""
        storage = self._storage_for(op)
        self._storage = None
        self._extrema = None
        return storage

    @property
    def consumed(self) -> bool:
        """Whether this array's storage was moved by a consuming transform."""
        return self._storage is None

    # ----------------------------
    # Shape model
    # ----------------------------
    @property
    def shape(self) -> Shape:
        return self._storage_for("shape").shape

    @property
    def rank(self) -> Rank:
        return self._storage_for("rank").rank

    @property
    def ndim(self) -> int:
        return int(self.rank)

    @property
    def size(self) -> int:
        return self._storage_for("size").size

    @property
    def reduction_strategy(self) -> ReductionStrategy:
        """
        Summation strategy selected for this array under the active settings.

        Returns
        -------
        ReductionStrategy
            `PARALLEL` when ``size`` exceeds the parallel threshold, otherwise
            `SEQUENTIAL`.
        """
        return ReductionStrategy.for_size(
            self.size, get_settings().parallel_threshold
        )

    # ----------------------------
    # Extrema
    # ----------------------------
    def min(self) -> float:
        """Smallest element (cached). NaN if any element is NaN."""
        self._storage_for("min")
        return self._extrema[0]

    def max(self) -> float:
        """Largest element (cached). NaN if any element is NaN."""
        self._storage_for("max")
        return self._extrema[1]

    # ----------------------------
    # Python protocol
    # ----------------------------
    def __eq__(self, other: Any) -> bool:
        """
        Structural equality: same shape and identical elements.

        NaN elements never compare equal. For an elementwise mask use `eq`.
        """
        if not isinstance(other, NDArray):
            return NotImplemented
        a = self._buffer_for("__eq__")
        b = other._buffer_for("__eq__")
        return a.shape == b.shape and bool(np.array_equal(a, b))

    def __len__(self) -> int:
        """Length of the first dimension."""
        return self.shape[0]

    def __repr__(self) -> str:
        if self._storage is None:
            return f"{type(self).__name__}(<consumed>)"
        return (
            f"{type(self).__name__}(shape={self.shape}, "
            f"min={self.min()!r}, max={self.max()!r})"
        )
