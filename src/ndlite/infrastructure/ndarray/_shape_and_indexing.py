"""
NDArray shape and indexing mixin (NumPy CPU backend).

This module defines `NDArrayShapeAndIndexingMixin`, the group of methods that
change an array's logical shape or read single elements:

- `flatten` / `ravel`: the row-major element sequence,
- `reshape`: the same row-major sequence relabelled with a new shape,
- `item`: single-element access by full multi-index.

Design notes
------------
- To avoid circular imports, new arrays are constructed via the host's
  ``_from_storage`` rather than by importing `NDArray`.
- Element values never change here, so reshape copies the cached extrema
  instead of rescanning.
"""

from __future__ import annotations

from typing import Any, Sequence

from ...domain._shape import Rank, flat_index, validate
from ._storage import ArrayStorage


class NDArrayShapeAndIndexingMixin:
    """
    Shape and indexing operations for the concrete NDArray implementation.

    Notes
    -----
    Methods assume the host class provides ``shape``, ``size``, ``min()``,
    ``max()``, ``_storage_for(op)`` and ``_from_storage(storage, extrema)``.
    """

    def flatten(self) -> list[float]:
        """
        Return all elements in row-major order.

        For shape ``(d0, d1, ...)`` the element at multi-index ``(i0, i1, ...)``
        appears at position ``i0*stride0 + i1*stride1 + ...`` where the last
        dimension varies fastest.

        Returns
        -------
        list[float]
            A new list of length ``size``.
        """
        return self._storage_for("flatten").flat().tolist()

    def ravel(self) -> Any:
        """Return a new rank-1 array holding the row-major element sequence."""
        return self.reshape((self.size,))

    def reshape(self, new_shape: Sequence[int] | int) -> Any:
        """
        Relabel the row-major element sequence with `new_shape`.

        Reshaping never reorders elements: ``a.reshape(s).flatten()`` always
        equals ``a.flatten()``.

        Parameters
        ----------
        new_shape : Sequence[int] or int
            Target shape of rank 1 through 4.

        Returns
        -------
        NDArray
            A new array with its own copy of the elements.

        Raises
        ------
        ShapeError
            If `new_shape` is invalid or its element count differs from
            ``size``.
        """
        dims = validate(new_shape, self.size)
        src = self._storage_for("reshape")
        storage = ArrayStorage(
            Rank.of(len(dims)), src.flat().copy().reshape(dims, order="C")
        )
        return self._from_storage(storage, extrema=(self.min(), self.max()))

    def item(self, *index: int) -> float:
        """
        Return the element at a full multi-index.

        Rank-1 arrays also accept no index when they hold exactly one element.

        Raises
        ------
        IndexError
            If the index length differs from the rank or is out of bounds.
        """
        if len(index) == 1 and isinstance(index[0], tuple):
            index = index[0]
        flat = self._storage_for("item").flat()
        if not index:
            if flat.size != 1:
                raise IndexError(
                    "item() without an index requires an array with one element"
                )
            return float(flat[0])
        return float(flat[flat_index(index, self.shape)])
