"""
Elementwise transform engine mixin.

This module declares :class:`NDArrayMixinElementwise`, the rank-generic core
of every value-changing operation. It exposes two operation shapes, each in a
cloning and a consuming form:

- unary map: ``transform(fn)`` / ``transform_(fn)``
- binary map: ``zip_transform(other, fn)`` / ``zip_transform_(other, fn)``

The cloning form leaves the receiver untouched and allocates a fresh result.
The consuming form moves the receiver's buffer into the result, writes the new
values into it, and leaves the receiver consumed (any later use raises
`ArrayConsumedError`). Both forms produce identical values, and the result's
``min``/``max`` are always rescanned from the output.

The arithmetic, unary, comparison and logical mixins are thin catalogues built
on the private helpers `_map`, `_zip` and `_scalar_or_zip` defined here.
"""

from __future__ import annotations

from abc import ABC
from typing import Any, Callable, Union

import numpy as np

from .....domain._errors import ShapeMismatchError
from .....domain._ndarray import BinaryFn, UnaryFn
from ....ops.elementwise_cpu import map_binary, map_unary
from ..._storage import is_scalar

Number = Union[int, float]


class NDArrayMixinElementwise(ABC):
    """
    Mixin implementing unary and binary elementwise maps.

    Notes
    -----
    - Assumes the host class provides ``_storage_for(op)``, ``_buffer_for(op)``,
      ``_consume(op)``, ``_new_from_buffer(buf)`` and ``shape``.
    - `fn` may be a scalar function (called once per element), or a NumPy
      ufunc (applied to the whole buffer).
    """

    # ----------------------------
    # Unary map
    # ----------------------------
    def transform(self, fn: UnaryFn) -> Any:
        """
        Apply `fn` to every element and return a new array of the same shape.

        Parameters
        ----------
        fn : Callable[[float], float]
            Elementwise function. NumPy ufuncs are applied vectorized.

        Returns
        -------
        NDArray
            A new array; the receiver is not modified.
        """
        return self._new_from_buffer(map_unary(self._buffer_for("transform"), fn))

    def transform_(self, fn: UnaryFn) -> Any:
        """
        Consuming form of :meth:`transform`.

        The receiver's buffer is recycled into the returned array and the
        receiver becomes unusable. If `fn` raises, the receiver is left
        untouched and still usable.
        """
        storage = self._storage_for("transform_")
        map_unary(storage.buffer, fn, out=storage.buffer)
        self._consume("transform_")
        return self._new_from_buffer(storage.buffer)

    # ----------------------------
    # Binary map
    # ----------------------------
    def zip_transform(self, other: Any, fn: BinaryFn) -> Any:
        """
        Apply `fn` pairwise over two arrays of identical shape.

        Parameters
        ----------
        other : NDArray or nested sequence
            Right operand. Nested sequences are converted with `asarray`.
        fn : Callable[[float, float], float]
            Elementwise binary function. Binary NumPy ufuncs are applied
            vectorized.

        Returns
        -------
        NDArray
            A new array with the common shape.

        Raises
        ------
        ShapeMismatchError
            If the shapes differ. No broadcasting or truncation is performed.
        """
        rhs = self._as_operand(other)
        return self._new_from_buffer(
            map_binary(
                self._buffer_for("zip_transform"),
                rhs._buffer_for("zip_transform"),
                fn,
            )
        )

    def zip_transform_(self, other: Any, fn: BinaryFn) -> Any:
        """
        Consuming form of :meth:`zip_transform`.

        Shapes are checked and `fn` is evaluated before anything is consumed,
        so a failing call leaves the receiver intact. `other` is only read.
        """
        rhs = self._as_operand(other)
        rhs_buf = rhs._buffer_for("zip_transform_")
        self._check_same_shape(rhs)
        storage = self._storage_for("zip_transform_")
        map_binary(storage.buffer, rhs_buf, fn, out=storage.buffer)
        self._consume("zip_transform_")
        return self._new_from_buffer(storage.buffer)

    # ----------------------------
    # Internal helpers
    # ----------------------------
    def _map(self, kernel: Callable[[np.ndarray], Any], op: str = "transform") -> Any:
        """Apply an array kernel (already vectorized) to the whole buffer."""
        return self._new_from_buffer(
            map_unary(self._buffer_for(op), kernel, vectorized=True)
        )

    def _zip(
        self,
        other: Any,
        kernel: Callable[[np.ndarray, np.ndarray], Any],
        op: str = "zip_transform",
    ) -> Any:
        """Apply a binary array kernel against a same-shaped operand."""
        rhs = self._as_operand(other)
        return self._new_from_buffer(
            map_binary(
                self._buffer_for(op),
                rhs._buffer_for(op),
                kernel,
                vectorized=True,
            )
        )

    def _scalar_or_zip(
        self,
        other: Union[Any, Number],
        kernel: Callable[[np.ndarray, Any], Any],
        op: str,
    ) -> Any:
        """
        Route a binary kernel to the scalar path or the array path.

        Scalars are passed straight to the kernel (``kernel(buf, scalar)``),
        which keeps scalar operations unary maps. Anything else must be an
        array operand of the same shape.
        """
        if is_scalar(other):
            value = float(other)
            return self._map(lambda x: kernel(x, value), op)
        return self._zip(other, kernel, op)

    def _as_operand(self, other: Any) -> Any:
        """
        Return `other` as an array of the receiver's class.

        Raises
        ------
        TypeError
            If `other` is neither an array nor nested numeric data.
        """
        if isinstance(other, NDArrayMixinElementwise):
            return other
        if isinstance(other, (list, tuple, np.ndarray)):
            from ..._factory import asarray

            return asarray(other)
        raise TypeError(f"Unsupported operand type: {type(other)!r}")

    def _check_same_shape(self, other: Any) -> None:
        """
        Raises
        ------
        ShapeMismatchError
            If ``self.shape != other.shape``.
        """
        if self.shape != other.shape:
            raise ShapeMismatchError(self.shape, other.shape)
