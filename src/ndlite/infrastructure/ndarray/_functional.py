"""
Function-style entry points mirroring the NDArray methods.

These accept anything `asarray` accepts for the array argument, which makes
them convenient on plain nested lists::

    >>> zip_transform([1, 2, 3], [4, 5, 6], lambda x, y: x + y).flatten()
    [5.0, 7.0, 9.0]
"""

from __future__ import annotations

from typing import Any, Sequence

from ...domain._ndarray import BinaryFn, UnaryFn
from ._factory import asarray
from ._ndarray import NDArray


def _coerce(array: Any) -> NDArray:
    return array if isinstance(array, NDArray) else asarray(array)


def transform(array: Any, fn: UnaryFn) -> NDArray:
    """Apply `fn` to every element; see :meth:`NDArray.transform`."""
    return _coerce(array).transform(fn)


def zip_transform(a: Any, b: Any, fn: BinaryFn) -> NDArray:
    """Apply `fn` pairwise over two same-shaped arrays."""
    return _coerce(a).zip_transform(b, fn)


def flatten(array: Any) -> list[float]:
    return _coerce(array).flatten()


def reshape(array: Any, new_shape: Sequence[int] | int) -> NDArray:
    return _coerce(array).reshape(new_shape)


def sum(array: Any) -> float:
    """Sum of all elements using the policy-selected strategy."""
    return _coerce(array).sum()


def sequential_sum(array: Any) -> float:
    return _coerce(array).sequential_sum()


def parallel_sum(array: Any) -> float:
    return _coerce(array).parallel_sum()
