"""
Array construction from nested data, flat data and NumPy arrays.

Every factory copies its input: the returned `NDArray` exclusively owns its
elements, and later changes to the source never show through.

Shape inference follows the nesting: the outer length first, then the length
of the first element at each deeper level. Data that is not rectangular, is
nested to the wrong depth, or has non-numeric leaves is rejected with
`ShapeError`.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from ...domain._errors import ShapeError
from ...domain._shape import Rank
from ._ndarray import NDArray
from ._storage import NUMERIC_KINDS, ArrayStorage, detect_rank


def _from_nested(data: Any, rank: Rank) -> NDArray:
    return NDArray(ArrayStorage.from_nested(data, rank))


def from_rank1(data: Sequence[float]) -> NDArray:
    """
    Build a rank-1 array from a flat sequence of numbers.

    Example
    -------
    >>> a = from_rank1([1, 2, 3, 4, 5, 6, 7])
    >>> a.sum(), a.min(), a.max()
    (28.0, 1.0, 7.0)
    """
    return _from_nested(data, Rank.R1)


def from_rank2(data: Sequence[Sequence[float]]) -> NDArray:
    """Build a rank-2 array from a sequence of equal-length rows."""
    return _from_nested(data, Rank.R2)


def from_rank3(data: Sequence[Sequence[Sequence[float]]]) -> NDArray:
    """Build a rank-3 array from triply nested data."""
    return _from_nested(data, Rank.R3)


def from_rank4(data: Sequence[Sequence[Sequence[Sequence[float]]]]) -> NDArray:
    """Build a rank-4 array from quadruply nested data."""
    return _from_nested(data, Rank.R4)


def from_flat(shape: Sequence[int] | int, values: Sequence[float]) -> NDArray:
    """
    Nest a flat row-major sequence into `shape`.

    Raises
    ------
    ShapeError
        If ``size_of(shape) != len(values)`` or the shape is invalid.
    """
    return NDArray(ArrayStorage.from_flat(shape, values))


def from_numpy(arr: np.ndarray) -> NDArray:
    """
    Copy a NumPy array of rank 1 through 4 into a new `NDArray`.

    Raises
    ------
    ShapeError
        If ``arr.ndim`` is outside 1..4 or `arr` does not hold real numbers.
    EmptyArrayError
        If `arr` has no elements.
    """
    raw = np.asarray(arr)
    if raw.dtype.kind not in NUMERIC_KINDS:
        raise ShapeError(f"Expected a real-valued array, got dtype {raw.dtype}", raw.shape)
    buf = np.array(raw, dtype=np.float64, order="C", copy=True)
    return NDArray(ArrayStorage.from_buffer(buf))


def asarray(data: Any) -> NDArray:
    """
    Convert array-like data into an `NDArray`, detecting the rank.

    Parameters
    ----------
    data : NDArray, np.ndarray or nested sequence
        Existing arrays are cloned; NumPy arrays are copied; nested sequences
        have their rank detected by probing ``data[0]``, ``data[0][0]``, ...

    Returns
    -------
    NDArray
        A new array that shares nothing with `data`.

    Raises
    ------
    ShapeError
        If the data is a scalar, nested deeper than four levels, or not
        rectangular.
    EmptyArrayError
        If some level of the nesting is empty.
    """
    if isinstance(data, NDArray):
        return data.clone()
    if isinstance(data, np.ndarray):
        return from_numpy(data)
    return _from_nested(data, detect_rank(data))
