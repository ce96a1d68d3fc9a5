"""
Shape model for bounded-rank arrays.

This module owns every rule about shapes:

- the supported ranks (`Rank`, 1 through 4),
- normalization and validation of user-supplied shapes,
- element counts (`size_of`) and size consistency (`validate`),
- row-major strides and the flat index formula shared by reshape and indexing.

Row-major order means the last dimension varies fastest. For a shape
``(d0, d1, ..., dk)`` the stride of dimension ``j`` is the product of all
later dimensions, and a multi-index maps to

    flat_index(i0..ik) = i0*stride0 + i1*stride1 + ... + ik

The module is backend-agnostic and has no NumPy dependency.
"""

from __future__ import annotations

import numbers
from enum import IntEnum
from typing import Sequence

from ._errors import ShapeError

MAX_RANK = 4
"""Largest supported number of dimensions."""

Shape = tuple[int, ...]


class Rank(IntEnum):
    """
    Enumeration of supported array ranks.

    Every array is tagged with exactly one of these values; there is no
    arbitrary-rank representation.
    """

    R1 = 1
    R2 = 2
    R3 = 3
    R4 = 4

    @classmethod
    def of(cls, ndim: int) -> "Rank":
        """
        Return the rank tag for a dimension count.

        Raises
        ------
        ShapeError
            If `ndim` is outside 1..4.
        """
        try:
            return cls(int(ndim))
        except ValueError:
            raise ShapeError(
                f"Unsupported rank {ndim}; expected 1..{MAX_RANK}"
            ) from None


def normalize_shape(shape: Sequence[int] | int) -> Shape:
    """
    Normalize a shape-like value into a validated tuple of positive ints.

    Parameters
    ----------
    shape : Sequence[int] or int
        A sequence of dimension lengths, or a bare int for a rank-1 shape.

    Returns
    -------
    tuple[int, ...]
        The normalized shape.

    Raises
    ------
    ShapeError
        If the shape is empty, has more than four dimensions, or contains a
        non-integer or non-positive dimension.
    """
    if isinstance(shape, numbers.Integral):
        shape = (shape,)

    try:
        dims = tuple(shape)
    except TypeError:
        raise ShapeError(f"Shape must be a sequence of ints, got {shape!r}") from None

    if len(dims) == 0:
        raise ShapeError("Shape must have at least one dimension", dims)
    if len(dims) > MAX_RANK:
        raise ShapeError(
            f"Shape {dims} has rank {len(dims)}; at most {MAX_RANK} is supported",
            dims,
        )

    out = []
    for d in dims:
        if isinstance(d, bool) or not isinstance(d, numbers.Integral):
            raise ShapeError(f"Shape dimensions must be ints, got {dims}", dims)
        if d <= 0:
            raise ShapeError(f"Shape dimensions must be positive, got {dims}", dims)
        out.append(int(d))
    return tuple(out)


def size_of(shape: Sequence[int] | int) -> int:
    """
    Return the total element count of a shape.

    Raises
    ------
    ShapeError
        If the shape is empty, of unsupported rank, or otherwise invalid.
    """
    n = 1
    for d in normalize_shape(shape):
        n *= d
    return n


def validate(shape: Sequence[int] | int, declared_size: int) -> Shape:
    """
    Check that a shape accounts for exactly `declared_size` elements.

    Parameters
    ----------
    shape : Sequence[int] or int
        Candidate shape.
    declared_size : int
        Number of elements the shape must describe.

    Returns
    -------
    tuple[int, ...]
        The normalized shape, for convenience.

    Raises
    ------
    ShapeError
        If ``size_of(shape) != declared_size``.
    """
    dims = normalize_shape(shape)
    expected = size_of(dims)
    if expected != declared_size:
        raise ShapeError(
            f"Shape {dims} describes {expected} elements, but {declared_size} "
            "were provided",
            dims,
        )
    return dims


def row_major_strides(shape: Sequence[int]) -> Shape:
    """
    Return the row-major strides (in elements) of a shape.

    ``stride[d] == product(shape[d+1:])``; the last stride is always 1.
    """
    dims = normalize_shape(shape)
    strides = [1] * len(dims)
    for d in range(len(dims) - 2, -1, -1):
        strides[d] = strides[d + 1] * dims[d + 1]
    return tuple(strides)


def flat_index(index: Sequence[int], shape: Sequence[int]) -> int:
    """
    Map a full multi-index to its position in the row-major flat sequence.

    Negative components count from the end of their dimension.

    Raises
    ------
    IndexError
        If the index has the wrong length or a component is out of bounds.
    """
    dims = normalize_shape(shape)
    if len(index) != len(dims):
        raise IndexError(
            f"Index {tuple(index)} has {len(index)} components; "
            f"array has rank {len(dims)}"
        )

    pos = 0
    for i, d, s in zip(index, dims, row_major_strides(dims)):
        i = int(i)
        if i < 0:
            i += d
        if i < 0 or i >= d:
            raise IndexError(f"Index {tuple(index)} out of bounds for shape {dims}")
        pos += i * s
    return pos
