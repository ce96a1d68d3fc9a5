"""
Rank-tagged array storage.

`ArrayStorage` is the single representation every array operation works on:
a `Rank` tag plus a C-contiguous ``float64`` NumPy buffer whose ``ndim`` equals
the rank. The buffer *is* the row-major flat sequence; its shape is the tracked
shape. This replaces four rank-specific nested containers with one indexing
scheme while keeping the rank explicit.

Storage objects are owned by exactly one `NDArray`. They are never shared
between arrays; consuming transforms move a storage object from one owner to
the next.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from ...domain._errors import EmptyArrayError, ShapeError
from ...domain._shape import Rank, Shape, normalize_shape, validate

DTYPE = np.dtype(np.float64)

# Signed, unsigned and floating kinds; bool ("b") is not a number here.
NUMERIC_KINDS = "iuf"


def _is_nested(x: Any) -> bool:
    """Whether `x` is a container level (as opposed to a numeric leaf)."""
    if isinstance(x, (str, bytes)):
        return False
    if isinstance(x, np.ndarray):
        return x.ndim > 0
    return isinstance(x, Sequence)


def infer_shape(data: Any, rank: Rank) -> Shape:
    """
    Infer the shape of nested data of a declared rank.

    The outer length is taken, then the length of the *first* element at each
    deeper level; other rows are not inspected here (jagged input is rejected
    later when the buffer is materialized).

    Raises
    ------
    ShapeError
        If the nesting is shallower or deeper than `rank`.
    EmptyArrayError
        If any inferred dimension is zero.
    """
    dims = []
    cur = data
    for depth in range(int(rank)):
        if not _is_nested(cur):
            raise ShapeError(
                f"Expected rank-{int(rank)} nested data, found a scalar at depth {depth}"
            )
        n = len(cur)
        if n == 0:
            raise EmptyArrayError("construction")
        dims.append(n)
        cur = cur[0]
    if _is_nested(cur):
        raise ShapeError(
            f"Expected rank-{int(rank)} nested data, found deeper nesting"
        )
    return tuple(dims)


def detect_rank(data: Any) -> Rank:
    """
    Detect the rank of nested data by probing ``data[0]``, ``data[0][0]``, ...

    Raises
    ------
    ShapeError
        If `data` is a scalar or nested deeper than four levels.
    EmptyArrayError
        If an empty level is met before a numeric leaf.
    """
    if isinstance(data, np.ndarray):
        return Rank.of(data.ndim)
    depth = 0
    cur = data
    while _is_nested(cur):
        if len(cur) == 0:
            raise EmptyArrayError("construction")
        depth += 1
        cur = cur[0]
    if depth == 0:
        raise ShapeError(f"Expected nested numeric data, got scalar {data!r}")
    return Rank.of(depth)


@dataclass(frozen=True, eq=False)
class ArrayStorage:
    """
    Tagged storage variant for ranks 1 through 4.

    Attributes
    ----------
    rank : Rank
        Number of dimensions; always equal to ``buffer.ndim``.
    buffer : np.ndarray
        C-contiguous ``float64`` elements in row-major order.
    """

    rank: Rank
    buffer: np.ndarray

    def __post_init__(self) -> None:
        if self.buffer.ndim != int(self.rank):
            raise ShapeError(
                f"Buffer has {self.buffer.ndim} dimensions but rank is {int(self.rank)}",
                self.buffer.shape,
            )
        if self.buffer.dtype != DTYPE or not self.buffer.flags.c_contiguous:
            raise TypeError("ArrayStorage requires a C-contiguous float64 buffer")
        if self.buffer.size == 0:
            raise EmptyArrayError("construction")

    @property
    def shape(self) -> Shape:
        return tuple(int(d) for d in self.buffer.shape)

    @property
    def size(self) -> int:
        return int(self.buffer.size)

    @classmethod
    def from_buffer(cls, buffer: np.ndarray) -> "ArrayStorage":
        """Wrap an existing buffer, converting it to contiguous float64 if needed."""
        buf = np.asarray(buffer, dtype=DTYPE, order="C")
        if buf.ndim > 0 and buf.size == 0:
            raise EmptyArrayError("construction")
        normalize_shape(buf.shape)
        return cls(Rank.of(buf.ndim), buf)

    @classmethod
    def from_nested(cls, data: Any, rank: Rank) -> "ArrayStorage":
        """
        Copy nested numeric data of a declared rank into a new storage.

        Raises
        ------
        ShapeError
            If the nesting depth differs from `rank`, rows are jagged, or
            leaves are not numeric.
        EmptyArrayError
            If any dimension is empty.
        """
        shape = infer_shape(data, rank)
        try:
            raw = np.asarray(data)
        except (ValueError, TypeError) as e:
            raise ShapeError(
                f"Nested data is not a rectangular numeric rank-{int(rank)} array: {e}",
                shape,
            ) from e
        if raw.dtype.kind not in NUMERIC_KINDS:
            raise ShapeError(
                f"Nested data must hold real numbers, got dtype {raw.dtype}",
                shape,
            )
        if raw.shape != shape:
            raise ShapeError(
                f"Nested data is not rectangular: expected {shape}, got {raw.shape}",
                shape,
            )
        return cls(rank, np.array(raw, dtype=DTYPE, order="C"))

    @classmethod
    def from_flat(cls, shape: Sequence[int], values: Any) -> "ArrayStorage":
        """
        Nest a flat sequence into `shape` using row-major order.

        Raises
        ------
        ShapeError
            If `values` is not one-dimensional or its length differs from
            ``size_of(shape)``.
        """
        flat = np.array(values, dtype=DTYPE, order="C")
        if flat.ndim != 1:
            raise ShapeError(
                f"Flat values must be one-dimensional, got shape {flat.shape}",
                flat.shape,
            )
        dims = validate(shape, int(flat.size))
        return cls(Rank.of(len(dims)), flat.reshape(dims, order="C"))

    def flat(self) -> np.ndarray:
        """Row-major one-dimensional view of the buffer (no copy)."""
        return self.buffer.reshape(-1, order="C")

    def copy(self) -> "ArrayStorage":
        return ArrayStorage(self.rank, self.buffer.copy(order="C"))


def is_scalar(x: Any) -> bool:
    """Whether `x` is a real scalar accepted by scalar operations."""
    return isinstance(x, numbers.Real) and not isinstance(x, bool)
