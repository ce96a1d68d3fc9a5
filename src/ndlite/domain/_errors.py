"""
Array-related exceptions for ndlite.

This module defines the error taxonomy used by every array operation. All
failures are local and synchronous: they are raised at the call that violates
the contract, and nothing is retried or recovered internally.

- `ShapeError`: unsupported rank, invalid shape, or a shape/size mismatch on
  construction or reshape.
- `ShapeMismatchError`: a binary elementwise operation on arrays whose shapes
  differ (no broadcasting is performed).
- `EmptyArrayError`: extrema or reductions over zero elements.
- `ArrayConsumedError`: use of an array whose storage was moved into the
  result of a consuming transform.
"""

from __future__ import annotations

from typing import Optional, Sequence


class NDArrayError(Exception):
    """Base class for all ndlite array errors."""


class ShapeError(NDArrayError, ValueError):
    """
    Raised when a shape is invalid or inconsistent with a declared size.

    Attributes
    ----------
    shape : Optional[tuple]
        The offending shape, when one is available.
    """

    def __init__(self, message: str, shape: Optional[Sequence[int]] = None) -> None:
        super().__init__(message)
        self.shape = tuple(shape) if shape is not None else None


class ShapeMismatchError(NDArrayError, ValueError):
    """
    Raised when a binary operation is attempted between arrays of different shapes.

    Binary elementwise operations require identical shapes; they never
    broadcast and never truncate.
    """

    def __init__(self, shape_a: Sequence[int], shape_b: Sequence[int]) -> None:
        """
        Initialize the ShapeMismatchError.

        Parameters
        ----------
        shape_a : Sequence[int]
            Shape of the left operand.
        shape_b : Sequence[int]
            Shape of the right operand.
        """
        super().__init__(f"Shape mismatch: {tuple(shape_a)} vs {tuple(shape_b)}")
        self.shape_a = tuple(shape_a)
        self.shape_b = tuple(shape_b)


class EmptyArrayError(NDArrayError, ValueError):
    """
    Raised when extrema or a reduction is requested over zero elements.

    Attributes
    ----------
    op : str
        The name of the operation that was attempted (e.g., "sum", "min").
    """

    def __init__(self, op: str) -> None:
        super().__init__(f"{op} is undefined for an array with no elements.")
        self.op = op


class ArrayConsumedError(NDArrayError, RuntimeError):
    """
    Raised when an array is used after its storage was moved elsewhere.

    Consuming transforms (``transform_``, ``zip_transform_``) recycle the
    receiver's buffer into the returned array. The receiver is left without
    storage, and any further access fails with this error.
    """

    def __init__(self, op: str) -> None:
        super().__init__(
            f"{op} called on an array whose storage was consumed by a previous "
            "in-place transform."
        )
        self.op = op
