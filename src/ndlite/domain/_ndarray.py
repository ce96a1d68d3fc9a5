"""
Array interface definitions.

This module defines the domain-level interface for array-like objects using
structural typing. The protocol captures the public surface every layer may
rely on without importing the NumPy-backed implementation.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, Sequence, Union, runtime_checkable

from ._reduction import ReductionStrategy
from ._shape import Rank

Number = Union[int, float]
UnaryFn = Callable[[float], float]
BinaryFn = Callable[[float, float], float]


@runtime_checkable
class INDArray(Protocol):
    """
    Dense array interface (rank 1 through 4).

    An `INDArray` exclusively owns its elements. Every transform returns a new
    array; nothing is shared between arrays.
    """

    @property
    def shape(self) -> tuple[int, ...]:
        """Per-dimension lengths, one entry per rank dimension."""
        ...

    @property
    def rank(self) -> Rank:
        """Number of dimensions as a `Rank` tag."""
        ...

    @property
    def size(self) -> int:
        """Total element count, equal to the product of `shape`."""
        ...

    @property
    def reduction_strategy(self) -> ReductionStrategy:
        """Strategy `sum()` will use for this array under current settings."""
        ...

    def min(self) -> float:
        """Cached minimum over all elements."""
        ...

    def max(self) -> float:
        """Cached maximum over all elements."""
        ...

    def flatten(self) -> list[float]:
        """All elements in row-major order."""
        ...

    def reshape(self, new_shape: Sequence[int]) -> "INDArray":
        """Relabel the row-major element sequence with a new shape."""
        ...

    def transform(self, fn: UnaryFn) -> "INDArray":
        """Apply `fn` to every element, producing a new array."""
        ...

    def zip_transform(self, other: "INDArray", fn: BinaryFn) -> "INDArray":
        """Apply `fn` pairwise over two same-shaped arrays."""
        ...

    def sum(self) -> float:
        """Sum of all elements (policy-selected strategy)."""
        ...

    def sequential_sum(self) -> float:
        """Sum of all elements via a single-threaded left fold."""
        ...

    def parallel_sum(self) -> float:
        """Sum of all elements via partitioned accumulation."""
        ...

    def to_numpy(self) -> Any:
        """Independent backend-native copy of the elements."""
        ...

    def tolist(self) -> list:
        """Nested Python lists mirroring the array's rank."""
        ...
