"""
Logical connectives over numeric arrays.

An element is truthy when it is strictly greater than zero. Results are
1.0/0.0 masks, so the output of a comparison can be fed straight back in.
"""

from __future__ import annotations

from abc import ABC
from typing import Any, Union

import numpy as np

from ....ops.elementwise_cpu import as_mask, truthy

Number = Union[int, float]


def _and(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.logical_and(truthy(a), truthy(b))


def _or(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.logical_or(truthy(a), truthy(b))


def _xor(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.logical_xor(truthy(a), truthy(b))


class NDArrayMixinLogical(ABC):
    """Mixin implementing ``and``/``or``/``xor`` and their operators."""

    def logical_and(self, other: Union[Any, Number]) -> Any:
        return self._scalar_or_zip(other, as_mask(_and), "logical_and")

    def logical_or(self, other: Union[Any, Number]) -> Any:
        return self._scalar_or_zip(other, as_mask(_or), "logical_or")

    def logical_xor(self, other: Union[Any, Number]) -> Any:
        return self._scalar_or_zip(other, as_mask(_xor), "logical_xor")

    def __and__(self, other: Union[Any, Number]) -> Any:
        return self.logical_and(other)

    def __rand__(self, other: Union[Any, Number]) -> Any:
        return self.logical_and(other)

    def __or__(self, other: Union[Any, Number]) -> Any:
        return self.logical_or(other)

    def __ror__(self, other: Union[Any, Number]) -> Any:
        return self.logical_or(other)

    def __xor__(self, other: Union[Any, Number]) -> Any:
        return self.logical_xor(other)

    def __rxor__(self, other: Union[Any, Number]) -> Any:
        return self.logical_xor(other)
