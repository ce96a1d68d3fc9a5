"""
Array generators.

`generate` is the primitive: it fills an array of a given shape by calling a
value producer once per element, in row-major order. `fill`, `zeros`, `ones`,
`random` and `random_range` are expressed in terms of it or of the injected
random source; `arange` builds a strictly increasing rank-1 range.
"""

from __future__ import annotations

import math
from typing import Callable, Optional, Sequence

import numpy as np

from ...domain._errors import EmptyArrayError
from ...domain._shape import normalize_shape, size_of
from ._ndarray import NDArray
from ._storage import DTYPE, ArrayStorage, is_scalar

ShapeLike = Sequence[int] | int


def _wrap(shape: ShapeLike, flat: np.ndarray) -> NDArray:
    return NDArray(ArrayStorage.from_flat(shape, flat))


def _rng_or_default(rng: Optional[np.random.Generator]) -> np.random.Generator:
    if rng is None:
        return np.random.default_rng()
    if not isinstance(rng, np.random.Generator):
        raise TypeError(
            f"rng must be a numpy.random.Generator or None, got {type(rng)!r}"
        )
    return rng


def generate(shape: ShapeLike, producer: Callable[[], float]) -> NDArray:
    """
    Build an array by invoking `producer` once per element.

    Parameters
    ----------
    shape : Sequence[int] or int
        Target shape of rank 1 through 4.
    producer : Callable[[], float]
        Zero-argument callable. Calls happen in row-major order, so a stateful
        producer (e.g. a counter) lays out its values the way `flatten`
        reads them back.

    Returns
    -------
    NDArray
        A new array with ``min``/``max`` computed from the produced values.

    Raises
    ------
    ShapeError
        If `shape` is invalid.
    """
    dims = normalize_shape(shape)
    n = size_of(dims)
    flat = np.fromiter((float(producer()) for _ in range(n)), dtype=DTYPE, count=n)
    return _wrap(dims, flat)


def fill(value: float, shape: ShapeLike) -> NDArray:
    """
    Array of `shape` whose every element is `value`.

    Raises
    ------
    TypeError
        If `value` is not a real scalar.
    """
    if not is_scalar(value):
        raise TypeError(f"fill value must be a real scalar, got {type(value)!r}")
    dims = normalize_shape(shape)
    v = float(value)
    return NDArray(
        ArrayStorage.from_buffer(np.full(dims, v, dtype=DTYPE)), extrema=(v, v)
    )


def zeros(shape: ShapeLike) -> NDArray:
    """Array of `shape` filled with 0.0."""
    return fill(0.0, shape)


def ones(shape: ShapeLike) -> NDArray:
    """Array of `shape` filled with 1.0."""
    return fill(1.0, shape)


def random(
    shape: ShapeLike, rng: Optional[np.random.Generator] = None
) -> NDArray:
    """
    Array of `shape` with elements drawn uniformly from ``[0, 1)``.

    Parameters
    ----------
    rng : Optional[np.random.Generator], optional
        Random source. A fresh ``np.random.default_rng()`` when omitted; pass
        a seeded generator for reproducible output.
    """
    dims = normalize_shape(shape)
    source = _rng_or_default(rng)
    return _wrap(dims, source.random(size_of(dims)))


def random_range(
    shape: ShapeLike,
    low: float,
    high: float,
    rng: Optional[np.random.Generator] = None,
) -> NDArray:
    """
    Array of `shape` with elements drawn uniformly from ``[low, high)``.

    Raises
    ------
    ValueError
        If ``low >= high``.
    """
    if not (is_scalar(low) and is_scalar(high)):
        raise TypeError(f"random_range bounds must be real scalars, got {low!r}, {high!r}")
    if not float(low) < float(high):
        raise ValueError(f"random_range requires low < high, got low={low}, high={high}")
    dims = normalize_shape(shape)
    source = _rng_or_default(rng)
    return _wrap(dims, source.uniform(float(low), float(high), size_of(dims)))


def arange(start: float, stop: float, step: float = 1.0) -> NDArray:
    """
    Rank-1 array ``start, start + step, start + 2*step, ...`` below `stop`.

    Each value is computed as ``start + k*step`` so rounding errors do not
    accumulate.

    Raises
    ------
    ValueError
        If ``step <= 0``, a bound is not finite, or the number of steps
        overflows.
    EmptyArrayError
        If the range holds no values (``start >= stop``).
    """
    for name, v in (("start", start), ("stop", stop), ("step", step)):
        if not is_scalar(v):
            raise TypeError(f"arange {name} must be a real scalar, got {v!r}")
    start, stop, step = float(start), float(stop), float(step)
    if not (math.isfinite(start) and math.isfinite(stop)):
        raise ValueError(f"arange bounds must be finite, got start={start}, stop={stop}")
    if not step > 0.0:
        raise ValueError(f"arange requires step > 0, got {step}")
    if not start < stop:
        raise EmptyArrayError("arange")

    span = (stop - start) / step
    if not math.isfinite(span):
        raise ValueError(
            f"arange range is too long: ({stop} - {start}) / {step} overflows"
        )
    n = int(math.ceil(span))
    values = start + np.arange(n + 1, dtype=DTYPE) * step
    values = values[values < stop]
    if values.size == 0:
        raise EmptyArrayError("arange")
    return _wrap((int(values.size),), np.ascontiguousarray(values))
