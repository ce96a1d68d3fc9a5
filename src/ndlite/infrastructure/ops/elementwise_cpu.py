"""
CPU elementwise kernels (NumPy backend).

This module is the substrate of every arithmetic, trigonometric, comparison
and logical operation. It works on raw ``float64`` buffers of any supported
rank, so a single code path serves ranks 1 through 4.

Three kinds of callables are accepted:

- NumPy ufuncs (``np.sin``, ``np.add``, ...), applied directly and able to
  write into a caller-provided output buffer;
- array kernels (``vectorized=True``), callables that already operate on whole
  arrays (e.g. ``lambda x: np.greater(x, 3.0)``);
- scalar callables (the default), wrapped with `np.vectorize` and invoked once
  per element.

Boolean results are stored as 1.0/0.0. Floating-point exceptions follow IEEE
semantics silently (``log(0) == -inf``, ``0/0 == nan``) rather than emitting
NumPy warnings.
"""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np

from ...domain._errors import ShapeMismatchError

_FLOAT = np.float64


def _as_kernel(fn: Callable, vectorized: bool) -> Callable:
    """
    Return a callable that accepts whole arrays.

    Parameters
    ----------
    fn : Callable
        Ufunc, array kernel or scalar function.
    vectorized : bool
        Whether `fn` already operates on arrays.
    """
    if vectorized or isinstance(fn, np.ufunc):
        return fn
    return np.vectorize(fn, otypes=[_FLOAT])


def _finish(result, shape: tuple[int, ...], out: Optional[np.ndarray]) -> np.ndarray:
    arr = np.asarray(result)
    if arr.shape != shape:
        # Scalar results from constant kernels are spread over the whole shape.
        arr = np.broadcast_to(arr, shape)
    if out is not None:
        np.copyto(out, arr, casting="unsafe")
        return out
    return np.array(arr, dtype=_FLOAT, order="C", copy=True)


def map_unary(
    src: np.ndarray,
    fn: Callable,
    *,
    vectorized: bool = False,
    out: Optional[np.ndarray] = None,
) -> np.ndarray:
    """
    Apply `fn` to every element of `src`.

    Parameters
    ----------
    src : np.ndarray
        Input buffer (``float64``, any rank). Never modified unless it is also
        passed as `out`.
    fn : Callable
        Elementwise function, see module notes.
    vectorized : bool, optional
        Set when `fn` is an array kernel. Defaults to False.
    out : Optional[np.ndarray], optional
        Destination buffer of the same shape. When given, results are written
        into it and it is returned; this is how consuming transforms recycle
        the receiver's storage.

    Returns
    -------
    np.ndarray
        A ``float64`` buffer with the same shape as `src`.
    """
    if out is not None and out.shape != src.shape:
        raise ShapeMismatchError(src.shape, out.shape)

    with np.errstate(all="ignore"):
        if isinstance(fn, np.ufunc) and out is not None:
            fn(src, out=out, casting="unsafe")
            return out
        result = _as_kernel(fn, vectorized)(src)
    return _finish(result, src.shape, out)


def map_binary(
    a: np.ndarray,
    b: np.ndarray,
    fn: Callable,
    *,
    vectorized: bool = False,
    out: Optional[np.ndarray] = None,
) -> np.ndarray:
    """
    Apply `fn` pairwise to elements at the same position of `a` and `b`.

    Parameters
    ----------
    a, b : np.ndarray
        Operand buffers. Shapes must be identical; no broadcasting is done.
    fn : Callable
        Binary elementwise function, see module notes.
    vectorized : bool, optional
        Set when `fn` is an array kernel. Defaults to False.
    out : Optional[np.ndarray], optional
        Destination buffer (may alias `a`).

    Returns
    -------
    np.ndarray
        A ``float64`` buffer with the common shape.

    Raises
    ------
    ShapeMismatchError
        If ``a.shape != b.shape``.
    """
    if a.shape != b.shape:
        raise ShapeMismatchError(a.shape, b.shape)
    if out is not None and out.shape != a.shape:
        raise ShapeMismatchError(a.shape, out.shape)

    with np.errstate(all="ignore"):
        if isinstance(fn, np.ufunc) and fn.nin == 2 and out is not None:
            fn(a, b, out=out, casting="unsafe")
            return out
        result = _as_kernel(fn, vectorized)(a, b)
    return _finish(result, a.shape, out)


def as_mask(fn: Callable) -> Callable:
    """
    Wrap a boolean array kernel so that it yields 1.0/0.0 ``float64`` values.
    """

    def kernel(*arrays: np.ndarray) -> np.ndarray:
        return np.asarray(fn(*arrays), dtype=_FLOAT)

    kernel.__name__ = getattr(fn, "__name__", "mask")
    return kernel


def truthy(x: np.ndarray) -> np.ndarray:
    """Logical truthiness of elements: strictly greater than 0.0."""
    return np.greater(x, 0.0)
