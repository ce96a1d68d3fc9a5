"""
CPU reduction kernels (NumPy backend).

This module provides the full-array reductions used by `NDArray`:

- `left_fold_sum`: sequential accumulation in row-major order, starting at 0.0,
- `partitioned_sum`: contiguous partitions folded on a thread pool, partials
  combined left-to-right in partition order,
- `scan_extrema`: minimum and maximum by a full scan.

Threads are used rather than processes because the per-partition fold runs in
NumPy C loops that release the GIL, and partitions are read-only slices of
one buffer (no copies, no shared mutable state).

Floating-point addition is not associative: `partitioned_sum` may differ from
`left_fold_sum` in the last bits. This is expected.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed

import numpy as np

from ...domain._errors import EmptyArrayError


def left_fold_sum(flat: np.ndarray) -> float:
    """
    Sum a flat buffer as ``((0 + x0) + x1) + ...`` in index order.

    Parameters
    ----------
    flat : np.ndarray
        One-dimensional ``float64`` buffer.

    Returns
    -------
    float
        The accumulated sum.

    Raises
    ------
    EmptyArrayError
        If `flat` has no elements.
    """
    if flat.size == 0:
        raise EmptyArrayError("sum")
    # accumulate is a strict running sum; np.sum would reassociate (pairwise).
    # Adding the 0.0 identity last only normalizes the sign of an all -0.0 sum.
    return 0.0 + float(np.add.accumulate(flat)[-1])


def partition_bounds(n: int, parts: int) -> list[tuple[int, int]]:
    """
    Split ``range(n)`` into at most `parts` contiguous, non-empty half-open ranges.

    Earlier partitions receive the remainder, one extra element each.
    """
    parts = max(1, min(parts, n))
    base, extra = divmod(n, parts)
    bounds = []
    start = 0
    for i in range(parts):
        stop = start + base + (1 if i < extra else 0)
        bounds.append((start, stop))
        start = stop
    return bounds


def partitioned_sum(flat: np.ndarray, max_workers: int) -> float:
    """
    Sum a flat buffer by folding contiguous partitions concurrently.

    Parameters
    ----------
    flat : np.ndarray
        One-dimensional ``float64`` buffer.
    max_workers : int
        Number of partitions and worker threads.

    Returns
    -------
    float
        Partial sums combined left-to-right in partition index order.

    Raises
    ------
    EmptyArrayError
        If `flat` has no elements.
    """
    if flat.size == 0:
        raise EmptyArrayError("sum")

    bounds = partition_bounds(int(flat.size), int(max_workers))
    if len(bounds) == 1:
        return left_fold_sum(flat)

    partials: list[float] = [0.0] * len(bounds)
    with ThreadPoolExecutor(max_workers=len(bounds)) as executor:
        future_to_idx = {
            executor.submit(left_fold_sum, flat[lo:hi]): i
            for i, (lo, hi) in enumerate(bounds)
        }
        for future in as_completed(future_to_idx):
            partials[future_to_idx[future]] = future.result()

    total = 0.0
    for p in partials:
        total += p
    return total


def scan_extrema(buf: np.ndarray) -> tuple[float, float]:
    """
    Return ``(min, max)`` over every element of `buf`.

    NaN propagates: if any element is NaN both extrema are NaN.

    Raises
    ------
    EmptyArrayError
        If `buf` has no elements.
    """
    if buf.size == 0:
        raise EmptyArrayError("min/max")
    return float(np.min(buf)), float(np.max(buf))
