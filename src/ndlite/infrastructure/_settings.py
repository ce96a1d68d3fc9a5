"""
Runtime settings for the reduction engine.

Settings are read once from the environment and can be overridden for a
scope with `override_settings`:

- ``NDLITE_PARALLEL_THRESHOLD``: arrays with more elements than this use the
  parallel summation path. Defaults to 1_000_000.
- ``NDLITE_MAX_WORKERS``: worker count of the parallel path. Defaults to
  ``os.cpu_count()``.

Malformed values are ignored with a `RuntimeWarning` and the default is used.
"""

from __future__ import annotations

import os
import threading
import warnings
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Iterator, Optional

DEFAULT_PARALLEL_THRESHOLD = 1_000_000

ENV_PARALLEL_THRESHOLD = "NDLITE_PARALLEL_THRESHOLD"
ENV_MAX_WORKERS = "NDLITE_MAX_WORKERS"


@dataclass(frozen=True)
class ReductionSettings:
    """
    Immutable reduction policy parameters.

    Attributes
    ----------
    parallel_threshold : int
        Element count above which ``sum()`` selects the parallel strategy.
    max_workers : int
        Number of partitions/threads used by the parallel strategy.
    """

    parallel_threshold: int = DEFAULT_PARALLEL_THRESHOLD
    max_workers: int = 1

    def __post_init__(self) -> None:
        if self.parallel_threshold < 0:
            raise ValueError(
                f"parallel_threshold must be >= 0, got {self.parallel_threshold}"
            )
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")


def _default_workers() -> int:
    return max(1, os.cpu_count() or 1)


def _read_env_int(name: str, default: int, *, minimum: int) -> int:
    raw = os.environ.get(name, "")
    if not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        value = None
    if value is None or value < minimum:
        warnings.warn(
            f"Ignoring {name}={raw!r}: expected an integer >= {minimum}. "
            f"Using default {default}.",
            RuntimeWarning,
            stacklevel=2,
        )
        return default
    return value


def settings_from_env() -> ReductionSettings:
    """Build settings from the process environment."""
    return ReductionSettings(
        parallel_threshold=_read_env_int(
            ENV_PARALLEL_THRESHOLD, DEFAULT_PARALLEL_THRESHOLD, minimum=0
        ),
        max_workers=_read_env_int(ENV_MAX_WORKERS, _default_workers(), minimum=1),
    )


_lock = threading.Lock()
_active: Optional[ReductionSettings] = None


def get_settings() -> ReductionSettings:
    """Return the active settings, loading them from the environment on first use."""
    global _active
    with _lock:
        if _active is None:
            _active = settings_from_env()
        return _active


def set_settings(settings: Optional[ReductionSettings]) -> None:
    """
    Replace the active settings.

    Passing None discards them, so the next `get_settings()` call re-reads
    the environment.
    """
    global _active
    with _lock:
        _active = settings


@contextmanager
def override_settings(**changes: int) -> Iterator[ReductionSettings]:
    """
    Temporarily replace fields of the active settings.

    Example
    -------
    >>> with override_settings(parallel_threshold=10, max_workers=4):
    ...     a.sum()  # parallel path for arrays with more than 10 elements
    """
    previous = get_settings()
    updated = replace(previous, **changes)
    set_settings(updated)
    try:
        yield updated
    finally:
        set_settings(previous)
