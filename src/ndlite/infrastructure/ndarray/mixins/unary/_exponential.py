"""
Exponential and logarithmic elementwise operations.

The family works with a fixed set of bases: 2, 10, e and π. ``log(base)``
accepts exactly those bases and routes to the dedicated method.

Logarithms of zero yield ``-inf`` and of negative numbers ``nan``, following
IEEE semantics.
"""

from __future__ import annotations

from abc import ABC
from typing import Any

import numpy as np

from .....domain._constants import E, LOG_BASES, PI

_LN_PI = float(np.log(PI))


class NDArrayMixinExponential(ABC):
    """Mixin implementing the exponential/logarithmic family."""

    def exp(self) -> Any:
        """Elementwise ``e ** x``."""
        return self._map(np.exp, "exp")

    def exp2(self) -> Any:
        """Elementwise ``2 ** x``."""
        return self._map(np.exp2, "exp2")

    def exp10(self) -> Any:
        """Elementwise ``10 ** x``."""
        return self._map(lambda x: np.power(10.0, x), "exp10")

    def exp_pi(self) -> Any:
        """Elementwise ``π ** x``."""
        return self._map(lambda x: np.power(PI, x), "exp_pi")

    def ln(self) -> Any:
        """Elementwise natural logarithm."""
        return self._map(np.log, "ln")

    def log2(self) -> Any:
        return self._map(np.log2, "log2")

    def log10(self) -> Any:
        return self._map(np.log10, "log10")

    def log_pi(self) -> Any:
        """Elementwise logarithm to base π."""
        return self._map(lambda x: np.log(x) / _LN_PI, "log_pi")

    def log(self, base: float = E) -> Any:
        """
        Elementwise logarithm to one of the fixed bases.

        Parameters
        ----------
        base : float, optional
            One of ``2``, ``10``, ``e`` or ``π``. Defaults to ``e``.

        Raises
        ------
        ValueError
            If `base` is not one of the fixed bases.
        """
        if base == 2.0:
            return self.log2()
        if base == 10.0:
            return self.log10()
        if base == E:
            return self.ln()
        if base == PI:
            return self.log_pi()
        raise ValueError(f"Unsupported logarithm base {base!r}; expected one of {LOG_BASES}")
