"""
Process-wide numeric constants.

These are plain immutable floats with no lifecycle. They are used as the fixed
bases accepted by the exponential/logarithmic catalogue.
"""

import math

PI: float = math.pi
TAU: float = math.tau
E: float = math.e
SQRT_2: float = math.sqrt(2.0)

LOG_BASES: tuple[float, ...] = (2.0, 10.0, E, PI)
"""Bases accepted by `log(base)`."""
