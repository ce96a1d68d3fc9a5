"""NumPy-backed implementations of the ndlite domain contracts."""

from ._settings import (
    ReductionSettings,
    get_settings,
    set_settings,
    override_settings,
    settings_from_env,
)
from .ndarray import NDArray
