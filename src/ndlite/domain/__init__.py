"""Backend-agnostic contracts: errors, shapes, strategies and constants."""

from ._errors import (
    NDArrayError,
    ShapeError,
    ShapeMismatchError,
    EmptyArrayError,
    ArrayConsumedError,
)
from ._shape import (
    MAX_RANK,
    Rank,
    normalize_shape,
    size_of,
    validate,
    row_major_strides,
    flat_index,
)
from ._reduction import ReductionStrategy
from ._ndarray import INDArray
from . import _constants as constants
