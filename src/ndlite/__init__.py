"""
ndlite: a small dense N-dimensional array engine for ranks 1 through 4.

Quick start
-----------
>>> import ndlite
>>> a = ndlite.from_rank2([[1, 2, 3], [4, 5, 6]])
>>> a.shape, a.sum(), a.max()
((2, 3), 21.0, 6.0)
>>> a.reshape((3, 2)).flatten()
[1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
"""

from .domain import (
    MAX_RANK,
    Rank,
    ReductionStrategy,
    INDArray,
    NDArrayError,
    ShapeError,
    ShapeMismatchError,
    EmptyArrayError,
    ArrayConsumedError,
    size_of,
    validate,
    constants,
)
from .domain._constants import PI, TAU, E, SQRT_2
from .infrastructure import (
    ReductionSettings,
    get_settings,
    override_settings,
)
from .infrastructure.ndarray import (
    NDArray,
    from_rank1,
    from_rank2,
    from_rank3,
    from_rank4,
    from_flat,
    from_numpy,
    asarray,
    generate,
    fill,
    zeros,
    ones,
    random,
    random_range,
    arange,
    transform,
    zip_transform,
    flatten,
    reshape,
    sum,
    sequential_sum,
    parallel_sum,
)

__version__ = "0.1.0"
