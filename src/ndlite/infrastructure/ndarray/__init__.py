"""
NumPy-backed NDArray implementation, factories and generators.
"""

from ._ndarray import NDArray
from ._storage import ArrayStorage
from ._factory import (
    from_rank1,
    from_rank2,
    from_rank3,
    from_rank4,
    from_flat,
    from_numpy,
    asarray,
)
from ._generator import (
    generate,
    fill,
    zeros,
    ones,
    random,
    random_range,
    arange,
)
from ._functional import (
    transform,
    zip_transform,
    flatten,
    reshape,
    sum,
    sequential_sum,
    parallel_sum,
)
