from .collect import flatten, flatten_into
from .count import flattened_count
from .stream import flatten_iter
from .traced import flatten_w

__all__ = (
    "flatten",
    "flatten_into",
    "flatten_iter",
    "flattened_count",
    "flatten_w",
)
