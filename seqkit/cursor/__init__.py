from .iterable import ArrayIterable
from .iterator import ArrayIterator

__all__ = (
    "ArrayIterable",
    "ArrayIterator",
)
