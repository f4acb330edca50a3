"""
Result-returning wrappers.

    from seqkit import lift as L

    L.try_flatten(1, [2, None])     # Error(NullLeafError(path=(1, 1)))
    L.or_else(L.try_next(cur), default=None)
    L.unsafe(L.try_array(3))        # [None, None, None]
"""

from __future__ import annotations

from . import down, up
from .down import or_else, unsafe
from .up import catching, try_array, try_count, try_flatten, try_next, try_previous

__all__ = (
    # Namespaces
    "up",
    "down",
    # Up
    "catching",
    "try_array",
    "try_count",
    "try_flatten",
    "try_next",
    "try_previous",
    # Down
    "or_else",
    "unsafe",
)
