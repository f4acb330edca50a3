"""
Core type definitions for seqkit.

Aliases shared by the flattener, the cursors and the lift layer.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

# ============================================================================
# Type aliases
# ============================================================================

# Nested = a leaf or an arbitrarily deep sequence of leaves
type Nested[T] = T | Sequence[Nested[T]]

# Mapper = element-wise transform used by map_array
type Mapper[A, B] = Callable[[A], B]

# Path = indices from the top-level values down to one element
type Path = tuple[int, ...]

__all__ = (
    "Mapper",
    "Nested",
    "Path",
)
