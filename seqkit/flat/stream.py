"""
Lazy flattening
===============

Depth-first, left-to-right generator over the leaves of nested values.
Nothing is materialized; a ``None`` is only reported once the generator
reaches it.
"""

from __future__ import annotations

import typing
from collections.abc import Iterator, Sequence

from .._helpers import children_of, leaf_value
from .._types import Nested, Path


def walk(values: Sequence[typing.Any], path: Path) -> Iterator[typing.Any]:
    """Yield the leaves below ``values``, whose own location is ``path``."""
    for index, value in enumerate(values):
        here = (*path, index)
        children = children_of(value, here)
        if children is None:
            yield leaf_value(value)
        else:
            yield from walk(children, here)


def flatten_iter[T](*values: Nested[T]) -> Iterator[T]:
    """
    Lazily yield every leaf reachable from ``values``.

    Example:
        it = flatten_iter(1, [2, [3]], "ab")
        next(it)   # 1
        list(it)   # [2, 3, "ab"]

    NOTE: One-shot like any generator. Call again to restart.
          Depth is bounded by the interpreter recursion limit (RecursionError).
    """
    return walk(values, ())


__all__ = ("flatten_iter", "walk")
