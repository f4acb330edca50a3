"""
Leaf counting
=============
"""

from __future__ import annotations

import typing
from collections.abc import Sequence

from .._helpers import children_of
from .._types import Nested, Path


def _count(values: Sequence[typing.Any], path: Path) -> int:
    total = 0
    for index, value in enumerate(values):
        here = (*path, index)
        children = children_of(value, here)
        total += 1 if children is None else _count(children, here)
    return total


def flattened_count(*values: Nested[typing.Any]) -> int:
    """
    Number of leaves ``flatten(*values)`` would return, without building it.

    Example:
        flattened_count(1, [2, [3, 4]], [])  # 4
        flattened_count()                    # 0
    """
    return _count(values, ())


__all__ = ("flattened_count",)
