"""
Materializing flatten
=====================
"""

from __future__ import annotations

import typing
from collections.abc import MutableSequence

from .._types import Nested
from .stream import walk


def flatten[T](*values: Nested[T]) -> list[T]:
    """
    Collect every leaf reachable from ``values`` into a new list.

    Branches are lists, tuples and ``Branch`` nodes at any depth; everything
    else (strings included) is a leaf.

    Example:
        flatten(1, [2, 3], [[4]], 5)  # [1, 2, 3, 4, 5]
        flatten()                     # []
    """
    return list(walk(values, ()))


def flatten_into[T, S: MutableSequence[typing.Any]](target: S, *values: Nested[T]) -> S:
    """
    Append every leaf of ``values`` to ``target`` and return ``target``.

    Prior contents of ``target`` keep their place. Leaves are collected first,
    so ``target`` is not touched when the traversal raises.

    Example:
        acc = [0]
        flatten_into(acc, 1, [2, 3])
        flatten_into(acc, [[4]])
        acc  # [0, 1, 2, 3, 4]
    """
    target.extend(flatten(*values))
    return target


__all__ = ("flatten", "flatten_into")
