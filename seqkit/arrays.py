"""
Array helpers
=============

Construction and adaptation shortcuts around plain lists and tuples.
"""

from __future__ import annotations

import typing
from collections.abc import Iterable

from ._errors import NegativeSizeError
from ._types import Mapper
from .cursor import ArrayIterable, ArrayIterator

# Shared empty constants
NO_OBJECTS: tuple[object, ...] = ()
NO_STRINGS: tuple[str, ...] = ()


def array[T](length: int) -> list[T | None]:
    """
    Allocate ``length`` empty slots.

    Raises NegativeSizeError for ``length < 0``.
    """
    if length < 0:
        raise NegativeSizeError(length)
    return [None] * length


def as_array[T](*items: T) -> tuple[T, ...]:
    """Return the positional arguments themselves."""
    return items


def iterable[T](*items: T) -> ArrayIterable[T]:
    """
    Re-traversable adapter over the given items.

    Example:
        for x in iterable(1, 2, 3): ...
    """
    return ArrayIterable(items)


def iterator[T](*items: T) -> ArrayIterator[T]:
    """Fresh cursor at position 0 over the given items."""
    return ArrayIterator(items)


def all_equal(*objects: typing.Any) -> bool:
    """
    True if every object equals the first one, or if there are none.

    ``None`` equals only ``None``.
    """
    if not objects:
        return True
    first = objects[0]
    return all(obj == first for obj in objects[1:])


def all_null(*objects: typing.Any) -> bool:
    """True if every reference is None (vacuously true when empty)."""
    return all(obj is None for obj in objects)


def map_array[A, B](values: Iterable[A], fn: Mapper[A, B]) -> list[B]:
    """Apply ``fn`` to each value, keeping order."""
    return [fn(value) for value in values]


__all__ = (
    "NO_OBJECTS",
    "NO_STRINGS",
    "all_equal",
    "all_null",
    "array",
    "as_array",
    "iterable",
    "iterator",
    "map_array",
)
