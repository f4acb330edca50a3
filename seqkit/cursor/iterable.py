"""
ArrayIterable - cursor factory
==============================
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .iterator import ArrayIterator


class ArrayIterable[T](Iterable[T]):
    """
    Wraps a sequence (by reference) and hands out fresh cursors over it.

    Every ``iterator()`` call starts a new, independent cursor at position 0,
    so the same adapter can be traversed any number of times, also
    concurrently from several cursors.

    Example:
        it = ArrayIterable([1, 2, 3])
        a, b = it.iterator(), it.iterator()
        a.next(); a.next(); b.next()
        a.position, b.position  # (2, 1)
    """

    __slots__ = ("_items",)

    def __init__(self, items: Sequence[T]) -> None:
        self._items = items

    def iterator(self) -> ArrayIterator[T]:
        return ArrayIterator(self._items)

    def __iter__(self) -> ArrayIterator[T]:
        return self.iterator()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ArrayIterable({self._items!r})"


__all__ = ("ArrayIterable",)
