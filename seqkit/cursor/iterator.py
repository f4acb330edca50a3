"""
ArrayIterator - bidirectional cursor
====================================

Single integer position over a borrowed, fixed sequence. Boundaries follow
from comparing the position with the length; there are no sentinel states.

    position:  0     1     2     3
    items:     | a   | b   | c   |

    At 0 has_previous() is False, at 3 has_next() is False.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from .._errors import CursorPositionError, NoNextItemError, NoPreviousItemError
from .._helpers import describe


class ArrayIterator[T](Iterator[T]):
    """
    Cursor moving one item forward or backward over ``items``.

    ``next()`` returns the item at the position, then advances.
    ``previous()`` steps back, then returns the item at the new position.
    So ``next()`` followed by ``previous()`` returns the same item twice.

    The sequence is never copied or modified. Mutating it while a cursor is
    live is undefined.
    """

    __slots__ = ("_items", "_position")

    def __init__(self, items: Sequence[T], initial_index: int = 0) -> None:
        if not 0 <= initial_index <= len(items):
            raise CursorPositionError(initial_index, len(items))
        self._items = items
        self._position = initial_index

    @property
    def items(self) -> Sequence[T]:
        return self._items

    @property
    def position(self) -> int:
        """Index of the item ``next()`` would return."""
        return self._position

    def has_next(self) -> bool:
        return self._position < len(self._items)

    def next(self) -> T:
        if not self.has_next():
            raise NoNextItemError(describe(self._items), self._items, self._position)
        item = self._items[self._position]
        self._position += 1
        return item

    def has_previous(self) -> bool:
        # position > 0, not >= 0: items[-1] would silently wrap to the last item
        return self._position > 0

    def previous(self) -> T:
        if not self.has_previous():
            raise NoPreviousItemError(describe(self._items), self._items, self._position)
        self._position -= 1
        return self._items[self._position]

    def __iter__(self) -> ArrayIterator[T]:
        return self

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        return self.next()

    def __repr__(self) -> str:
        return f"ArrayIterator(position={self._position}, length={len(self._items)})"


__all__ = ("ArrayIterator",)
