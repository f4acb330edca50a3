from __future__ import annotations

import typing
from collections.abc import Sequence


class NegativeSizeError(ValueError):
    """Array allocation asked for a negative length."""

    length: int

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"Cannot allocate array of negative length {length}")


class NullLeafError(TypeError):
    """None found where a value had to be classified as leaf or branch."""

    path: tuple[int, ...]

    def __init__(self, path: tuple[int, ...]) -> None:
        self.path = path
        where = "".join(f"[{i}]" for i in path)
        super().__init__(f"Cannot classify None at values{where}; wrap it in Leaf(None)")


class NoItemError(LookupError):
    """Cursor moved past the end of its sequence in some direction."""

    description: str
    items: Sequence[typing.Any]
    position: int

    def __init__(self, description: str, items: Sequence[typing.Any], position: int, *, direction: str) -> None:
        self.description = description
        self.items = items
        self.position = position
        super().__init__(
            f"No {direction} item in {description} of length {len(items)} at position {position}"
        )


class NoNextItemError(NoItemError):
    """next() called on an exhausted cursor."""

    def __init__(self, description: str, items: Sequence[typing.Any], position: int) -> None:
        super().__init__(description, items, position, direction="next")


class NoPreviousItemError(NoItemError):
    """previous() called on a cursor at its start."""

    def __init__(self, description: str, items: Sequence[typing.Any], position: int) -> None:
        super().__init__(description, items, position, direction="previous")


class CursorPositionError(IndexError):
    """Initial cursor index lies outside [0, len(items)]."""

    index: int
    length: int

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"Initial index {index} outside [0, {length}]")


__all__ = (
    "CursorPositionError",
    "NegativeSizeError",
    "NoItemError",
    "NoNextItemError",
    "NoPreviousItemError",
    "NullLeafError",
)
