"""
Explicit nested-sequence nodes
==============================

Tagged alternative to classifying plain lists and tuples by type. A ``Leaf``
is never descended into, whatever it wraps; a ``Branch`` always is.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ._types import Nested


@dataclass(frozen=True, slots=True)
class Leaf[T]:
    """Terminal value. ``Leaf(None)`` and ``Leaf([1, 2])`` are both single leaves."""

    item: T


@dataclass(frozen=True, slots=True)
class Branch[T]:
    """Ordered children, each a leaf, a plain sequence or another node."""

    children: Sequence[Nested[T] | Leaf[T] | Branch[T]]

    @staticmethod
    def of[U](*children: Nested[U] | Leaf[U] | Branch[U]) -> Branch[U]:
        """
        Build a branch from positional children.

        Example:
            Branch.of(1, Branch.of(2, 3), Leaf("abc"))
        """
        return Branch(children)

    def __len__(self) -> int:
        return len(self.children)


__all__ = ("Branch", "Leaf")
