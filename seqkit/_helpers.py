"""Internal helpers for seqkit.

Branch classification shared by every flatten variant. Not part of the public
API but usable when writing custom traversals."""

from __future__ import annotations

import typing
from collections.abc import Sequence

from ._errors import NullLeafError
from ._types import Path
from .nodes import Branch, Leaf

# Plain containers treated as branches. str and bytes stay leaves:
# a one-character string is a sequence of itself and never bottoms out.
BRANCH_TYPES: tuple[type, ...] = (list, tuple)


def children_of(value: typing.Any, path: Path) -> Sequence[typing.Any] | None:
    """
    Return the children of ``value`` if it is a branch, ``None`` if it is a leaf.

    ``path`` locates ``value`` among the top-level values and is only used
    to report where an unclassifiable ``None`` sits.
    """
    match value:
        case None:
            raise NullLeafError(path)
        case Leaf():
            return None
        case Branch(children):
            return children
        case _ if isinstance(value, BRANCH_TYPES):
            return value
        case _:
            return None


def is_branch(value: typing.Any, path: Path = ()) -> bool:
    """
    Classify a single value.

    ``path`` is reported by NullLeafError when ``value`` is None; pass the
    location of ``value`` when classifying inside a larger structure.
    """
    return children_of(value, path) is not None


def leaf_value[T](value: Leaf[T] | T) -> T:
    """Unwrap explicit leaves, pass anything else through."""
    if isinstance(value, Leaf):
        return value.item
    return value


def describe(items: Sequence[typing.Any]) -> str:
    """Short label of a sequence type for error messages."""
    return type(items).__name__


__all__ = (
    "BRANCH_TYPES",
    "children_of",
    "describe",
    "is_branch",
    "leaf_value",
)
