"""
Lifting exception-raising calls into Result.

Every seqkit operation raises on failure. These wrappers run the same
operations and return ``kungfu.Result`` instead, for pipelines that treat
errors as values.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Error, Ok, Result

from .._errors import NegativeSizeError, NoNextItemError, NoPreviousItemError, NullLeafError
from .._types import Nested
from ..arrays import array
from ..cursor import ArrayIterator
from ..flat import flatten, flattened_count


def catching[T, E](
    thunk: Callable[[], T],
    *,
    on_error: Callable[[Exception], E],
) -> Result[T, E]:
    """
    Run ``thunk`` and convert any raised Exception into ``Error(on_error(exc))``.

    Example:
        catching(lambda: int(raw), on_error=lambda e: ParseError(str(e)))

    NOTE: Catches all Exception subclasses. For specific exceptions,
          use the try_* helpers below or filter in on_error.
    """
    try:
        return Ok(thunk())
    except Exception as exc:
        return Error(on_error(exc))


def try_flatten[T](*values: Nested[T]) -> Result[list[T], NullLeafError]:
    """flatten() returning Error(NullLeafError) instead of raising."""
    try:
        return Ok(flatten(*values))
    except NullLeafError as exc:
        return Error(exc)


def try_count(*values: Nested[typing.Any]) -> Result[int, NullLeafError]:
    """flattened_count() returning Error(NullLeafError) instead of raising."""
    try:
        return Ok(flattened_count(*values))
    except NullLeafError as exc:
        return Error(exc)


def try_next[T](cursor: ArrayIterator[T]) -> Result[T, NoNextItemError]:
    """
    Advance ``cursor`` if possible.

    The cursor is left where it was when the result is an Error.
    """
    try:
        return Ok(cursor.next())
    except NoNextItemError as exc:
        return Error(exc)


def try_previous[T](cursor: ArrayIterator[T]) -> Result[T, NoPreviousItemError]:
    """Step ``cursor`` back if possible."""
    try:
        return Ok(cursor.previous())
    except NoPreviousItemError as exc:
        return Error(exc)


def try_array(length: int) -> Result[list[typing.Any], NegativeSizeError]:
    try:
        return Ok(array(length))
    except NegativeSizeError as exc:
        return Error(exc)


__all__ = (
    "catching",
    "try_array",
    "try_count",
    "try_flatten",
    "try_next",
    "try_previous",
)
