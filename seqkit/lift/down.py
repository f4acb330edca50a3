"""
Getting plain values back out of Result.
"""

from __future__ import annotations

from kungfu import Error, Ok, Result


def unsafe[T, E](result: Result[T, E]) -> T:
    """
    Unwrap, raising on Error.

    Example:
        items = unsafe(try_flatten(1, [2]))  # [1, 2]
    """
    return result.unwrap()


def or_else[T, E](result: Result[T, E], default: T) -> T:
    """
    Value on Ok, ``default`` on Error.

    Example:
        item = or_else(try_next(cursor), default=None)
    """
    match result:
        case Ok(v):
            return v
        case Error(_):
            return default


__all__ = ("or_else", "unsafe")
