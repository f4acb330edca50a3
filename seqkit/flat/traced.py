"""
Traced flatten
==============

Writer variant: same traversal, errors returned as values, every visited
element recorded in a ``Log``.
"""

from __future__ import annotations

import typing
from collections.abc import Sequence

from kungfu import Error, Ok

from .._errors import NullLeafError
from .._helpers import children_of, leaf_value
from .._types import Nested, Path
from ..writer import Log, TraceEntry, WriterResult


def flatten_w[T](*values: Nested[T]) -> WriterResult[list[T], NullLeafError, Log[TraceEntry]]:
    """
    Flatten ``values`` and record a trace of the traversal.

    Never raises ``NullLeafError``: it comes back as ``Error`` with the
    trace up to the offending element.

    Example:
        wr = flatten_w(1, [2])
        wr.result                     # Ok([1, 2])
        [e.kind for e in wr.log]      # ["leaf", "branch", "leaf"]
    """
    items: list[T] = []
    log = Log[TraceEntry]()

    def visit(children: Sequence[typing.Any], path: Path) -> None:
        for index, value in enumerate(children):
            here = (*path, index)
            nested = children_of(value, here)
            if nested is None:
                log.append(TraceEntry(here, "leaf"))
                items.append(leaf_value(value))
            else:
                log.append(TraceEntry(here, "branch"))
                visit(nested, here)

    try:
        visit(values, ())
    except NullLeafError as exc:
        return WriterResult(Error(exc), log)
    return WriterResult(Ok(items), log)


__all__ = ("flatten_w",)
