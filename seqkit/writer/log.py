"""
Log - accumulated traversal trace
=================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .._types import Path

type EntryKind = Literal["branch", "leaf"]


@dataclass(frozen=True, slots=True)
class TraceEntry:
    """One visited element: where it sits and whether it was descended into."""

    path: Path
    kind: EntryKind

    @property
    def depth(self) -> int:
        return len(self.path) - 1


class Log[A](list[A]):
    """
    Monoidal accumulator returned beside a Result by the ``*_w`` functions.

    ``combine`` and ``tell`` return new logs and leave ``self`` untouched.
    Traversals build their own log with plain ``append`` and only hand it out
    once finished.
    """

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        return Log[T](items)

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        Example:
            Log.of("a").combine(Log.of("b", "c"))  # Log(["a", "b", "c"])
        """
        return Log([*self, *other])

    def tell(self, item: A, /) -> Log[A]:
        return Log([*self, item])

    def leaves(self) -> Log[A]:
        """Trace entries for leaves, in visiting order."""
        return Log([e for e in self if isinstance(e, TraceEntry) and e.kind == "leaf"])

    def branches(self) -> Log[A]:
        """Trace entries for descended branches, in visiting order."""
        return Log([e for e in self if isinstance(e, TraceEntry) and e.kind == "branch"])

    def max_depth(self) -> int:
        """Deepest trace entry seen, -1 for an empty trace."""
        return max((e.depth for e in self if isinstance(e, TraceEntry)), default=-1)


__all__ = ("EntryKind", "Log", "TraceEntry")
