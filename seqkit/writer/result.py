"""
WriterResult - Result paired with its log
=========================================
"""

from __future__ import annotations

from dataclasses import dataclass

from kungfu import Error, Ok, Result


@dataclass(frozen=True, slots=True)
class WriterResult[T, E, W]:
    """
    Outcome of a traced operation.

    The log is kept on both branches: on ``Error`` it holds everything
    recorded up to the failure.

    Example:
        match flatten_w(1, [2, None]):
            case WriterResult(Ok(items), log): ...
            case WriterResult(Error(err), log): print(err.path, len(log))
    """

    result: Result[T, E]
    log: W

    @property
    def is_ok(self) -> bool:
        match self.result:
            case Ok(_):
                return True
            case Error(_):
                return False

    def unwrap(self) -> tuple[T, W]:
        """Return (value, log), raising if the result is an Error."""
        return (self.result.unwrap(), self.log)


__all__ = ("WriterResult",)
