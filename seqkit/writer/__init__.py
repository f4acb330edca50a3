from .log import EntryKind, Log, TraceEntry
from .result import WriterResult

__all__ = (
    "EntryKind",
    "Log",
    "TraceEntry",
    "WriterResult",
)
