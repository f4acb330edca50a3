"""
seqkit - flattening nested sequences and bidirectional cursors.

Architecture:
- flat:    depth-first flatten of nested lists/tuples/Branch nodes (+ counting)
- cursor:  ArrayIterator (two-way cursor) and ArrayIterable (cursor factory)
- arrays:  small construction helpers around lists and tuples
- lift:    Result-returning wrappers (kungfu) for every raising operation
- writer:  Log/WriterResult for traced (*_w) variants
"""

# Core types
from ._types import Mapper, Nested, Path

# Internal helpers (for custom traversals)
from . import _helpers

# Explicit nodes
from .nodes import Branch, Leaf

# Flatten
from .flat import flatten, flatten_into, flatten_iter, flatten_w, flattened_count

# Cursors
from .cursor import ArrayIterable, ArrayIterator

# Array helpers
from .arrays import (
    NO_OBJECTS,
    NO_STRINGS,
    all_equal,
    all_null,
    array,
    as_array,
    iterable,
    iterator,
    map_array,
)

# Lift helpers
from . import lift

# Writer
from . import writer
from .writer import Log, TraceEntry, WriterResult

# Errors
from ._errors import (
    CursorPositionError,
    NegativeSizeError,
    NoItemError,
    NoNextItemError,
    NoPreviousItemError,
    NullLeafError,
)

__all__ = (
    # Types
    "Mapper",
    "Nested",
    "Path",
    "_helpers",
    # Nodes
    "Branch",
    "Leaf",
    # Flatten
    "flatten",
    "flatten_into",
    "flatten_iter",
    "flatten_w",
    "flattened_count",
    # Cursors
    "ArrayIterable",
    "ArrayIterator",
    # Arrays
    "NO_OBJECTS",
    "NO_STRINGS",
    "all_equal",
    "all_null",
    "array",
    "as_array",
    "iterable",
    "iterator",
    "map_array",
    # Lift
    "lift",
    # Writer
    "writer",
    "Log",
    "TraceEntry",
    "WriterResult",
    # Errors
    "CursorPositionError",
    "NegativeSizeError",
    "NoItemError",
    "NoNextItemError",
    "NoPreviousItemError",
    "NullLeafError",
)
