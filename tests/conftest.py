"""Shared pytest fixtures for seqkit tests."""

from __future__ import annotations

import pytest

from seqkit import ArrayIterable, ArrayIterator


@pytest.fixture
def abc() -> tuple[str, ...]:
    return ("a", "b", "c")


@pytest.fixture
def cursor(abc: tuple[str, ...]) -> ArrayIterator[str]:
    """Fresh cursor at position 0 over ('a', 'b', 'c')."""
    return ArrayIterator(abc)


@pytest.fixture
def adapter() -> ArrayIterable[int]:
    return ArrayIterable([1, 2, 3])
