"""Tests for the public surface re-exported from seqkit."""

import seqkit
from seqkit import _helpers, _types


class TestPublicNames:
    """Everything in __all__ resolves; nothing unused is exported."""

    def test_all_names_resolve(self) -> None:
        for name in seqkit.__all__:
            assert hasattr(seqkit, name), name

    def test_type_aliases(self) -> None:
        assert set(_types.__all__) == {"Mapper", "Nested", "Path"}

    def test_helpers(self) -> None:
        assert set(_helpers.__all__) == {"BRANCH_TYPES", "children_of", "describe", "is_branch", "leaf_value"}
