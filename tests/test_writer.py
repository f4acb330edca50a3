"""Tests for flatten_w and the writer Log."""

from kungfu import Error, Ok

from seqkit import Branch, Leaf, Log, NullLeafError, TraceEntry, WriterResult, flatten, flatten_w


class TestFlattenW:
    """Traced flatten."""

    def test_result_matches_flatten(self) -> None:
        values = (1, [2, [3]], Leaf([4]))
        items, _ = flatten_w(*values).unwrap()
        assert items == flatten(*values)

    def test_trace_order(self) -> None:
        wr = flatten_w(1, [2])
        assert list(wr.log) == [
            TraceEntry((0,), "leaf"),
            TraceEntry((1,), "branch"),
            TraceEntry((1, 0), "leaf"),
        ]

    def test_leaf_entries_match_count(self) -> None:
        wr = flatten_w(Branch.of(1, [2, 3]), [[4]])
        items, log = wr.unwrap()
        assert len(log.leaves()) == len(items) == 4
        assert len(log.branches()) == 4
        assert log.max_depth() == 2

    def test_empty(self) -> None:
        wr = flatten_w()
        assert wr.is_ok
        assert wr.unwrap() == ([], Log())
        assert wr.log.max_depth() == -1

    def test_null_leaf_returned_with_partial_trace(self) -> None:
        wr = flatten_w(1, [2, None], 3)
        assert not wr.is_ok
        match wr:
            case WriterResult(Error(err), log):
                assert isinstance(err, NullLeafError)
                assert err.path == (1, 1)
                assert [e.path for e in log] == [(0,), (1,), (1, 0)]
            case WriterResult(Ok(_), _):
                raise AssertionError("expected Error")


class TestLog:
    """Monoidal operations do not mutate."""

    def test_combine(self) -> None:
        a = Log.of("a")
        b = Log.of("b", "c")
        assert a.combine(b) == ["a", "b", "c"]
        assert a == ["a"]

    def test_identity(self) -> None:
        x = Log.of(1, 2)
        assert Log().combine(x) == x
        assert x.combine(Log()) == x

    def test_tell(self) -> None:
        a = Log.of(1)
        assert a.tell(2) == [1, 2]
        assert a == [1]

    def test_entry_depth(self) -> None:
        assert TraceEntry((0,), "leaf").depth == 0
        assert TraceEntry((1, 2, 3), "branch").depth == 2
