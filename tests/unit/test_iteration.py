"""Tests for the shared enum iterator engine."""

from __future__ import annotations

import operator

import pytest

from enumkit.core.iteration import EnumIterator, IterMode, IterStep


class TestModes:
    """Each mode yields the right item per step."""

    def test_element(self) -> None:
        it = EnumIterator(IterMode.ELEMENT, 0, 3, ["a", "b", "c"])
        assert list(it) == ["a", "b", "c"]

    def test_pair(self) -> None:
        it = EnumIterator(IterMode.PAIR, 0, 2, ["a", "b"], [10, 20])
        assert list(it) == [("a", 10), ("b", 20)]

    def test_index_yields_cursor(self) -> None:
        it = EnumIterator(IterMode.INDEX, 3, 6)
        assert list(it) == [3, 4, 5]

    def test_offset_element_reads_from_zero(self) -> None:
        it = EnumIterator(IterMode.OFFSET_ELEMENT, 5, 7, ["A", "B"])
        assert list(it) == ["A", "B"]

    def test_offset_pair(self) -> None:
        it = EnumIterator(IterMode.OFFSET_PAIR, 1, 3, ["A", "B"])
        assert list(it) == [("A", 1), ("B", 2)]

    def test_empty_range(self) -> None:
        it = EnumIterator(IterMode.ELEMENT, 0, 0, [])
        assert list(it) == []


class TestStep:
    """The step() state machine."""

    def test_step_results(self) -> None:
        it = EnumIterator(IterMode.ELEMENT, 0, 2, ["x", "y"])
        assert it.step() == IterStep(done=False, value="x")
        assert it.step() == IterStep(done=False, value="y")
        assert it.step() == IterStep(done=True, value=None)

    def test_stays_done(self) -> None:
        it = EnumIterator(IterMode.INDEX, 0, 1)
        it.step()
        for _ in range(3):
            assert it.step().done is True
        with pytest.raises(StopIteration):
            next(it)

    def test_releases_backing_sequences_when_done(self) -> None:
        it = EnumIterator(IterMode.PAIR, 0, 1, ["a"], ["b"])
        it.step()
        assert it._first is not None
        it.step()
        assert it._first is None
        assert it._second is None

    def test_length_hint(self) -> None:
        it = EnumIterator(IterMode.INDEX, 2, 5)
        assert operator.length_hint(it) == 3
        next(it)
        assert operator.length_hint(it) == 2
        list(it)
        assert operator.length_hint(it) == 0
        assert it.done

    def test_is_its_own_iterator(self) -> None:
        it = EnumIterator(IterMode.INDEX, 0, 2)
        assert iter(it) is it

    def test_repr(self) -> None:
        it = EnumIterator(IterMode.ELEMENT, 0, 2, ["a", "b"])
        assert repr(it) == "<EnumIterator element 0/2>"


class TestSessions:
    """Each keys()/values()/entries() call gets its own session."""

    def test_sessions_are_independent(self, direction_enum) -> None:
        first = direction_enum.keys()
        second = direction_enum.keys()
        assert first is not second
        next(first)
        next(first)
        assert next(second) == "NORTH"
        assert next(first) == "SOUTH"

    def test_exhausting_one_session_leaves_enum_iterable(self, level_enum) -> None:
        assert list(level_enum.values()) == [1, 2, 3, 4]
        assert list(level_enum.values()) == [1, 2, 3, 4]
