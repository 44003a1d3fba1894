"""Tests for the bounded mutation history."""

from datetime import UTC

import pytest

from active_content.core.history import History, HistoryAction, HistoryRecord


def _record(index: int) -> HistoryRecord:
    return HistoryRecord.now(HistoryAction.INSERTED, f"v{index}", index)


class TestHistoryRecord:
    def test_now_is_utc(self):
        record = _record(0)
        assert record.time.tzinfo is UTC
        assert record.action is HistoryAction.INSERTED
        assert record.value == "v0"

    def test_actions_are_named(self):
        assert HistoryAction.SWAPPED.value == "SWAPPED"


class TestHistory:
    def test_disabled_by_default(self):
        history = History()
        calls = []
        history.push(lambda: calls.append(1) or _record(0))

        assert len(history) == 0
        assert calls == []

    def test_keeps_records_in_order(self):
        history = History(keep_for=5)
        for i in range(3):
            history.push(lambda i=i: _record(i))
        assert [r.index for r in history.records] == [0, 1, 2]

    def test_drops_oldest_beyond_capacity(self):
        history = History(keep_for=2)
        for i in range(4):
            history.push(lambda i=i: _record(i))
        assert [r.index for r in history.records] == [2, 3]

    def test_records_is_a_copy(self):
        history = History(keep_for=2)
        history.push(lambda: _record(0))
        history.records.clear()
        assert len(history) == 1

    def test_clear(self):
        history = History(keep_for=2)
        history.push(lambda: _record(0))
        history.clear()
        assert history.records == []

    def test_negative_capacity_rejected(self):
        with pytest.raises(ValueError):
            History(keep_for=-1)
