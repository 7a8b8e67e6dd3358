"""Tests for the activity log sink."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

import pytest

from ecpremote.utils.activity import ActivityLog, emit_to


class TestActivityLog:
    def test_starts_empty(self) -> None:
        log = ActivityLog()
        assert log.lines == []
        assert len(log) == 0

    def test_newest_first(self, activity_log: ActivityLog) -> None:
        activity_log.append("first")
        activity_log("second")
        assert activity_log.lines == ["12:00:00.123  second", "12:00:00.123  first"]

    def test_timestamp_format(self) -> None:
        log = ActivityLog(clock=lambda: datetime(2025, 6, 1, 8, 5, 9, 7000, tzinfo=timezone.utc))
        log.append("hello")
        assert log.lines == ["08:05:09.007  hello"]

    def test_lines_is_a_copy(self, activity_log: ActivityLog) -> None:
        activity_log.append("x")
        activity_log.lines.clear()
        assert len(activity_log) == 1


class TestEmitTo:
    def test_writes_to_sink(self, activity_log: ActivityLog) -> None:
        emit_to(activity_log, "hello")
        assert activity_log.lines == ["12:00:00.123  hello"]

    def test_none_sink(self) -> None:
        emit_to(None, "ignored")

    def test_failing_sink_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        def broken_sink(line: str) -> None:
            raise RuntimeError("sink broke")

        with caplog.at_level(logging.ERROR, logger="ecpremote.utils.activity"):
            emit_to(broken_sink, "hello")
        assert "Activity log sink failed on: hello" in caplog.text
