"""Tests for events/sink.py - EventSink protocol and implementations."""

from __future__ import annotations

import logging

import pytest

from request_chaos.events.sink import EventSink, ListSink, MultiSink, NullSink
from request_chaos.events.types import ErrorInjectedEvent, LatencyInjectedEvent


class TestEventSinkProtocol:
    """Tests for EventSink protocol."""

    def test_list_sink_is_event_sink(self) -> None:
        assert isinstance(ListSink(), EventSink)

    def test_null_sink_is_event_sink(self) -> None:
        assert isinstance(NullSink(), EventSink)

    def test_multi_sink_is_event_sink(self) -> None:
        assert isinstance(MultiSink(), EventSink)


class TestNullSink:
    def test_emit_and_close_do_nothing(self) -> None:
        sink = NullSink()
        sink.emit(LatencyInjectedEvent())
        sink.close()


class TestListSink:
    def test_emit_collects_events(self) -> None:
        sink = ListSink()
        first = LatencyInjectedEvent(delay_ms=1)
        second = ErrorInjectedEvent(status=500)

        sink.emit(first)
        sink.emit(second)

        assert sink.events == [first, second]
        assert len(sink) == 2

    def test_clear(self) -> None:
        sink = ListSink()
        sink.emit(LatencyInjectedEvent())
        sink.clear()
        assert len(sink) == 0


class FailingSink:
    def emit(self, event) -> None:
        raise RuntimeError("boom")

    def close(self) -> None:
        raise RuntimeError("boom")


class TestMultiSink:
    def test_broadcasts(self) -> None:
        a, b = ListSink(), ListSink()
        sink = MultiSink([a, b])
        event = LatencyInjectedEvent()
        sink.emit(event)
        assert a.events == [event]
        assert b.events == [event]

    def test_add_and_remove(self) -> None:
        a = ListSink()
        sink = MultiSink()
        sink.add(a)
        assert len(sink) == 1
        sink.remove(a)
        assert len(sink) == 0
        sink.remove(a)  # no error when missing

    def test_failing_sink_does_not_break_others(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        good = ListSink()
        sink = MultiSink([FailingSink(), good])

        with caplog.at_level(logging.ERROR, logger="request_chaos"):
            sink.emit(LatencyInjectedEvent())
            sink.close()

        assert len(good) == 1
        assert "Event sink" in caplog.text
        assert "Closing event sink" in caplog.text
