"""Tests for core/recorder.py - Recorder logging and events."""

from __future__ import annotations

import logging

import pytest

from request_chaos.chaos.decision import ChaosDecision
from request_chaos.core.recorder import Recorder
from request_chaos.events.sink import ListSink, NullSink
from request_chaos.events.types import (
    ErrorInjectedEvent,
    LatencyInjectedEvent,
    RequestPassedEvent,
)
from request_chaos.types import SkipReason


class TestRecorderInitialization:
    def test_default_sink_is_null(self) -> None:
        assert isinstance(Recorder().sink, NullSink)

    def test_custom_sink(self, list_sink: ListSink) -> None:
        assert Recorder(list_sink).sink is list_sink


class TestRecorderEvents:
    def test_passthrough_event(self, recorder: Recorder, list_sink: ListSink) -> None:
        recorder.record(ChaosDecision.proceed(SkipReason.METHOD), "GET", "/x")
        (event,) = list_sink.events
        assert isinstance(event, RequestPassedEvent)
        assert event.reason == "method"
        assert event.method == "GET"
        assert event.path == "/x"

    def test_latency_event(self, recorder: Recorder, list_sink: ListSink) -> None:
        recorder.record(ChaosDecision.delay(120.0), "GET", "/")
        (event,) = list_sink.events
        assert isinstance(event, LatencyInjectedEvent)
        assert event.delay_ms == 120.0

    def test_error_event(self, recorder: Recorder, list_sink: ListSink) -> None:
        recorder.record(ChaosDecision.error(502), "PUT", "/items/1")
        (event,) = list_sink.events
        assert isinstance(event, ErrorInjectedEvent)
        assert event.status == 502
        assert event.delay_ms is None

    def test_delayed_error_is_a_single_event(
        self, recorder: Recorder, list_sink: ListSink
    ) -> None:
        recorder.record(ChaosDecision.error(500, delay_ms=40.0), "GET", "/")
        (event,) = list_sink.events
        assert isinstance(event, ErrorInjectedEvent)
        assert event.delay_ms == 40.0

    def test_close_closes_sink(self) -> None:
        class ClosingSink(ListSink):
            closed = False

            def close(self) -> None:
                self.closed = True

        sink = ClosingSink()
        Recorder(sink).close()
        assert sink.closed is True


class TestRecorderLogging:
    def test_error_log_line(
        self, recorder: Recorder, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="request_chaos"):
            recorder.record(ChaosDecision.error(500), "GET", "/")
        assert "[Chaos] Injecting a 500 Internal Server Error" in caplog.text

    def test_unknown_status_phrase(
        self, recorder: Recorder, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="request_chaos"):
            recorder.record(ChaosDecision.error(599), "GET", "/")
        assert "[Chaos] Injecting a 599 Error" in caplog.text

    def test_latency_log_line(
        self, recorder: Recorder, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="request_chaos"):
            recorder.record(ChaosDecision.delay(250.0), "GET", "/")
        assert "[Chaos] Delaying response by 250ms..." in caplog.text

    def test_passthrough_logs_at_debug_only(
        self, recorder: Recorder, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="request_chaos"):
            recorder.record(ChaosDecision.proceed(SkipReason.NOT_SAMPLED), "GET", "/")
        assert caplog.text == ""

        with caplog.at_level(logging.DEBUG, logger="request_chaos"):
            recorder.record(ChaosDecision.proceed(SkipReason.NOT_SAMPLED), "GET", "/")
        assert "Passing GET / through (not_sampled)" in caplog.text


class RaisingSink:
    def emit(self, event) -> None:
        raise ValueError("I/O operation on closed file.")

    def close(self) -> None:
        pass


class TestRecorderSinkFailures:
    """A broken sink must never fail the request being decided."""

    @pytest.mark.parametrize(
        "decision",
        [
            ChaosDecision.proceed(SkipReason.NOT_SAMPLED),
            ChaosDecision.delay(10.0),
            ChaosDecision.error(503),
            ChaosDecision.error(500, delay_ms=5.0),
        ],
    )
    def test_record_swallows_and_logs_sink_errors(
        self, decision: ChaosDecision, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.ERROR, logger="request_chaos"):
            Recorder(RaisingSink()).record(decision, "GET", "/")
        assert "[Chaos] Event sink" in caplog.text

    def test_decide_still_returns_a_decision(self) -> None:
        from request_chaos.chaos.policy import ChaosPolicy
        from request_chaos.core.engine import ChaosEngine

        engine = ChaosEngine(
            ChaosPolicy(error_rate=1.0), environ={}, recorder=Recorder(RaisingSink())
        )
        decision = engine.decide("GET", "/")
        assert decision.status == 500
