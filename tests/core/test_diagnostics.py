"""Tests for diagnostics sinks."""

from __future__ import annotations

import logging

import pytest

from repodeps.core.diagnostics import (
    DiagnosticsSink,
    LoggingDiagnostics,
    RecordingDiagnostics,
    TeeDiagnostics,
)


class TestRecordingDiagnostics:
    def test_records_in_order(self) -> None:
        sink = RecordingDiagnostics()
        sink.log_warning("w1")
        sink.log_info("i1")
        sink.log_warning("w2")
        assert sink.warnings == ["w1", "w2"]
        assert sink.infos == ["i1"]

    def test_satisfies_protocol(self) -> None:
        assert isinstance(RecordingDiagnostics(), DiagnosticsSink)
        assert isinstance(LoggingDiagnostics(), DiagnosticsSink)


class TestLoggingDiagnostics:
    def test_levels(self, caplog: pytest.LogCaptureFixture) -> None:
        target = logging.getLogger("repodeps.test.sink")
        sink = LoggingDiagnostics(target)
        with caplog.at_level(logging.INFO, logger="repodeps.test.sink"):
            sink.log_warning("careful")
            sink.log_info("fyi")
        levels = [(r.levelno, r.getMessage()) for r in caplog.records]
        assert levels == [(logging.WARNING, "careful"), (logging.INFO, "fyi")]


class TestTeeDiagnostics:
    def test_fans_out(self) -> None:
        a, b = RecordingDiagnostics(), RecordingDiagnostics()
        tee = TeeDiagnostics(a, b)
        tee.log_warning("w")
        tee.log_info("i")
        assert a == b == RecordingDiagnostics(warnings=["w"], infos=["i"])
