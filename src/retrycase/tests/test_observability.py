"""Tests for diagnostic sinks, logging setup and settings."""

from __future__ import annotations

import io
import json
import logging

import pytest
from pydantic import ValidationError

from retrycase.foundation.config import LoggingSettings, RetrySettings, get_settings
from retrycase.runtime.observability import BufferSink, LoggingSink, StreamSink, configure_logging


def test_buffer_sink_collects_lines() -> None:
    sink = BufferSink()
    sink.write_line("one")
    sink.write_line("two")
    assert sink.lines == ["one", "two"]

    sink.clear()
    assert sink.lines == []


def test_stream_sink_writes_lines() -> None:
    stream = io.StringIO()
    StreamSink(stream).write_line("hello")
    assert stream.getvalue() == "hello\n"


def test_logging_sink_levels(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="retrycase")
    sink = LoggingSink()
    sink.write_line("WARNING: something odd")
    sink.write_line("plain note")

    levels = {r.getMessage(): r.levelno for r in caplog.records if r.name == "retrycase.diagnostics"}
    assert levels == {"WARNING: something odd": logging.WARNING, "plain note": logging.INFO}


def test_configure_logging_json() -> None:
    stream = io.StringIO()
    configure_logging(LoggingSettings(level="DEBUG", format="json"), stream=stream)
    logging.getLogger("retrycase.retry").info("attempt failed")

    entry = json.loads(stream.getvalue().splitlines()[-1])
    assert entry["event"] == "attempt failed"
    assert entry["level"] == "info"
    assert entry["logger"] == "retrycase.retry"


def test_configure_logging_respects_level() -> None:
    stream = io.StringIO()
    configure_logging(LoggingSettings(level="WARNING"), stream=stream)
    log = logging.getLogger("retrycase.retry")
    log.info("hidden")
    log.warning("shown")

    output = stream.getvalue()
    assert "hidden" not in output
    assert "[WARNING] retrycase.retry: shown" in output


def test_configure_logging_replaces_handler() -> None:
    first, second = io.StringIO(), io.StringIO()
    configure_logging(LoggingSettings(), stream=first)
    configure_logging(LoggingSettings(), stream=second)
    logging.getLogger("retrycase").warning("once")

    assert first.getvalue() == ""
    assert "once" in second.getvalue()


# ═════════════════════════════════════════════════════════════════════════════
# Settings
# ═════════════════════════════════════════════════════════════════════════════


def test_settings_defaults() -> None:
    settings = get_settings()
    assert settings.retry.default_max_attempts == 3
    assert settings.retry.empty_filter == "any"
    assert settings.logging.level == "INFO"


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RETRYCASE_RETRY_DEFAULT_MAX_ATTEMPTS", "4")
    monkeypatch.setenv("RETRYCASE_LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.retry.default_max_attempts == 4
    assert settings.logging.level == "DEBUG"


def test_settings_are_cached() -> None:
    assert get_settings() is get_settings()


def test_retry_settings_validation() -> None:
    with pytest.raises(ValidationError):
        RetrySettings(default_max_attempts=0)
    with pytest.raises(ValidationError):
        RetrySettings(empty_filter="sometimes")
