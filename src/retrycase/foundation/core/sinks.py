"""Diagnostic output channels for test execution.

A sink is where a command writes lines meant for the person running the
tests, such as warnings about ignored retry configuration. Hosts plug in
their own; LoggingSink is the default.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Protocol, TextIO, runtime_checkable

logger = logging.getLogger("retrycase.diagnostics")


@runtime_checkable
class DiagnosticSink(Protocol):
    """Protocol for the host's diagnostic output channel."""

    def write_line(self, text: str) -> None: ...


@dataclass(slots=True)
class LoggingSink:
    """Route diagnostic lines to a stdlib logger.

    Lines starting with "WARNING:" are logged at WARNING, others at INFO.
    """

    logger: logging.Logger = field(default_factory=lambda: logger)

    def write_line(self, text: str) -> None:
        level = logging.WARNING if text.startswith("WARNING:") else logging.INFO
        self.logger.log(level, text)


@dataclass(slots=True)
class BufferSink:
    """Collect diagnostic lines in memory.

    Example:
        >>> sink = BufferSink()
        >>> sink.write_line("hello")
        >>> sink.lines
        ['hello']
    """

    lines: list[str] = field(default_factory=list)

    def write_line(self, text: str) -> None:
        self.lines.append(text)

    def clear(self) -> None:
        self.lines.clear()


@dataclass(slots=True)
class StreamSink:
    """Write diagnostic lines to a text stream (stderr by default)."""

    stream: TextIO = field(default_factory=lambda: sys.stderr)

    def write_line(self, text: str) -> None:
        self.stream.write(text + "\n")
        self.stream.flush()
