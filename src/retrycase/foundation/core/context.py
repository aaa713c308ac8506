"""Execution context threaded through every command of a test invocation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .sinks import DiagnosticSink, LoggingSink

if TYPE_CHECKING:
    from .result import TestIdentity, TestResult


@dataclass(slots=True)
class ExecutionContext:
    """Mutable state for one test invocation.

    Carries the current test, the result of the latest attempt, the host's
    diagnostic output channel and free-form command state. Use data for:
    - Retry bookkeeping (retry_attempts, retry_history)
    - Custom wrapper state

    Example:
        >>> ctx = ExecutionContext(TestIdentity("test_example"))
        >>> ctx["request_id"] = "abc123"
        >>> ctx.get("request_id")
        'abc123'
    """

    current_test: TestIdentity
    current_result: TestResult | None = None
    out: DiagnosticSink = field(default_factory=LoggingSink)
    data: dict[str, object] = field(default_factory=dict)

    def __getitem__(self, key: str) -> object:
        return self.data[key]

    def __setitem__(self, key: str, value: object) -> None:
        self.data[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self.data

    def get(self, key: str, default: object = None) -> object:
        return self.data.get(key, default)
