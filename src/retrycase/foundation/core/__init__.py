"""Host execution contract: test identity, results, context, commands and sinks."""

from .command import DelegatingCommand, FunctionCommand, TestCommand
from .context import ExecutionContext
from .result import TestIdentity, TestResult
from .sinks import BufferSink, DiagnosticSink, LoggingSink, StreamSink

__all__ = [
    "TestIdentity",
    "TestResult",
    "ExecutionContext",
    "TestCommand",
    "DelegatingCommand",
    "FunctionCommand",
    "DiagnosticSink",
    "LoggingSink",
    "BufferSink",
    "StreamSink",
]
