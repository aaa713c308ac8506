"""Diagnostic sinks and logging configuration.

The sinks live in retrycase.foundation.core and are re-exported here.
"""

from retrycase.foundation.core.sinks import BufferSink, DiagnosticSink, LoggingSink, StreamSink

from .logging import JsonFormatter, configure_logging, reset_logging

__all__ = [
    "DiagnosticSink",
    "LoggingSink",
    "BufferSink",
    "StreamSink",
    "JsonFormatter",
    "configure_logging",
    "reset_logging",
]
