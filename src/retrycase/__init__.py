"""Retrycase - retry a test case when it fails with an error.

Wraps the command that runs a test so that an attempt ending in an uncaught
exception is re-run, up to a maximum number of attempts, optionally limited
to specific exception types. Passing attempts and plain assertion failures
are never retried. The result of the last attempt is the test's result.

Quick Start (Decorator):
    >>> from retrycase import retry_on_error, run_test
    >>>
    >>> @retry_on_error(3, ConnectionError)
    ... def test_fetch():
    ...     assert fetch("https://example.com").ok
    >>>
    >>> run_test(test_fetch).passed
    True

Wrapping a host command:
    >>> from retrycase import ExecutionContext, RetryOnErrorCommand, RetryPolicy
    >>>
    >>> policy = RetryPolicy(max_attempts=3, error_types=[ConnectionError, TimeoutError])
    >>> command = RetryOnErrorCommand(inner_command, policy)
    >>> context = ExecutionContext(command.test)
    >>> result = command.execute(context)
    >>> context.get("retry_attempts")
    2

Configuration:
    RETRYCASE_RETRY_DEFAULT_MAX_ATTEMPTS=5
    RETRYCASE_RETRY_EMPTY_FILTER=none
    RETRYCASE_LOG_LEVEL=DEBUG
"""

from retrycase.foundation.config import (
    LoggingSettings,
    RetrycaseSettings,
    RetrySettings,
    clear_settings_cache,
    get_settings,
)
from retrycase.foundation.core import (
    DelegatingCommand,
    ExecutionContext,
    FunctionCommand,
    TestCommand,
    TestIdentity,
    TestResult,
)
from retrycase.foundation.errors import (
    InvalidCommandError,
    ResultState,
    RetrycaseError,
    StopReason,
    classification_name,
    is_error_classification,
)
from retrycase.runtime.observability import (
    BufferSink,
    DiagnosticSink,
    LoggingSink,
    StreamSink,
    configure_logging,
)
from retrycase.runtime.retry import (
    RetryOnError,
    RetryOnErrorCommand,
    RetryPolicy,
    build_command,
    retry_on_error,
    run_test,
)

__version__ = "0.1.0"

__all__ = [
    # Host contract
    "TestIdentity",
    "TestResult",
    "ExecutionContext",
    "TestCommand",
    "DelegatingCommand",
    "FunctionCommand",
    # Errors
    "ResultState",
    "StopReason",
    "RetrycaseError",
    "InvalidCommandError",
    "is_error_classification",
    "classification_name",
    # Retry
    "RetryPolicy",
    "RetryOnErrorCommand",
    "RetryOnError",
    "retry_on_error",
    "build_command",
    "run_test",
    # Observability
    "DiagnosticSink",
    "LoggingSink",
    "BufferSink",
    "StreamSink",
    "configure_logging",
    # Settings
    "RetrycaseSettings",
    "RetrySettings",
    "LoggingSettings",
    "get_settings",
    "clear_settings_cache",
]
