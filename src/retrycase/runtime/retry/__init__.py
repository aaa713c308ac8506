"""Retry on error for test execution.

Re-runs a test when it fails with an uncaught exception, optionally limited
to specific exception types.

Example:
    >>> from retrycase.runtime.retry import RetryPolicy, RetryOnErrorCommand
    >>> from retrycase.foundation.core import ExecutionContext, FunctionCommand
    >>>
    >>> policy = RetryPolicy(max_attempts=3, error_types=[ConnectionError])
    >>> command = RetryOnErrorCommand(FunctionCommand(test_fetch), policy)
    >>> result = command.execute(ExecutionContext(command.test))
"""

from .command import RetryOnErrorCommand
from .decorator import RetryOnError, build_command, get_marker, retry_on_error, run_test
from .policy import RetryPolicy

__all__ = [
    # Policy
    "RetryPolicy",
    # Execution
    "RetryOnErrorCommand",
    # Decorator
    "RetryOnError",
    "retry_on_error",
    "get_marker",
    "build_command",
    "run_test",
]
