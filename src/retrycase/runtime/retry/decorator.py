"""Decorator that marks a test function for retry on error.

The decorator only attaches a RetryOnError marker; a runner wraps the test's
command with marker.wrap(command). run_test does this for a single callable.

Example:
    >>> @retry_on_error(3, ConnectionError, TimeoutError)
    ... def test_fetch():
    ...     fetch("https://example.com")
    >>>
    >>> result = run_test(test_fetch)
    >>> result.passed
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from retrycase.foundation.core import ExecutionContext, FunctionCommand, TestCommand
from retrycase.foundation.errors import InvalidCommandError

from .command import RetryOnErrorCommand
from .policy import RetryPolicy

if TYPE_CHECKING:
    from retrycase.foundation.core import TestResult
    from retrycase.runtime.observability import DiagnosticSink

F = TypeVar("F", bound=Callable[..., Any])

MARKER_ATTR = "__retry_on_error__"


@dataclass(frozen=True, slots=True)
class RetryOnError:
    """Retry marker attached to a test function."""

    policy: RetryPolicy

    def wrap(self, command: TestCommand) -> RetryOnErrorCommand:
        """Wrap a command so it is retried according to this marker's policy."""
        if not isinstance(command, TestCommand):
            raise InvalidCommandError(command)
        return RetryOnErrorCommand(command, self.policy)


def retry_on_error(max_attempts: int | None = None, *error_types: Any) -> Callable[[F], F]:
    """Mark a test to be re-run when it fails with an error.

    Args:
        max_attempts: Maximum number of attempts (default from RetrySettings)
        *error_types: Exception classes that qualify for a retry; none means
            any error qualifies

    Returns:
        Decorator attaching a RetryOnError marker to the function
    """
    policy = RetryPolicy.from_settings(
        error_types=list(error_types) if error_types else None,
        max_attempts=max_attempts,
    )

    def decorator(fn: F) -> F:
        setattr(fn, MARKER_ATTR, RetryOnError(policy))
        return fn

    return decorator


def get_marker(fn: object) -> RetryOnError | None:
    """RetryOnError marker attached to fn, if any."""
    marker = getattr(fn, MARKER_ATTR, None)
    return marker if isinstance(marker, RetryOnError) else None


def build_command(fn: Callable[[], object]) -> TestCommand:
    """Command for fn, wrapped for retry when fn carries a marker."""
    command: TestCommand = FunctionCommand(fn)
    marker = get_marker(fn)
    return marker.wrap(command) if marker else command


def run_test(
    fn: Callable[[], object],
    *,
    context: ExecutionContext | None = None,
    out: DiagnosticSink | None = None,
) -> TestResult:
    """Execute a (possibly decorated) zero-argument test once through its command chain."""
    command = build_command(fn)
    if context is None:
        context = ExecutionContext(command.test) if out is None else ExecutionContext(command.test, out=out)
    return command.execute(context)
