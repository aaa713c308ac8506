"""Command protocol for executing a test, and the basic commands.

A command runs one step of a test against an ExecutionContext and returns a
TestResult. Wrappers such as the retry command delegate to an inner command,
so a wrapped command is usable anywhere a plain one is.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Protocol, runtime_checkable

from retrycase.foundation.errors import ResultState

from .result import TestIdentity

if TYPE_CHECKING:
    from .context import ExecutionContext
    from .result import TestResult


@runtime_checkable
class TestCommand(Protocol):
    """Protocol for anything that can execute a test step.

    Example:
        >>> class PassingCommand:
        ...     test = TestIdentity("test_ok")
        ...     def execute(self, context):
        ...         result = context.current_test.make_test_result()
        ...         result.set_result(ResultState.SUCCESS)
        ...         return result
    """

    test: TestIdentity

    def execute(self, context: ExecutionContext) -> TestResult:
        """Run the step and return its result.

        Well-behaved commands convert exceptions into the returned result
        rather than raising them.
        """
        ...


class DelegatingCommand:
    """Base for commands that wrap another command."""

    __slots__ = ("inner",)

    def __init__(self, inner: TestCommand) -> None:
        self.inner = inner

    @property
    def test(self) -> TestIdentity:
        return self.inner.test

    def execute(self, context: ExecutionContext) -> TestResult:
        return self.inner.execute(context)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inner!r})"


class FunctionCommand:
    """Run a zero-argument callable as a test.

    A normal return is SUCCESS. Exceptions are recorded onto the result:
    AssertionError as FAILURE, anything else as ERROR.
    """

    __slots__ = ("fn", "test")

    def __init__(self, fn: Callable[[], object], test: TestIdentity | None = None) -> None:
        self.fn = fn
        self.test = test or TestIdentity.from_callable(fn)

    def execute(self, context: ExecutionContext) -> TestResult:
        result = self.test.make_test_result()
        try:
            self.fn()
        except Exception as e:
            result.record_exception(e)
        else:
            result.set_result(ResultState.SUCCESS)
        return result

    def __repr__(self) -> str:
        return f"FunctionCommand({self.test.full_name!r})"
