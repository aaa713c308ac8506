"""Test identity and per-attempt results.

TestResult is mutable: commands record exceptions onto the
result held in the execution context, the same way a host runner does.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass

from retrycase.foundation.errors import ResultState, classification_name


@dataclass(frozen=True, slots=True)
class TestIdentity:
    """Identity of the test case being executed.

    Example:
        >>> test = TestIdentity("test_login", "tests.auth.test_login")
        >>> test.make_test_result().state
        <ResultState.INCONCLUSIVE: 'INCONCLUSIVE'>
    """

    __test__ = False  # not a pytest test class

    name: str
    full_name: str = ""

    def __post_init__(self) -> None:
        if not self.full_name:
            object.__setattr__(self, "full_name", self.name)

    @classmethod
    def from_callable(cls, fn: object) -> TestIdentity:
        name = getattr(fn, "__name__", None) or type(fn).__name__
        module = getattr(fn, "__module__", None)
        qualname = getattr(fn, "__qualname__", name)
        return cls(name=name, full_name=f"{module}.{qualname}" if module else qualname)

    def make_test_result(self) -> TestResult:
        """Fresh result for this test, not yet run."""
        return TestResult(test=self)


@dataclass(slots=True)
class TestResult:
    """Result of one attempt at running a test.

    Attributes:
        test: Identity of the test the result belongs to
        state: Outcome of the attempt
        message: Failure or error message, empty on success
        error_type: Fully-qualified name of the exception class that caused an
            ERROR, None otherwise
        stack_trace: Formatted traceback of the recorded exception
    """

    __test__ = False

    test: TestIdentity
    state: ResultState = ResultState.INCONCLUSIVE
    message: str = ""
    error_type: str | None = None
    stack_trace: str | None = None

    @property
    def passed(self) -> bool:
        return self.state is ResultState.SUCCESS

    @property
    def is_error(self) -> bool:
        """Whether the attempt ended in an error-state failure."""
        return self.state is ResultState.ERROR

    def set_result(self, state: ResultState, message: str = "") -> None:
        self.state = state
        self.message = message
        if state is not ResultState.ERROR:
            self.error_type = None
        if state not in (ResultState.ERROR, ResultState.FAILURE):
            self.stack_trace = None

    def record_exception(self, exc: BaseException) -> None:
        """Record an exception that ended the attempt.

        AssertionError is a plain test failure; any other exception is an
        error-state failure whose classification is the exception's type.
        """
        self.stack_trace = "".join(traceback.format_exception(exc))
        if isinstance(exc, AssertionError):
            self.state = ResultState.FAILURE
            self.message = str(exc)
            self.error_type = None
            return
        self.state = ResultState.ERROR
        self.message = f"{classification_name(type(exc))} : {exc}"
        self.error_type = classification_name(type(exc))
