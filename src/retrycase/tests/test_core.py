"""Tests for the host execution contract: identity, results, context, commands."""

from __future__ import annotations

from retrycase.foundation.core import (
    DelegatingCommand,
    ExecutionContext,
    FunctionCommand,
    TestIdentity,
    TestResult,
)
from retrycase.foundation.errors import ResultState, classification_name, is_error_classification
from retrycase.foundation.testing import MockCommand
from retrycase.runtime.observability import LoggingSink


class Outer:
    class NestedError(Exception):
        pass


# ═════════════════════════════════════════════════════════════════════════════
# Classification
# ═════════════════════════════════════════════════════════════════════════════


def test_is_error_classification() -> None:
    assert is_error_classification(Exception)
    assert is_error_classification(ValueError)
    assert is_error_classification(Outer.NestedError)
    assert not is_error_classification(BaseException)
    assert not is_error_classification(KeyboardInterrupt)
    assert not is_error_classification(str)
    assert not is_error_classification(ValueError("instance"))
    assert not is_error_classification("ValueError")


def test_classification_name_is_fully_qualified() -> None:
    assert classification_name(ValueError) == "builtins.ValueError"
    assert classification_name(Outer.NestedError) == f"{__name__}.Outer.NestedError"


# ═════════════════════════════════════════════════════════════════════════════
# TestIdentity & TestResult
# ═════════════════════════════════════════════════════════════════════════════


def test_identity_full_name_defaults_to_name() -> None:
    assert TestIdentity("test_a").full_name == "test_a"
    assert TestIdentity("test_a", "pkg.test_a").full_name == "pkg.test_a"


def test_identity_from_callable() -> None:
    def test_sample() -> None: ...

    test = TestIdentity.from_callable(test_sample)
    assert test.name == "test_sample"
    assert test.full_name.startswith(__name__)
    assert test.full_name.endswith("test_sample")


def test_make_test_result_is_fresh() -> None:
    test = TestIdentity("test_a")
    first, second = test.make_test_result(), test.make_test_result()
    assert first is not second
    assert first.test is test
    assert first.state is ResultState.INCONCLUSIVE


def test_record_exception_marks_error() -> None:
    result = TestResult(TestIdentity("test_a"))
    try:
        raise Outer.NestedError("boom")
    except Exception as e:
        result.record_exception(e)

    assert result.is_error
    assert not result.passed
    assert result.error_type == classification_name(Outer.NestedError)
    assert "boom" in result.message
    assert "NestedError" in result.stack_trace


def test_record_assertion_error_marks_failure() -> None:
    result = TestResult(TestIdentity("test_a"))
    result.record_exception(AssertionError("expected 1"))

    assert result.state is ResultState.FAILURE
    assert result.error_type is None
    assert result.message == "expected 1"


def test_set_result_clears_error_type() -> None:
    result = TestResult(TestIdentity("test_a"))
    result.record_exception(ValueError("x"))
    result.set_result(ResultState.SUCCESS)

    assert result.passed
    assert result.error_type is None
    assert result.stack_trace is None


def test_set_result_failure_keeps_stack_trace() -> None:
    result = TestResult(TestIdentity("test_a"))
    result.record_exception(ValueError("x"))
    result.set_result(ResultState.FAILURE, "retried and failed")

    assert result.error_type is None
    assert result.stack_trace is not None


def test_sinks_live_in_foundation() -> None:
    """The observability package re-exports the foundation sinks."""
    from retrycase.foundation.core import sinks
    from retrycase.runtime import observability

    assert observability.LoggingSink is sinks.LoggingSink
    assert observability.BufferSink is sinks.BufferSink


# ═════════════════════════════════════════════════════════════════════════════
# ExecutionContext
# ═════════════════════════════════════════════════════════════════════════════


def test_context_item_access() -> None:
    ctx = ExecutionContext(TestIdentity("test_a"))
    ctx["request_id"] = "abc123"

    assert "request_id" in ctx
    assert ctx["request_id"] == "abc123"
    assert ctx.get("missing", 5) == 5
    assert ctx.current_result is None
    assert isinstance(ctx.out, LoggingSink)


# ═════════════════════════════════════════════════════════════════════════════
# Commands
# ═════════════════════════════════════════════════════════════════════════════


def test_function_command_success() -> None:
    def test_ok() -> None: ...

    command = FunctionCommand(test_ok)
    result = command.execute(ExecutionContext(command.test))
    assert result.passed
    assert result.test.name == "test_ok"


def test_function_command_records_error() -> None:
    def test_err() -> None:
        raise KeyError("missing")

    command = FunctionCommand(test_err)
    result = command.execute(ExecutionContext(command.test))
    assert result.is_error
    assert result.error_type == "builtins.KeyError"


def test_function_command_records_failure() -> None:
    def test_fail() -> None:
        raise AssertionError("nope")

    command = FunctionCommand(test_fail, TestIdentity("custom"))
    result = command.execute(ExecutionContext(command.test))
    assert result.state is ResultState.FAILURE
    assert result.test.name == "custom"


def test_delegating_command_passes_through() -> None:
    mock = MockCommand(["fail"])
    command = DelegatingCommand(mock)

    assert command.test is mock.test
    result = command.execute(ExecutionContext(command.test))
    assert result.state is ResultState.FAILURE
    mock.assert_called_times(1)
