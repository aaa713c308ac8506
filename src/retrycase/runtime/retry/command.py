"""Command that re-runs a test when it fails with a retryable error.

Only error-state failures (an uncaught exception) are retried. A passing
attempt, a plain assertion failure, or an error whose type the policy does
not cover ends the run immediately; otherwise attempts continue until the
policy's budget is spent. The result of the last attempt is returned.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from retrycase.foundation.core import DelegatingCommand
from retrycase.foundation.errors import JsonDict, ResultState, StopReason

from .policy import RetryPolicy

if TYPE_CHECKING:
    from retrycase.foundation.core import ExecutionContext, TestCommand, TestResult

logger = logging.getLogger("retrycase.retry")


class RetryOnErrorCommand(DelegatingCommand):
    """Retry the inner command on error-state failures.

    Stores retry bookkeeping in the context for observability:
    retry_attempts, retry_history and retry_stop_reason.

    Args:
        inner: Command running a single attempt
        policy: Attempt budget and retryable error types

    Example:
        >>> policy = RetryPolicy(max_attempts=3, error_types=ConnectionError)
        >>> command = RetryOnErrorCommand(FunctionCommand(flaky_test), policy)
        >>> result = command.execute(ExecutionContext(command.test))
    """

    __slots__ = ("policy", "_warned")

    def __init__(self, inner: TestCommand, policy: RetryPolicy) -> None:
        super().__init__(inner)
        self.policy = policy
        self._warned = False

    def _warn_ignored(self, context: ExecutionContext) -> None:
        """Report configured values that are not exception types, once per command."""
        if self._warned:
            return
        self._warned = True
        for line in self.policy.ignored_warnings():
            context.out.write_line(line)
            logger.debug(f"[{self.test.name}] {line}")

    def _run_attempt(self, context: ExecutionContext) -> TestResult:
        try:
            context.current_result = self.inner.execute(context)
        except Exception as e:
            # Inner commands should record their own exceptions; some don't
            if context.current_result is None:
                context.current_result = context.current_test.make_test_result()
            context.current_result.record_exception(e)
        return context.current_result

    def execute(self, context: ExecutionContext) -> TestResult:
        self._warn_ignored(context)

        history: list[JsonDict] = []
        context["retry_history"] = history
        stop = StopReason.ATTEMPTS_EXHAUSTED
        remaining = self.policy.max_attempts

        while remaining > 0:
            remaining -= 1
            result = self._run_attempt(context)
            history.append({
                "attempt": len(history) + 1,
                "state": result.state.value,
                "error_type": result.error_type,
                "message": result.message,
            })
            context["retry_attempts"] = len(history)

            if result.state is not ResultState.ERROR:
                stop = StopReason.SUCCESS if result.passed else StopReason.NON_ERROR_FAILURE
                break

            if not self.policy.matches(result.error_type):
                stop = StopReason.UNMATCHED_ERROR
                break

            if remaining > 0:
                logger.info(
                    f"[{self.test.name}] Attempt {len(history)}/{self.policy.max_attempts} "
                    f"failed ({result.error_type}), retrying"
                )

        context["retry_stop_reason"] = stop.value
        if stop is StopReason.ATTEMPTS_EXHAUSTED and self.policy.max_attempts > 1:
            logger.info(f"[{self.test.name}] Giving up after {len(history)} attempts")
        return context.current_result  # type: ignore[return-value]
