"""Result states, error classifications, and package exceptions.

An error classification is an exception class. Results report the
classification of the error that ended an attempt by its fully-qualified
name, so matching is an exact string comparison rather than a subclass check.
"""

from __future__ import annotations

import sys
from enum import StrEnum
from functools import lru_cache


class ResultState(StrEnum):
    """Outcome of a single test attempt.

    Only ERROR counts as an error-state failure: the test was ended by an
    uncaught exception rather than by a failed assertion.
    """
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    ERROR = "ERROR"
    SKIPPED = "SKIPPED"
    INCONCLUSIVE = "INCONCLUSIVE"


class StopReason(StrEnum):
    """Why the retry loop stopped making attempts."""
    SUCCESS = "SUCCESS"
    NON_ERROR_FAILURE = "NON_ERROR_FAILURE"
    UNMATCHED_ERROR = "UNMATCHED_ERROR"
    ATTEMPTS_EXHAUSTED = "ATTEMPTS_EXHAUSTED"


def is_error_classification(obj: object) -> bool:
    """Whether obj denotes an error category: Exception itself or a subclass."""
    return isinstance(obj, type) and issubclass(obj, Exception)


@lru_cache(maxsize=256)
def classification_name(cls: type) -> str:
    """Fully-qualified name used to compare a classification with a result."""
    return f"{cls.__module__}.{cls.__qualname__}"


def resolve_classification(name: str) -> type[Exception] | None:
    """Exception class for a qualified name from classification_name, if loaded.

    Only modules already in sys.modules are searched; nothing is imported.
    """
    parts = name.split(".")
    for i in range(len(parts) - 1, 0, -1):
        module = sys.modules.get(".".join(parts[:i]))
        if module is None:
            continue
        obj: object = module
        for attr in parts[i:]:
            obj = getattr(obj, attr, None)
            if obj is None:
                break
        return obj if is_error_classification(obj) else None  # type: ignore[return-value]
    return None


def display_name(obj: object) -> str:
    """Short human-readable name for a configured classification value."""
    return getattr(obj, "__name__", None) or repr(obj)


class RetrycaseError(Exception):
    """Base class for errors raised by retrycase itself."""


class InvalidCommandError(RetrycaseError, TypeError):
    """Raised when an object wrapped as a command has no execute(context)."""

    def __init__(self, obj: object) -> None:
        self.obj = obj
        super().__init__(f"{type(obj).__name__} does not implement execute(context)")
