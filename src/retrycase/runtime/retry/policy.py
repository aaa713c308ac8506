"""Retry policy configuration for a single test case.

Holds how many attempts a test gets and which error types qualify for
another attempt. Configured values that are not exception classes are
split off into ignored_types when the policy is built; they never make
construction fail.

Optimizations:
- Frozen for immutability and hashability
- Validation done once at construction
- Pre-computed classification names for matching
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    field_serializer,
    field_validator,
    model_validator,
)

from retrycase.foundation.config import EmptyFilter, get_settings
from retrycase.foundation.errors import (
    classification_name,
    display_name,
    is_error_classification,
    resolve_classification,
)


def _dedupe(values: list[Any]) -> list[Any]:
    """Drop repeated values, keeping first-seen order."""
    seen: list[Any] = []
    for v in values:
        if not any(v is s or v == s for s in seen):
            seen.append(v)
    return seen


class RetryPolicy(BaseModel):
    """Retry configuration for one test case.

    Attributes:
        max_attempts: Total attempts including the first (minimum 1)
        error_types: Exception classes that trigger a retry, or None to
            retry on any error
        ignored_types: Configured values rejected because they are not
            exception classes
        empty_filter: What to do when error types were configured but all of
            them were ignored: "any" retries on any error, "none" on none

    Example:
        >>> policy = RetryPolicy(max_attempts=3, error_types=[ConnectionError, TimeoutError])
        >>> policy.matches("builtins.TimeoutError")
        True
        >>> RetryPolicy(max_attempts=2, error_types="oops").ignored_types
        ('oops',)
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
        extra="forbid",
        revalidate_instances="never",
        json_schema_extra={
            "title": "Retry Policy",
            "description": "Attempt budget and retryable error types for a test",
            "examples": [{"max_attempts": 3, "error_types": ["builtins.ConnectionError"]}],
        },
    )

    max_attempts: Annotated[int, Field(ge=1)] = 3
    error_types: tuple[type[Exception], ...] | None = None
    ignored_types: tuple[Any, ...] = Field(default=(), repr=False)
    empty_filter: EmptyFilter = "any"

    # Qualified names of error_types for matching (computed once)
    _names: frozenset[str] = frozenset()

    @model_validator(mode="before")
    @classmethod
    def _split_error_types(cls, data: Any) -> Any:
        """Normalize error_types and move invalid entries to ignored_types.

        Qualified names, as produced by model_dump, are resolved back to their
        classes so a dumped policy validates to an equal one.
        """
        if not isinstance(data, dict):
            return data
        data = {k: v for k, v in data.items() if k != "is_filtered"}
        raw = data.get("error_types")
        if raw is None:
            return data
        values = list(raw) if isinstance(raw, (list, tuple, set, frozenset)) else [raw]
        values = _dedupe([
            (resolve_classification(v) or v) if isinstance(v, str) else v for v in values
        ])
        return {
            **data,
            "error_types": tuple(v for v in values if is_error_classification(v)),
            "ignored_types": (
                *data.get("ignored_types", ()),
                *(v for v in values if not is_error_classification(v)),
            ),
        }

    @field_validator("ignored_types", mode="before")
    @classmethod
    def _tupleize(cls, v: Any) -> tuple[Any, ...]:
        return tuple(v)

    @field_serializer("error_types")
    def _serialize_types(self, v: tuple[type[Exception], ...] | None) -> list[str] | None:
        """Serialize error types as qualified names."""
        return None if v is None else [classification_name(t) for t in v]

    @field_serializer("ignored_types")
    def _serialize_ignored(self, v: tuple[Any, ...]) -> list[str]:
        return [t if isinstance(t, str) else display_name(t) for t in v]

    def model_post_init(self, __context: Any) -> None:
        self._names = frozenset(classification_name(t) for t in self.error_types or ())

    @classmethod
    def from_settings(
        cls,
        error_types: type[Exception] | list[Any] | tuple[Any, ...] | None = None,
        max_attempts: int | None = None,
    ) -> RetryPolicy:
        """Build a policy, filling unset values from RetrySettings."""
        settings = get_settings().retry
        return cls(
            max_attempts=max_attempts if max_attempts is not None else settings.default_max_attempts,
            error_types=error_types,
            empty_filter=settings.empty_filter,
        )

    @computed_field
    @property
    def is_filtered(self) -> bool:
        """Whether retries are restricted to specific error types.

        False when no error types were configured, or when all configured
        types were ignored and empty_filter is "any".
        """
        if self.error_types is None:
            return False
        if not self.error_types and self.ignored_types:
            return self.empty_filter == "none"
        return True

    def matches(self, error_type: str | None) -> bool:
        """Whether a reported error classification is one this policy retries.

        Exact match on the fully-qualified class name; subclasses of a
        configured type do not match.
        """
        if not self.is_filtered:
            return True
        return error_type is not None and error_type in self._names

    def ignored_warnings(self) -> list[str]:
        """Warning lines for each configured value that is not an exception type."""
        return [
            f"WARNING: The type {display_name(t)} specified in the retry configuration "
            "is not an exception type and is being ignored."
            for t in self.ignored_types
        ]

    def __hash__(self) -> int:
        """Hash for frozen model."""
        return hash((self.max_attempts, self.error_types, self.empty_filter))
