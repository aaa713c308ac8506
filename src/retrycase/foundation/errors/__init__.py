"""Result states, error classification helpers, and package exceptions."""

from .errors import (
    InvalidCommandError,
    ResultState,
    RetrycaseError,
    StopReason,
    classification_name,
    display_name,
    is_error_classification,
    resolve_classification,
)
from .types import JsonDict

__all__ = [
    "ResultState",
    "StopReason",
    "is_error_classification",
    "classification_name",
    "display_name",
    "resolve_classification",
    "RetrycaseError",
    "InvalidCommandError",
    "JsonDict",
]
