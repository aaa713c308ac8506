"""Testing helpers for commands and wrappers."""

from .mock import Invocation, MockCommand, Step

__all__ = ["Invocation", "MockCommand", "Step"]
