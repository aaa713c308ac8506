"""Shared fixtures."""

import logging

import pytest

from retrycase.foundation.config import clear_settings_cache
from retrycase.runtime.observability import reset_logging


@pytest.fixture(autouse=True)
def clean_settings() -> object:
    """Reload settings from the environment for each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def clean_logging() -> object:
    """Undo configure_logging between tests."""
    yield
    reset_logging()
    logging.getLogger("retrycase").setLevel(logging.NOTSET)
