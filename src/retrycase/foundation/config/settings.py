"""Environment-based configuration using pydantic-settings.

Example:
    >>> from retrycase.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.retry.default_max_attempts
    3
    >>> settings.logging.level
    'INFO'

    # Or with environment variables:
    # RETRYCASE_RETRY_DEFAULT_MAX_ATTEMPTS=5
    # RETRYCASE_RETRY_EMPTY_FILTER=none
    # RETRYCASE_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# What a policy does when every configured error type was ignored as invalid:
# "any" retries on any error, "none" retries on no error.
EmptyFilter = Literal["any", "none"]


class RetrySettings(BaseSettings):
    """Default retry configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RETRYCASE_RETRY_",
        extra="ignore",
    )

    default_max_attempts: Annotated[int, Field(ge=1, le=100)] = 3
    empty_filter: EmptyFilter = Field(
        default="any",
        description="Behavior when all configured error types are invalid",
    )

    @field_validator("empty_filter", mode="before")
    @classmethod
    def _normalize_filter(cls, v: str) -> str:
        return v.lower() if isinstance(v, str) else v


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RETRYCASE_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "text"] = "text"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class RetrycaseSettings(BaseSettings):
    """Root settings for retrycase.

    Example environment variables:
        RETRYCASE_RETRY_DEFAULT_MAX_ATTEMPTS=5
        RETRYCASE_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="RETRYCASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    retry: RetrySettings = Field(default_factory=RetrySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> RetrycaseSettings:
    """Get the global settings instance (cached)."""
    return RetrycaseSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
