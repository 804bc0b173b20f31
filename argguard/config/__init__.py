"""
Configuration management for argguard.

Handles environment variables and library settings.

Logging settings and guard settings are separate models; guards read only
GuardSettings.
"""

import logging
from functools import lru_cache

from pydantic import ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from argguard.utils.logging_config import configure_logging

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")

DEFAULT_CAPTURE_EXPRESSIONS = True


class Settings(BaseSettings):
    """Logging settings loaded from environment variables."""

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Root log level applied by setup_logging()"
    )
    LOG_JSON: bool = Field(
        default=True,
        description="Emit structured JSON logs (human-readable format when false)"
    )

    model_config = ConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Normalize and validate the log level name."""
        level = v.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid LOG_LEVEL: {v}. Expected one of: {', '.join(VALID_LOG_LEVELS)}"
            )
        return level


class GuardSettings(BaseSettings):
    """Guard behaviour settings loaded from environment variables."""

    ARGGUARD_CAPTURE_EXPRESSIONS: bool = Field(
        default=DEFAULT_CAPTURE_EXPRESSIONS,
        description="Derive the argument name from the caller's source when none is given"
    )

    model_config = ConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached logging settings.

    Returns:
        Settings: Logging configuration
    """
    return Settings()


@lru_cache()
def get_guard_settings() -> GuardSettings:
    """
    Get cached guard settings.

    Returns:
        GuardSettings: Guard configuration
    """
    return GuardSettings()


def capture_expressions_enabled() -> bool:
    """
    Whether guards derive argument names from the caller's source.

    Never raises: an unparsable ARGGUARD_CAPTURE_EXPRESSIONS falls back to
    the default, so guards keep raising their own error types.

    Returns:
        bool: The configured flag, or the default if it is malformed
    """
    try:
        return get_guard_settings().ARGGUARD_CAPTURE_EXPRESSIONS
    except ValidationError as e:
        logger.warning(
            f"Ignoring invalid guard settings, using capture={DEFAULT_CAPTURE_EXPRESSIONS}: "
            f"{e.error_count()} validation error(s)"
        )
        return DEFAULT_CAPTURE_EXPRESSIONS


def setup_logging() -> logging.Logger:
    """
    Configure root logging from settings.

    Installs a single stdout handler, JSON formatted unless LOG_JSON is false.
    The library never calls this itself; applications opt in.

    Returns:
        logging.Logger: Configured root logger
    """
    settings = get_settings()
    return configure_logging(level=settings.LOG_LEVEL, json_format=settings.LOG_JSON)
