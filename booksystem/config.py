"""
Runtime configuration for booksystem.

Settings are read from environment variables and validated with pydantic.
The domain layer itself never reads configuration; only host-facing
helpers such as logging_config do.
"""

import os
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseModel):
    """
    Validated settings for host applications embedding booksystem.
    """

    log_level: LogLevel = Field(default="INFO", description="Root logging level")
    log_format: str = Field(
        default=DEFAULT_LOG_FORMAT,
        min_length=1,
        description="logging.Formatter format string",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from ``BOOKSYSTEM_*`` environment variables.

        Unset variables fall back to the field defaults.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value.
        """
        values = {}
        log_level = os.getenv("BOOKSYSTEM_LOG_LEVEL")
        if log_level is not None:
            values["log_level"] = log_level
        log_format = os.getenv("BOOKSYSTEM_LOG_FORMAT")
        if log_format is not None:
            values["log_format"] = log_format
        return cls(**values)


# Module-level singleton (initialized lazily)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Provide a singleton Settings instance built from the environment."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
