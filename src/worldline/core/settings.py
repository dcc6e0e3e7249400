"""Centralized configuration using Pydantic Settings (v2).

This module exposes a single, cached `settings` instance that reads from:
- Real environment variables (highest precedence)
- `.env` files in the working directory: .env, .env.local

Variables
---------
WORLDLINE_FILE
    Path of the worldline text file. Used for both reading and writing.
WORLDLINE_DISPLAY
    ``colored`` (default) or ``plain`` terminal output.
LOG_LEVEL
    Standard logging level name for :func:`get_logger`, in any case.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DisplayName = Literal["colored", "plain"]
LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Typed application configuration loaded from env and `.env` files.

    Attributes
    ----------
    worldline_file : Path | None
        Location of the event log; maps from `WORLDLINE_FILE`.
    display : DisplayName
        Terminal presentation mode; maps from `WORLDLINE_DISPLAY`.
    log_level : LogLevelName
        Global log level string; maps from `LOG_LEVEL`.
    """

    worldline_file: Path | None = Field(default=None, alias="WORLDLINE_FILE")
    display: DisplayName = Field(default="colored", alias="WORLDLINE_DISPLAY")
    log_level: LogLevelName = Field(default="WARNING", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value

    @property
    def colored(self) -> bool:
        """Return True if display output should carry colour styling."""
        return self.display == "colored"

    def log_level_numeric(self) -> int:
        """Return the numeric logging level corresponding to `self.log_level`."""
        return getattr(logging, self.log_level, logging.WARNING)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Create and cache a `Settings` instance.

    Tests force a rebuild via `load_settings.cache_clear()` after mutating
    `os.environ`.
    """
    return Settings()


settings: Settings = load_settings()


def get_logger(name: str = "worldline") -> logging.Logger:
    """Return a process-global logger configured to the current `LOG_LEVEL`."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(load_settings().log_level_numeric())
    logger.propagate = False
    return logger


__all__ = ["Settings", "get_logger", "load_settings", "settings"]
