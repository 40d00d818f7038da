"""Application settings loaded from environment variables.

Values come from ``FOLIO_``-prefixed environment variables first, then from
``config/.env.dev`` or ``config/.env`` in the project root.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
ENV_FILES = ("config/.env.dev", "config/.env")


def _find_project_root() -> Path:
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "pyproject.toml").is_file():
            return parent

    return Path.cwd()


def find_env_file(root: Path) -> Optional[Path]:
    """Return the first existing env file below ``root`` (dev before prod)."""
    for name in ENV_FILES:
        path = root / name
        if path.is_file():
            return path
    return None


class Settings(BaseSettings):
    """Application configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority, ``FOLIO_`` prefix)
    2. .env file (config/.env.dev or config/.env)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="FOLIO_",
        env_file=find_env_file(_find_project_root()),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "Folio"
    debug: bool = False

    # Logging
    log_level: str = "INFO"

    # Seed for generated classification colors (unset = non-deterministic)
    color_seed: Optional[int] = None

    @field_validator("log_level", mode="before")
    @classmethod
    def _validate_log_level(cls, v: Any) -> str:
        level = str(v).strip().upper()
        if level not in LOG_LEVELS:
            msg = f"Invalid log level '{v}'. Valid: {', '.join(LOG_LEVELS)}"
            raise ValueError(msg)
        return level

    @property
    def logging_level(self) -> int:
        """Numeric logging level (DEBUG when ``debug`` is enabled)."""
        if self.debug:
            return logging.DEBUG
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
