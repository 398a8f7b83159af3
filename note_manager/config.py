"""Settings loaded from environment variables (``NOTES_*``) or ``.env``."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_NOTES_PATH = Path.home() / ".notes" / "notes.json"

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="NOTES_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Storage
    notes_path: Path = DEFAULT_NOTES_PATH

    # Logging
    log_level: LogLevel = "WARNING"

    # MCP server
    mcp_host: str = "127.0.0.1"
    mcp_port: int = 8001

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


def get_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings()


def configure_logging(level: str) -> None:
    """Send log records to stderr using the project format."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
