"""
Settings - Application configuration using Pydantic Settings.

Loads from ``BOOKNOTES_*`` environment variables and .env files.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class MissingFieldPolicy(str, Enum):
    """What a command reports when the requested field is absent."""

    EMPTY = "empty"  # empty line, exit code 0
    ERROR = "error"  # "Field not found: <label>", non-zero exit code


class Settings(BaseSettings):
    """Application settings."""

    # Documents
    encoding: str = "utf-8"
    check_exists: bool = True

    # Extraction
    missing_field_policy: MissingFieldPolicy = MissingFieldPolicy.EMPTY

    # Logging
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="BOOKNOTES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
