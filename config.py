"""
Configuration settings for the dot point tracker.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DOTPOINTS_",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Storage
    # ========================================
    data_file: Path = Field(
        default=Path.home() / ".dotpoints" / "tracker.json",
        description="JSON snapshot holding subjects and dot points",
    )

    # ========================================
    # Defaults
    # ========================================
    default_subject_count: int = Field(
        default=6,
        ge=0,
        description="Number of placeholder subjects created on first run",
    )
    default_subject_name: str = Field(
        default="Subject",
        description="Label used when a subject is renamed to an empty string",
    )

    # ========================================
    # Recommendations
    # ========================================
    suggestion_count: int = Field(
        default=3,
        ge=0,
        description="Dot points suggested for today's focus",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging verbosity level",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (None for stderr only)",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
