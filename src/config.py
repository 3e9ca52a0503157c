"""
Rooted Together — Centralized configuration.

Loads all settings from .env (if present) and the process environment.
Every key has a default, so a bare checkout runs without any .env file.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

# Load .env from project root (two levels up from src/config.py)
_ENV_PATH = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_ENV_PATH)


class Settings(BaseModel):
    """Application settings loaded from environment variables."""

    # Logging
    LOG_LEVEL: str = "INFO"

    # Defaults applied to residents created by the house manager
    DEFAULT_RESIDENT_PASSWORD: str = "newuser123"
    DEFAULT_RENT_DUE: float = 150

    # Reject shift days outside Mon..Sun instead of only logging them
    STRICT_DAY_VALIDATION: bool = False

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def parse_log_level(cls, v: str) -> str:
        return (v or "INFO").strip().upper()

    @field_validator("DEFAULT_RENT_DUE", mode="before")
    @classmethod
    def parse_rent(cls, v: str | float) -> float:
        if isinstance(v, str) and not v.strip():
            return 150
        return float(v)

    @field_validator("STRICT_DAY_VALIDATION", mode="before")
    @classmethod
    def parse_bool(cls, v: str | bool) -> bool:
        if isinstance(v, bool):
            return v
        return str(v).strip().lower() in {"1", "true", "yes", "on"}


def _load_settings() -> Settings:
    """Load settings from environment."""
    return Settings(
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
        DEFAULT_RESIDENT_PASSWORD=os.getenv("DEFAULT_RESIDENT_PASSWORD", "newuser123"),
        DEFAULT_RENT_DUE=os.getenv("DEFAULT_RENT_DUE", "150"),
        STRICT_DAY_VALIDATION=os.getenv("STRICT_DAY_VALIDATION", "false"),
    )


# Singleton — imported by all other modules as:
#   from src.config import settings
settings = _load_settings()
