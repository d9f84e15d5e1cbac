"""
LifeOS Dashboard — Centralized configuration.

Loads all settings from .env and validates them.
This module is the foundation for every other module in the project.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError, field_validator

# Load .env from project root (two levels up from src/config.py)
_ENV_PATH = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_ENV_PATH)

_BACKENDS = ("sqlite", "memory")


class Settings(BaseModel):
    """Application settings loaded from environment variables."""

    # Storage backend: "sqlite" | "memory"
    STORAGE_BACKEND: str = "sqlite"

    # SQLite (only used when STORAGE_BACKEND=sqlite)
    DATABASE_PATH: str = "data/dashboard.db"

    # Where `main.py export` drops snapshot files
    EXPORT_DIR: str = "exports"

    LOG_LEVEL: str = "INFO"

    @field_validator("STORAGE_BACKEND", mode="before")
    @classmethod
    def parse_backend(cls, v: str) -> str:
        backend = str(v).strip().lower()
        if backend not in _BACKENDS:
            raise ValueError(f"STORAGE_BACKEND must be one of {_BACKENDS}, got {v!r}")
        return backend

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def parse_log_level(cls, v: str) -> str:
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            return "INFO"
        return level


def _load_settings() -> Settings:
    """Load settings from environment."""
    try:
        return Settings(
            STORAGE_BACKEND=os.getenv("STORAGE_BACKEND", "sqlite"),
            DATABASE_PATH=os.getenv("DATABASE_PATH", "data/dashboard.db"),
            EXPORT_DIR=os.getenv("EXPORT_DIR", "exports"),
            LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
        )
    except ValidationError as exc:
        print(f"ERROR: invalid configuration in .env: {exc}", file=sys.stderr)
        sys.exit(1)


# Singleton — imported by all other modules as:
#   from src.config import settings
settings = _load_settings()
