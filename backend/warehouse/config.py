"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default: the demo runs with no environment at all
    - get_settings() is cached (lru_cache): one instance per process

Design Decisions:
    - pydantic-settings reads WAREHOUSE_* variables and an optional .env file
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WAREHOUSE_", env_file=".env", case_sensitive=False,
    )

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "text"

    # Demo
    seed_on_startup: bool = True

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in _LOG_LEVELS:
            raise ValueError(f"unknown log level: {v}")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
