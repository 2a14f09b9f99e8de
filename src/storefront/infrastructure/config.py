"""Application configuration — environment-driven settings via pydantic-settings.

Every setting can be overridden with a ``STOREFRONT_``-prefixed
environment variable or a ``.env`` file in the working directory.
``get_settings()`` is cached, so there is one instance per process.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Storefront settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_", env_file=".env", case_sensitive=False
    )

    # Database
    database_url: str = "sqlite:///storefront.db"
    database_echo: bool = False

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting providers hand out postgresql:// but we drive psycopg2 explicitly."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+psycopg2://", 1)
        return v

    # Orders
    strict_status_transitions: bool = False

    # Observability
    log_level: str = "WARNING"
    log_format: str = "text"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        if v not in ("text", "json"):
            raise ValueError("log_format must be 'text' or 'json'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
