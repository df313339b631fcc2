"""Application configuration models."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables or a .env file."""

    database_url: str = Field(default="sqlite:///./media.db", alias="DATABASE_URL")
    database_echo: bool = Field(default=False, alias="DATABASE_ECHO")

    @field_validator("database_url")
    @classmethod
    def _require_database_url(cls, value: str) -> str:
        """Reject blank database URLs rather than letting SQLAlchemy guess."""

        value = value.strip()
        if not value:
            raise ValueError("DATABASE_URL must not be empty")
        return value

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""

    return Settings()  # type: ignore[call-arg]
