"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./bookmatch.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key for signing JWT tokens", min_length=1
    )
    access_token_expire_minutes: int = Field(
        default=7 * 24 * 60,
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    frontend_url: str = Field(
        default="http://localhost:5173",
        description="Origin of the web client allowed by CORS",
    )
    app_timezone: str = Field(
        default="UTC",
        description="IANA timezone (or UTC offset) used for stored timestamps",
    )
    log_level: str = Field(default="INFO", description="Root logging level")
    notification_page_size: int = Field(
        default=50,
        description="Maximum number of notifications returned by the listing endpoint",
        gt=0,
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
