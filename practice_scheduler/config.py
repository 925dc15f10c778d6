"""Centralized configuration management using Pydantic Settings.

This module provides typed configuration for all application settings,
loaded from environment variables with sensible defaults.

Usage:
    from practice_scheduler.config import get_settings
    settings = get_settings()
    dsn = settings.database.get_dsn()
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from practice_scheduler.errors import ConfigurationError


def _parse_bool(v) -> bool:
    if isinstance(v, str):
        return v.lower() in ("1", "true", "yes")
    return bool(v)


class DatabaseSettings(BaseSettings):
    """PostgreSQL connection configuration."""

    model_config = SettingsConfigDict(
        env_prefix="DB_",
        extra="ignore",
        populate_by_name=True,
    )

    url: str | None = Field(
        default=None,
        validation_alias="DATABASE_URL",
        description="PostgreSQL connection URL",
    )
    pool_min_size: int = Field(default=1, description="Minimum pool size")
    pool_max_size: int = Field(default=10, description="Maximum pool size")
    pool_timeout: float = Field(default=30.0, description="Timeout for acquiring connections")
    pool_max_lifetime: float = Field(
        default=1800.0, description="Maximum connection lifetime in seconds"
    )
    pool_max_idle: float = Field(
        default=300.0, description="Maximum idle time before closing connection"
    )
    run_migrations: bool = Field(default=True, description="Apply pending migrations on startup")

    @field_validator("url", mode="before")
    @classmethod
    def blank_url_is_missing(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("run_migrations", mode="before")
    @classmethod
    def parse_run_migrations(cls, v):
        return _parse_bool(v)

    @property
    def configured(self) -> bool:
        return self.url is not None

    def get_dsn(self) -> str:
        """Return the connection string, failing if none is configured."""
        if self.url is None:
            raise ConfigurationError(
                detail="Server configuration error: DATABASE_URL not configured"
            )
        return self.url


class CorsSettings(BaseSettings):
    """CORS headers attached to every response."""

    model_config = SettingsConfigDict(env_prefix="CORS_", extra="ignore")

    allow_origin: str = Field(default="*")
    allow_methods: str = Field(default="GET, POST, OPTIONS")
    allow_headers: str = Field(default="Content-Type")

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Access-Control-Allow-Origin": self.allow_origin,
            "Access-Control-Allow-Methods": self.allow_methods,
            "Access-Control-Allow-Headers": self.allow_headers,
        }


class DebugSettings(BaseSettings):
    """Debug flags configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    request: bool = Field(default=False, alias="request_debug")

    @field_validator("*", mode="before")
    @classmethod
    def parse_bool(cls, v):
        return _parse_bool(v)


class LoggingSettings(BaseSettings):
    """Root logging configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    level: str = Field(default="INFO", alias="log_level")

    @field_validator("level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        return v.upper()


class ServerSettings(BaseSettings):
    """Uvicorn bind configuration."""

    model_config = SettingsConfigDict(env_prefix="SERVER_", extra="ignore")

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, description="Bind port")


class Settings:
    """Main application settings combining all configuration sections.

    This is not a BaseSettings subclass to avoid env var conflicts.
    Each subsetting is loaded independently with its own prefix.
    """

    def __init__(self) -> None:
        self.database = DatabaseSettings()
        self.cors = CorsSettings()
        self.debug = DebugSettings()
        self.logging = LoggingSettings()
        self.server = ServerSettings()


@lru_cache
def get_settings() -> Settings:
    """Get cached Settings instance (singleton pattern)."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear cached settings (useful for testing)."""
    get_settings.cache_clear()
