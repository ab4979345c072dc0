"""Configuration loading for staffsync.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Database configuration
    store_backend: Literal["sqlite", "postgresql"] = Field(
        default="sqlite",
        description="Database backend type",
    )
    store_sqlite_path: str = Field(
        default="./data/staffsync.db",
        description="SQLite database file path",
    )
    database_url: str = Field(
        default="",
        description="PostgreSQL connection URL",
    )

    # Bus configuration
    bus_backend: Literal["stdout", "http"] = Field(
        default="stdout",
        description="Bus transport for email changed messages",
    )
    bus_http_url: str = Field(
        default="",
        description="Endpoint receiving bus messages when bus_backend is http",
    )
    bus_http_token: str = Field(
        default="",
        description="Bearer token for the HTTP bus endpoint",
    )
    bus_http_timeout_seconds: float = Field(
        default=10.0,
        description="Request timeout for the HTTP bus in seconds",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging",
    )

    @field_validator("bus_http_timeout_seconds")
    @classmethod
    def validate_bus_timeout(cls, v: float) -> float:
        """Ensure the HTTP bus timeout is positive."""
        if v <= 0:
            raise ValueError("bus_http_timeout_seconds must be positive")
        return v

    @model_validator(mode="after")
    def validate_http_bus_url(self) -> "Settings":
        """An HTTP bus needs somewhere to send messages."""
        if self.bus_backend == "http" and not self.bus_http_url:
            raise ValueError("bus_http_url is required when bus_backend is http")
        return self


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
