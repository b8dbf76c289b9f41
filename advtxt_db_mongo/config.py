"""Configuration loading for the advtxt MongoDB data store.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Convert to the core StoreConfig consumed by the adapter
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from advtxt_db_mongo.core.models import AdapterType, MongoDBConfig, StoreConfig


class MongoDBSettings(BaseModel):
    """Nested ``mongodb`` section, set via ``MONGODB__*`` variables."""

    uri: str = Field(
        default="mongodb://localhost:27017/advtxt",
        description="Connection string passed verbatim to the driver",
    )
    database: str | None = Field(
        default=None,
        description="Database name; defaults to the one in the URI",
    )
    server_selection_timeout_ms: int = Field(
        default=5000,
        description="How long the driver waits to find a server, in milliseconds",
    )

    @field_validator("uri")
    @classmethod
    def validate_uri(cls, v: str) -> str:
        """Ensure the connection string is not blank."""
        if not v.strip():
            raise ValueError("mongodb.uri must not be empty")
        return v

    @field_validator("server_selection_timeout_ms")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        """Ensure the server selection timeout is positive."""
        if v <= 0:
            raise ValueError("mongodb.server_selection_timeout_ms must be positive")
        return v


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    adapter: AdapterType = Field(
        default=AdapterType.MONGODB,
        description="Data store adapter type",
    )
    mongodb: MongoDBSettings = Field(
        default_factory=MongoDBSettings,
        description="MongoDB connection settings",
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

    def to_store_config(self) -> StoreConfig:
        """Build the core adapter configuration from these settings."""
        return StoreConfig(
            adapter=self.adapter,
            mongodb=MongoDBConfig(
                uri=self.mongodb.uri,
                database=self.mongodb.database,
                server_selection_timeout_ms=self.mongodb.server_selection_timeout_ms,
            ),
        )


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


__all__ = ["MongoDBSettings", "Settings", "load_settings"]
