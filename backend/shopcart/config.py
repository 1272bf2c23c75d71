"""Configuration management using Pydantic Settings."""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_MONGODB_URI = "mongodb://localhost:27017/shoppingcart"


class Settings(BaseSettings):
    """Main configuration class."""

    # Database
    mongodb_uri: str = Field(
        default=DEFAULT_MONGODB_URI,
        description="MongoDB connection string (scheme, host, port, database)",
    )
    mongodb_database: str = Field(
        default="shoppingcart",
        description="Database used when the URI does not name one",
    )
    server_selection_timeout_ms: int = Field(
        default=30000,
        description="Driver server selection timeout in milliseconds",
    )

    # Logging
    log_level: str = "INFO"

    # Observability
    logfire_token: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("mongodb_uri")
    @classmethod
    def validate_mongodb_uri(cls, v: str) -> str:
        """Validate that the connection string is provided."""
        if not v.strip():
            raise ValueError("MongoDB URI cannot be empty")
        return v.strip()

    @field_validator("server_selection_timeout_ms")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("server_selection_timeout_ms must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
