"""Configuration management for the B2BI transformer resource provider.

Settings are loaded from environment variables (and an optional .env
file) with defaults suitable for local development.
"""

from typing import Optional
from pydantic import Field, AliasChoices
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Provider settings loaded from environment variables."""

    aws_region: str = Field(
        default="us-east-1",
        description="AWS region of the B2BI endpoint",
        validation_alias=AliasChoices("AWS_REGION", "AWS_DEFAULT_REGION")
    )
    b2bi_endpoint_url: Optional[str] = Field(
        default=None,
        description="Override for the B2BI endpoint URL (e.g., a local stub)",
        validation_alias="B2BI_ENDPOINT_URL"
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        validation_alias="LOG_LEVEL"
    )
    environment: str = Field(
        default="development",
        description="Environment name (development, staging, production)",
        validation_alias=AliasChoices("ENVIRONMENT", "ENV")
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


def get_settings() -> Settings:
    """
    Get provider settings.

    Returns:
        A fresh Settings instance read from the environment
    """
    return Settings()


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def settings() -> Settings:
    """Get the cached global settings instance, creating it on first call."""
    global _settings
    if _settings is None:
        _settings = get_settings()
    return _settings
