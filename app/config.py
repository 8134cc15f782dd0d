"""
Configuration management for the Asset Catalog API.
Uses pydantic-settings for environment-based configuration.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Settings
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Asset Catalog API"
    DEBUG: bool = False
    CORS_ORIGINS: list[str] = ["*"]

    # Document store selection
    STORE_BACKEND: Literal["file", "memory"] = "file"

    # File store settings
    DATA_FILE: str = "./data.json"

    # Populate sample tags, collections and assets when no document exists
    SEED_SAMPLE_DATA: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.
    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
