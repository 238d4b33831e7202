"""
Application settings and configuration management.

Loads runtime settings from environment variables with sensible defaults.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MASSTDB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="MasstDB")
    log_level: str = Field(default="INFO")

    # Optional config file overriding the default lookup locations
    config_file: Optional[str] = Field(default=None)

    # Directory with bundled client tools (pg_dump, mysqldump, ...)
    tools_bin_path: Optional[str] = Field(default=None)

    # Seconds to wait for a connectivity probe
    connection_test_timeout: int = Field(default=30, ge=1)


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
