"""Configuration module for MasstDB."""

from .settings import Settings, get_settings
from .app_config import (
    AppConfig,
    BackupDefaults,
    CloudStorageConfig,
    DefaultDatabaseConfig,
    StorageConfig,
    load_config,
    load_default_config,
    save_config,
)

__all__ = [
    "Settings",
    "get_settings",
    "AppConfig",
    "BackupDefaults",
    "CloudStorageConfig",
    "DefaultDatabaseConfig",
    "StorageConfig",
    "load_config",
    "load_default_config",
    "save_config",
]
