"""
YAML configuration file.

Holds the defaults used by the command line when a flag is not given:
the default database connection, where backups are stored and how they are made.

Example ``.masstdb.yaml``::

    default_database:
      type: postgres
      host: db.internal
      username: backup
    storage:
      local_path: /var/backups/db
    backup:
      compress: true
      default_type: full
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError

from ..exceptions import ConfigurationError
from ..models import BackupType

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".masstdb.yaml"


class DefaultDatabaseConfig(BaseModel):
    """Default database connection settings."""

    type: str = Field(default="")
    host: str = Field(default="localhost")
    port: int = Field(default=0)
    username: str = Field(default="")
    password: str = Field(default="", repr=False)


class CloudStorageConfig(BaseModel):
    """Cloud storage target. Parsed and saved, not used for uploads."""

    provider: str = Field(default="", description="s3, gcs or azure")
    bucket: str = Field(default="")
    region: str = Field(default="")
    access_key: str = Field(default="", repr=False)
    secret_key: str = Field(default="", repr=False)


class StorageConfig(BaseModel):
    """Where backup artifacts are written."""

    local_path: str = Field(default="./backups")
    cloud: CloudStorageConfig = Field(default_factory=CloudStorageConfig)


class BackupDefaults(BaseModel):
    """Default backup behavior."""

    compress: bool = Field(default=True)
    default_type: BackupType = Field(default=BackupType.FULL)


class AppConfig(BaseModel):
    """Contents of the configuration file."""

    default_database: DefaultDatabaseConfig = Field(default_factory=DefaultDatabaseConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    backup: BackupDefaults = Field(default_factory=BackupDefaults)


def load_config(path: Union[str, Path]) -> AppConfig:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        Parsed configuration, or the defaults if the file does not exist

    Raises:
        ConfigurationError: If the file cannot be read or is not valid
    """
    path = Path(path)
    if not path.exists():
        logger.debug(f"Config file {path} not found, using defaults")
        return AppConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"failed to read config file: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"failed to parse config file: {e}") from e

    if data is None:
        return AppConfig()
    if not isinstance(data, dict):
        raise ConfigurationError(f"failed to parse config file: {path} is not a mapping")

    try:
        config = AppConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"invalid config file {path}: {e}") from e

    logger.debug(f"Loaded config from {path}")
    return config


def find_default_config() -> Optional[Path]:
    """Return the first existing config file: current directory first, then home."""
    candidates = [Path.cwd() / CONFIG_FILE_NAME, Path.home() / CONFIG_FILE_NAME]
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def load_default_config() -> AppConfig:
    """Load configuration from the default location, or return defaults."""
    path = find_default_config()
    if path is None:
        return AppConfig()
    return load_config(path)


def save_config(config: AppConfig, path: Union[str, Path]) -> None:
    """
    Save configuration to a YAML file.

    Raises:
        ConfigurationError: If the file cannot be written
    """
    data = config.model_dump(mode="json")
    try:
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
        os.chmod(path, 0o600)  # may contain credentials
    except OSError as e:
        raise ConfigurationError(f"failed to write config file: {e}") from e
