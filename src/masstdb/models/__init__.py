"""Data models for MasstDB."""

from .engine import (
    ENGINE_DESCRIPTORS,
    EngineDescriptor,
    EngineType,
    default_port,
    get_engine_descriptor,
)
from .connection import ConnectionSpec
from .backup import BackupFileInfo, BackupOptions, BackupResult, BackupType, RestoreOptions

__all__ = [
    # Engine
    "ENGINE_DESCRIPTORS",
    "EngineDescriptor",
    "EngineType",
    "default_port",
    "get_engine_descriptor",
    # Connection
    "ConnectionSpec",
    # Backup
    "BackupFileInfo",
    "BackupOptions",
    "BackupResult",
    "BackupType",
    "RestoreOptions",
]
