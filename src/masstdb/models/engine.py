"""
Engine descriptor models.

An engine descriptor identifies a database kind, the port its server listens on
by default and the native client tools used to back it up and restore it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EngineType(str, Enum):
    """Supported database engine types."""

    POSTGRES = "postgres"
    MYSQL = "mysql"
    MONGODB = "mongodb"
    SQLITE = "sqlite"


@dataclass(frozen=True)
class EngineDescriptor:
    """Static facts about a database engine."""

    engine_type: EngineType
    default_port: int
    requires_host: bool
    file_extension: str


ENGINE_DESCRIPTORS: dict[EngineType, EngineDescriptor] = {
    EngineType.POSTGRES: EngineDescriptor(
        engine_type=EngineType.POSTGRES,
        default_port=5432,
        requires_host=True,
        file_extension="sql",
    ),
    EngineType.MYSQL: EngineDescriptor(
        engine_type=EngineType.MYSQL,
        default_port=3306,
        requires_host=True,
        file_extension="sql",
    ),
    EngineType.MONGODB: EngineDescriptor(
        engine_type=EngineType.MONGODB,
        default_port=27017,
        requires_host=True,
        file_extension="archive",
    ),
    EngineType.SQLITE: EngineDescriptor(
        engine_type=EngineType.SQLITE,
        default_port=0,  # file based, no network port
        requires_host=False,
        file_extension="sql",
    ),
}


def get_engine_descriptor(database_type: str) -> Optional[EngineDescriptor]:
    """Return the descriptor for a database type string, or None if unknown."""
    try:
        return ENGINE_DESCRIPTORS[EngineType(database_type)]
    except ValueError:
        return None


def default_port(database_type: str) -> int:
    """
    Get the well-known port for a database type.

    Unknown types map to 0, the same value used by file based engines.
    """
    descriptor = get_engine_descriptor(database_type)
    return descriptor.default_port if descriptor else 0
