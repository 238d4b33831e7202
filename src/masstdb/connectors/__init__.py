"""
Connectors for the supported database engines.

Each connector drives the native client tools of its engine.
"""

import logging
from typing import Optional

from ..exceptions import ConfigurationError
from ..models import ConnectionSpec, EngineType
from ..utils.process_runner import ProcessRunner
from ..utils.validators import validate_connection_spec
from .base_connector import BaseConnector
from .mongodb_connector import MongoDBConnector
from .mysql_connector import MySQLConnector
from .postgres_connector import PostgresConnector
from .sqlite_connector import SQLiteConnector

logger = logging.getLogger(__name__)

CONNECTORS: dict[EngineType, type[BaseConnector]] = {
    EngineType.POSTGRES: PostgresConnector,
    EngineType.MYSQL: MySQLConnector,
    EngineType.MONGODB: MongoDBConnector,
    EngineType.SQLITE: SQLiteConnector,
}


def create_connector(
    spec: ConnectionSpec,
    runner: Optional[ProcessRunner] = None,
) -> BaseConnector:
    """
    Get the appropriate connector for a connection specification.

    Args:
        spec: Connection specification; validated here
        runner: Process runner to use, a real one by default

    Returns:
        Connector instance owning a copy of the connection spec with its port resolved

    Raises:
        ConfigurationError: If the connection spec is invalid or the type is not supported
    """
    validate_connection_spec(spec)

    connector_class = CONNECTORS.get(EngineType(spec.type))
    if not connector_class:
        raise ConfigurationError(f"unsupported database type: {spec.type}")

    logger.debug(f"Using {connector_class.__name__} for {spec.type}")
    return connector_class(spec.with_default_port(), runner=runner)


__all__ = [
    "BaseConnector",
    "MongoDBConnector",
    "MySQLConnector",
    "PostgresConnector",
    "SQLiteConnector",
    "CONNECTORS",
    "create_connector",
]
