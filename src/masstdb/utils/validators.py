"""
Validation utilities for MasstDB.

Checks a connection specification before any client program is launched.
"""

from ..exceptions import ConfigurationError
from ..models import ConnectionSpec, get_engine_descriptor


def validate_connection_spec(spec: ConnectionSpec) -> None:
    """
    Validate a connection specification.

    Args:
        spec: Connection specification to validate

    Raises:
        ConfigurationError: If the type is missing or unsupported, the
            database is missing, or a network engine has no host
    """
    if not spec.type:
        raise ConfigurationError("database type is required")

    descriptor = get_engine_descriptor(spec.type)
    if descriptor is None:
        raise ConfigurationError(f"unsupported database type: {spec.type}")

    if not spec.database:
        raise ConfigurationError("database name is required")

    if descriptor.requires_host and not spec.host:
        raise ConfigurationError(f"host is required for {spec.type}")
