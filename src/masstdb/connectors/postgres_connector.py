"""
PostgreSQL connector using psql and pg_dump.

Produces plain SQL dumps that are restored by piping them into psql.
"""

import os

from ..models import EngineType
from ..utils.tool_paths import get_tool_path
from .base_connector import BaseConnector


class PostgresConnector(BaseConnector):
    """Connector for PostgreSQL databases."""

    @property
    def database_type(self) -> str:
        return EngineType.POSTGRES.value

    def _connection_args(self) -> list[str]:
        args = [
            f"--host={self._spec.host}",
            f"--port={self._spec.resolved_port}",
        ]
        if self._spec.username:
            args.append(f"--username={self._spec.username}")
        args.extend([
            f"--dbname={self._spec.database}",
            "--no-password",  # Never prompt; password comes from PGPASSWORD
        ])
        return args

    def _build_test_command(self) -> list[str]:
        return [get_tool_path("psql")] + self._connection_args() + ["-c", "SELECT 1"]

    def _build_backup_command(self) -> list[str]:
        return [get_tool_path("pg_dump")] + self._connection_args() + [
            "--format=plain",  # Plain text SQL
        ]

    def _build_restore_command(self) -> list[str]:
        return [get_tool_path("psql")] + self._connection_args() + [
            "--set=ON_ERROR_STOP=1",  # Exit non-zero on the first failing statement
        ]

    def _build_env(self) -> dict:
        # Set password via environment variable (not visible in process listings)
        env = os.environ.copy()
        if self._spec.password:
            env["PGPASSWORD"] = self._spec.password
        return env
