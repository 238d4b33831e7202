"""
SQLite connector using the sqlite3 command line shell.

The "connection" is the database file on local storage. Backups are the
textual SQL script produced by ``.dump``; restores replay that script, creating
the file if it does not exist yet.
"""

import logging
import os

from ..exceptions import DatabaseConnectionError
from ..models import EngineType
from ..utils.tool_paths import get_tool_path
from .base_connector import BaseConnector

logger = logging.getLogger(__name__)


class SQLiteConnector(BaseConnector):
    """Connector for SQLite database files."""

    @property
    def database_type(self) -> str:
        return EngineType.SQLITE.value

    @property
    def database_path(self) -> str:
        return self._spec.database

    def _build_test_command(self) -> list[str]:
        return [get_tool_path("sqlite3"), self.database_path, "SELECT 1"]

    def _build_backup_command(self) -> list[str]:
        return [get_tool_path("sqlite3"), self.database_path, ".dump"]

    def _build_restore_command(self) -> list[str]:
        return [get_tool_path("sqlite3"), self.database_path]

    def test_connection(self) -> None:
        """
        Check the database file exists and can be opened by sqlite3.

        Raises:
            DatabaseConnectionError: If the file is missing, is a directory,
                is not accessible or cannot be opened
        """
        path = self.database_path
        if not os.path.exists(path):
            raise DatabaseConnectionError(
                self.database_type, f"database file does not exist: {path}"
            )
        if os.path.isdir(path):
            raise DatabaseConnectionError(
                self.database_type, f"path is a directory, not a database file: {path}"
            )
        if not os.access(path, os.R_OK):
            raise DatabaseConnectionError(
                self.database_type, f"cannot access database file: {path}"
            )

        super().test_connection()

    def _describe_target(self) -> str:
        return f"file {self.database_path}"
