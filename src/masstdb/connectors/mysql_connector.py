"""
MySQL connector using the mysql client and mysqldump.
"""

from ..models import EngineType
from ..utils.tool_paths import get_tool_path
from .base_connector import BaseConnector

PASSWORD_WARNING = "Using a password on the command line"


class MySQLConnector(BaseConnector):
    """
    Connector for MySQL databases.

    Produces .sql files that are restored by piping them into the mysql client.
    """

    @property
    def database_type(self) -> str:
        return EngineType.MYSQL.value

    def _connection_args(self) -> list[str]:
        args = [
            f"--host={self._spec.host}",
            f"--port={self._spec.resolved_port}",
        ]
        if self._spec.username:
            args.append(f"--user={self._spec.username}")
        if self._spec.password:
            args.append(f"--password={self._spec.password}")
        return args

    def _build_test_command(self) -> list[str]:
        return [get_tool_path("mysql")] + self._connection_args() + [
            "-e", "SELECT 1",
            self._spec.database,
        ]

    def _build_backup_command(self) -> list[str]:
        return [get_tool_path("mysqldump")] + self._connection_args() + [
            "--single-transaction",  # Consistent snapshot for InnoDB
            "--routines",  # Include stored procedures
            "--triggers",  # Include triggers
            "--quick",  # Retrieve rows one at a time
            self._spec.database,
        ]

    def _build_restore_command(self) -> list[str]:
        return [get_tool_path("mysql")] + self._connection_args() + [self._spec.database]

    def _clean_error(self, text: str) -> str:
        """Remove the password warning mysql prints on every run."""
        lines = [line for line in text.split("\n") if PASSWORD_WARNING not in line]
        return " ".join(line.strip() for line in lines if line.strip())
