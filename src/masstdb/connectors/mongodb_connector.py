"""
MongoDB connector using mongosh, mongodump and mongorestore.

Dumps use the archive format so the whole database travels as a single byte
stream through stdout and stdin.
"""

import logging

from ..exceptions import DatabaseConnectionError, ToolNotFoundError
from ..models import EngineType
from ..utils.tool_paths import get_tool_path
from .base_connector import BaseConnector

logger = logging.getLogger(__name__)

AUTH_DATABASE = "admin"
PING_SCRIPT = "db.runCommand({ ping: 1 })"


class MongoDBConnector(BaseConnector):
    """Connector for MongoDB databases."""

    @property
    def database_type(self) -> str:
        return EngineType.MONGODB.value

    def _connection_args(self) -> list[str]:
        args = [
            "--host", self._spec.host,
            "--port", str(self._spec.resolved_port),
            "--db", self._spec.database,
            "--archive",  # Stream through stdout/stdin
        ]
        if self._spec.username:
            args.extend([
                "--username", self._spec.username,
                "--password", self._spec.password,
                "--authenticationDatabase", AUTH_DATABASE,
            ])
        return args

    def _connection_uri(self) -> str:
        uri = self._spec.connection_string()
        if self._spec.username:
            uri = f"{uri}?authSource={AUTH_DATABASE}"
        return uri

    def _build_test_command(self, shell: str = "mongosh") -> list[str]:
        return [get_tool_path(shell), self._connection_uri(), "--eval", PING_SCRIPT]

    def _build_backup_command(self) -> list[str]:
        return [get_tool_path("mongodump")] + self._connection_args()

    def _build_restore_command(self) -> list[str]:
        return [get_tool_path("mongorestore")] + self._connection_args()

    def test_connection(self) -> None:
        """
        Ping the server with mongosh, falling back to the legacy mongo shell.

        Raises:
            DatabaseConnectionError: If neither shell can ping the server
            ToolNotFoundError: If neither shell is installed
        """
        logger.info(f"Testing mongodb connection to {self._describe_target()}")
        mongosh_result = None
        try:
            mongosh_result = self._run_probe(self._build_test_command("mongosh"))
            if mongosh_result.succeeded:
                return
            logger.debug(
                f"mongosh ping failed, trying legacy mongo shell: {mongosh_result.error_text()}"
            )
        except ToolNotFoundError:
            logger.debug("mongosh not found, trying legacy mongo shell")

        try:
            result = self._run_probe(self._build_test_command("mongo"))
        except ToolNotFoundError:
            if mongosh_result is None:
                raise
            # mongosh ran and failed; its output is the real diagnosis
            result = mongosh_result

        if not result.succeeded:
            output = result.error_text()
            raise DatabaseConnectionError(
                self.database_type,
                f"connection failed: exit status {result.returncode} - {output}",
                output=output,
            )
