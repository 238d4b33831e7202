"""
Base connector defining the interface for all database connectors.

A connector speaks to one database engine through its native client tools.
It holds no session: every operation launches a fresh external process.
"""

import logging
import os
import subprocess
import zlib
from abc import ABC, abstractmethod
from typing import BinaryIO, Optional

from ..config import get_settings
from ..exceptions import (
    BackupExecutionError,
    DatabaseConnectionError,
    RestoreExecutionError,
)
from ..models import ConnectionSpec, get_engine_descriptor
from ..utils.process_runner import ProcessResult, ProcessRunner

logger = logging.getLogger(__name__)


class BaseConnector(ABC):
    """
    Abstract base class for database connectors.

    Subclasses provide the command lines; this class runs them and turns
    failures into the connector error taxonomy.
    """

    def __init__(self, spec: ConnectionSpec, runner: Optional[ProcessRunner] = None):
        self._spec = spec
        self._runner = runner or ProcessRunner()

    @property
    @abstractmethod
    def database_type(self) -> str:
        """Return the database type this connector handles."""
        pass

    @property
    def file_extension(self) -> str:
        """Return the file extension for backups of this engine."""
        return get_engine_descriptor(self.database_type).file_extension

    @property
    def spec(self) -> ConnectionSpec:
        return self._spec

    def supports_incremental(self) -> bool:
        """Whether incremental or differential backups are supported."""
        return False

    def supports_selective_restore(self) -> bool:
        """Whether a restore can be limited to a list of tables."""
        return False

    @abstractmethod
    def _build_test_command(self) -> list[str]:
        """Command running the smallest possible round trip."""
        pass

    @abstractmethod
    def _build_backup_command(self) -> list[str]:
        """Command writing the dump to standard output."""
        pass

    @abstractmethod
    def _build_restore_command(self) -> list[str]:
        """Command reading the dump from standard input."""
        pass

    def _build_env(self) -> Optional[dict]:
        """Environment for the child process, None to inherit ours."""
        return None

    def _clean_error(self, text: str) -> str:
        """Strip tool noise from error output."""
        return text

    def test_connection(self) -> None:
        """
        Test database connectivity.

        Raises:
            DatabaseConnectionError: If the probe exits non-zero or times out
            ToolNotFoundError: If the client program is not installed
        """
        cmd = self._build_test_command()
        logger.info(f"Testing {self.database_type} connection to {self._describe_target()}")
        result = self._run_probe(cmd)
        if not result.succeeded:
            output = self._clean_error(result.error_text())
            raise DatabaseConnectionError(
                self.database_type,
                f"connection failed: exit status {result.returncode} - {output}",
                output=output,
            )

    def _run_probe(self, cmd: list[str]) -> ProcessResult:
        timeout = get_settings().connection_test_timeout
        try:
            return self._runner.run(cmd, env=self._build_env(), timeout=timeout)
        except subprocess.TimeoutExpired as e:
            raise DatabaseConnectionError(
                self.database_type,
                f"connection timed out after {timeout} seconds",
            ) from e

    def backup(self, sink: BinaryIO) -> None:
        """
        Dump the database into ``sink``.

        Raises:
            BackupExecutionError: If the dump tool fails or streaming breaks
            ToolNotFoundError: If the dump tool is not installed
        """
        cmd = self._build_backup_command()
        tool = os.path.basename(cmd[0])
        logger.info(f"Executing {tool} for database: {self._spec.database}")

        try:
            result = self._runner.stream_to(cmd, sink, env=self._build_env())
        except (OSError, zlib.error) as e:
            raise BackupExecutionError(
                self._spec.database, f"streaming {tool} output failed: {e}"
            ) from e

        if not result.succeeded:
            error_msg = self._clean_error(result.error_text())
            logger.error(f"{tool} failed: {error_msg}")
            raise BackupExecutionError(
                self._spec.database,
                f"{tool} failed: exit status {result.returncode}",
                details=error_msg,
            )

        if result.stderr:
            logger.debug(f"{tool} output: {result.error_text()}")

    def restore(self, source: BinaryIO) -> None:
        """
        Restore the database from ``source``.

        Raises:
            RestoreExecutionError: If the restore tool fails or streaming breaks
            ToolNotFoundError: If the restore tool is not installed
        """
        cmd = self._build_restore_command()
        tool = os.path.basename(cmd[0])
        logger.info(f"Executing {tool} restore for database: {self._spec.database}")

        try:
            result = self._runner.stream_from(cmd, source, env=self._build_env())
        except (OSError, EOFError, zlib.error) as e:
            raise RestoreExecutionError(
                self._spec.database, f"streaming input to {tool} failed: {e}"
            ) from e

        if not result.succeeded:
            error_msg = self._clean_error(result.error_text())
            logger.error(f"{tool} restore failed: {error_msg}")
            raise RestoreExecutionError(
                self._spec.database,
                f"{tool} failed: exit status {result.returncode}",
                details=error_msg,
            )

        if result.stderr:
            logger.debug(f"{tool} output: {result.error_text()}")

    def close(self) -> None:
        """Release held resources. No connector keeps a session open."""
        pass

    def _describe_target(self) -> str:
        return f"'{self._spec.database}' at {self._spec.host}:{self._spec.resolved_port}"

    def __enter__(self) -> "BaseConnector":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
