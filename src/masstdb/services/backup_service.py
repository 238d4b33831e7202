"""
Backup and restore orchestration.

Composes a connector with the compression adapter into one backup or restore
call. The service owns the artifact file for the duration of a backup: it
creates it, hands the (optionally compressed) stream to the connector, and
either finalizes it or deletes it when anything goes wrong.
"""

import logging
import os

from ..exceptions import (
    BackupExecutionError,
    RestoreExecutionError,
    UnsupportedOptionError,
)
from ..models import BackupOptions, BackupResult, BackupType, RestoreOptions, get_engine_descriptor
from ..connectors import BaseConnector
from .compression import COMPRESSION_SUFFIX, open_compressed_writer, open_decompressed_reader

logger = logging.getLogger(__name__)

FALLBACK_EXTENSION = "backup"


def artifact_extension(database_type: str) -> str:
    """Return the artifact extension (with leading dot) for a database type."""
    descriptor = get_engine_descriptor(database_type)
    extension = descriptor.file_extension if descriptor else FALLBACK_EXTENSION
    return f".{extension}"


def build_artifact_path(database_type: str, base_path: str, compress: bool) -> str:
    """
    Build the final artifact name.

    ``<base>{.sql|.archive|.backup}[.gz]``
    """
    path = base_path + artifact_extension(database_type)
    if compress:
        path += COMPRESSION_SUFFIX
    return path


class BackupService:
    """Runs backups and restores through a connector."""

    def backup(self, connector: BaseConnector, options: BackupOptions) -> BackupResult:
        """
        Back up a database into a new artifact file.

        Args:
            connector: Connector for the source database
            options: Output path stem, backup type and compression flag

        Returns:
            BackupResult with the final path and its size on disk

        Raises:
            UnsupportedOptionError: If a non-full backup is requested from a
                connector without incremental support
            BackupExecutionError: If the artifact cannot be written or the
                dump fails
            ToolNotFoundError: If the dump tool is not installed
        """
        if options.backup_type != BackupType.FULL and not connector.supports_incremental():
            raise UnsupportedOptionError(
                connector.database_type,
                "backup_type",
                f"{options.backup_type.value} backups are not supported, only full",
            )

        output_path = build_artifact_path(
            connector.database_type, options.output_path, options.compress
        )
        database_name = connector.spec.database

        # Exclusive create; an existing file is neither overwritten nor removed
        try:
            artifact = open(output_path, "xb")
        except FileExistsError as e:
            raise BackupExecutionError(
                database_name, f"backup file already exists: {output_path}"
            ) from e
        except OSError as e:
            raise BackupExecutionError(
                database_name, f"failed to create output file: {e}"
            ) from e

        logger.debug(f"Writing backup to: {output_path}")

        try:
            with artifact:
                with open_compressed_writer(artifact, options.compress) as writer:
                    connector.backup(writer)
        except OSError as e:
            self._discard_artifact(output_path)
            raise BackupExecutionError(
                database_name, f"failed to finalize backup file: {e}"
            ) from e
        except BaseException:
            self._discard_artifact(output_path)
            raise

        try:
            size = os.path.getsize(output_path)
        except OSError as e:
            raise BackupExecutionError(database_name, f"failed to get file info: {e}") from e

        logger.info(f"Backup written to {output_path} ({size} bytes)")
        return BackupResult(file_path=output_path, size_bytes=size)

    def restore(self, connector: BaseConnector, options: RestoreOptions) -> None:
        """
        Restore a database from an artifact file.

        The artifact is only read. Compression is detected from its suffix.

        Raises:
            UnsupportedOptionError: If a table filter is given to a connector
                that cannot restore selectively
            RestoreExecutionError: If the artifact cannot be read or the
                restore fails
            ToolNotFoundError: If the restore tool is not installed
        """
        if options.tables and not connector.supports_selective_restore():
            raise UnsupportedOptionError(
                connector.database_type,
                "tables",
                "selective table restore is not supported; omit the table list "
                "to restore the whole backup",
            )

        database_name = connector.spec.database

        try:
            artifact = open(options.file_path, "rb")
        except OSError as e:
            raise RestoreExecutionError(
                database_name, f"failed to open backup file: {e}"
            ) from e

        logger.debug(f"Restoring from: {options.file_path}")

        with artifact:
            with open_decompressed_reader(artifact, options.file_path) as reader:
                connector.restore(reader)

        logger.info(f"Restored '{database_name}' from {options.file_path}")

    @staticmethod
    def _discard_artifact(path: str) -> None:
        """Remove a partially written artifact."""
        logger.warning(f"Removing incomplete backup file: {path}")
        try:
            os.remove(path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.error(f"Could not remove incomplete backup file {path}: {e}")
