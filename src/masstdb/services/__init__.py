"""Services for MasstDB."""

from .backup_catalog import is_backup_file, list_backups
from .backup_service import BackupService, artifact_extension, build_artifact_path
from .compression import (
    COMPRESSION_SUFFIX,
    is_compressed,
    open_compressed_writer,
    open_decompressed_reader,
)

__all__ = [
    "BackupService",
    "artifact_extension",
    "build_artifact_path",
    "is_backup_file",
    "list_backups",
    "COMPRESSION_SUFFIX",
    "is_compressed",
    "open_compressed_writer",
    "open_decompressed_reader",
]
