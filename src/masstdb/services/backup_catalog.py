"""
Local backup catalog.

Lists backup artifacts found in a storage directory.
"""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Union

from ..models import BackupFileInfo
from .compression import COMPRESSION_SUFFIX

logger = logging.getLogger(__name__)

BACKUP_EXTENSIONS = (".sql", ".dump", ".bson", ".db", ".archive", ".backup")


def is_backup_file(name: str) -> bool:
    """Whether a file name looks like a backup artifact, compressed or not."""
    if name.endswith(COMPRESSION_SUFFIX):
        name = name[: -len(COMPRESSION_SUFFIX)]
    return name.endswith(BACKUP_EXTENSIONS)


def list_backups(directory: Union[str, Path]) -> list[BackupFileInfo]:
    """
    List backup files in a directory, newest first.

    Args:
        directory: Directory to scan (not recursive)

    Returns:
        Backup file entries; empty if the directory does not exist
    """
    directory = Path(directory)
    if not directory.is_dir():
        logger.debug(f"Backup directory {directory} does not exist")
        return []

    backups = []
    with os.scandir(directory) as entries:
        for entry in entries:
            if not entry.is_file() or not is_backup_file(entry.name):
                continue
            try:
                stat = entry.stat()
            except OSError as e:
                logger.warning(f"Skipping {entry.path}: {e}")
                continue

            backups.append(BackupFileInfo(
                name=entry.name,
                path=entry.path,
                size_bytes=stat.st_size,
                modified_at=datetime.fromtimestamp(stat.st_mtime),
            ))

    backups.sort(key=lambda b: b.modified_at, reverse=True)
    return backups
