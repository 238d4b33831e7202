"""
Backup and restore option and result models.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class BackupType(str, Enum):
    """Kind of backup requested."""

    FULL = "full"
    INCREMENTAL = "incremental"
    DIFFERENTIAL = "differential"


class BackupOptions(BaseModel):
    """Options for a single backup run."""

    output_path: str = Field(
        ..., description="Artifact path without extension; the extension is added per engine"
    )
    backup_type: BackupType = Field(default=BackupType.FULL)
    compress: bool = Field(default=True, description="Whether to gzip compress the backup")


class RestoreOptions(BaseModel):
    """Options for a single restore run."""

    file_path: str = Field(..., description="Backup artifact to restore from")
    tables: list[str] = Field(
        default_factory=list, description="Tables to restore; empty means everything"
    )


class BackupResult(BaseModel):
    """Result of a successful backup."""

    file_path: str = Field(..., description="Final artifact path including extensions")
    size_bytes: int = Field(..., ge=0, description="Size of the artifact on disk")


class BackupFileInfo(BaseModel):
    """A backup artifact found on local storage."""

    name: str
    path: str
    size_bytes: int
    modified_at: datetime
