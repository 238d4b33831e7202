"""Custom exceptions for MasstDB."""

from typing import Optional


class MasstDBError(Exception):
    """Base exception for all MasstDB errors."""

    pass


class ConfigurationError(MasstDBError):
    """Error in configuration."""

    pass


class UnsupportedOptionError(ConfigurationError):
    """An option was requested that the selected connector cannot honor."""

    def __init__(self, database_type: str, option: str, message: str):
        self.database_type = database_type
        self.option = option
        super().__init__(f"[{database_type}] unsupported option '{option}': {message}")


class DatabaseConnectionError(MasstDBError):
    """Error connecting to a database."""

    def __init__(self, database_type: str, message: str, output: Optional[str] = None):
        self.database_type = database_type
        self.output = output
        super().__init__(f"[{database_type}] {message}")


class ToolNotFoundError(MasstDBError):
    """A required database client program is not installed."""

    def __init__(self, tool: str):
        self.tool = tool
        super().__init__(
            f"'{tool}' not found. Install the database client tools or set MASSTDB_TOOLS_BIN_PATH."
        )


class BackupExecutionError(MasstDBError):
    """Error during backup execution."""

    def __init__(self, database_name: str, message: str, details: Optional[str] = None):
        self.database_name = database_name
        self.details = details
        text = f"Backup failed for '{database_name}': {message}"
        if details:
            text = f"{text} - {details}"
        super().__init__(text)


class RestoreExecutionError(MasstDBError):
    """Error during restore execution."""

    def __init__(self, database_name: str, message: str, details: Optional[str] = None):
        self.database_name = database_name
        self.details = details
        text = f"Restore failed for '{database_name}': {message}"
        if details:
            text = f"{text} - {details}"
        super().__init__(text)


__all__ = [
    "MasstDBError",
    "ConfigurationError",
    "UnsupportedOptionError",
    "DatabaseConnectionError",
    "ToolNotFoundError",
    "BackupExecutionError",
    "RestoreExecutionError",
]
