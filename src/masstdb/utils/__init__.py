"""Utility functions for MasstDB."""

from .formatters import format_bytes, format_duration
from .process_runner import ProcessResult, ProcessRunner
from .tool_paths import get_tool_path
from .validators import validate_connection_spec

__all__ = [
    "format_bytes",
    "format_duration",
    "ProcessResult",
    "ProcessRunner",
    "get_tool_path",
    "validate_connection_spec",
]
