"""
Database tool path resolver.

Provides paths to database CLI tools (psql, mysqldump, mongodump, sqlite3, ...).

When MASSTDB_TOOLS_BIN_PATH points at a directory of bundled binaries, tools
found there win. Otherwise tools are looked up on the system PATH.
"""

import logging
import os
from functools import lru_cache
from typing import Optional

from ..config import get_settings

logger = logging.getLogger(__name__)

# Tool names mapped to their binary files
TOOL_NAMES = {
    # PostgreSQL
    "psql": "psql",
    "pg_dump": "pg_dump",
    # MySQL
    "mysql": "mysql",
    "mysqldump": "mysqldump",
    # MongoDB
    "mongosh": "mongosh",
    "mongo": "mongo",
    "mongodump": "mongodump",
    "mongorestore": "mongorestore",
    # SQLite
    "sqlite3": "sqlite3",
}


@lru_cache(maxsize=1)
def get_tools_bin_path() -> Optional[str]:
    """
    Get the path to the bundled tools directory.

    Returns:
        Path to the tools directory if configured and present, None otherwise.
    """
    configured = get_settings().tools_bin_path
    if not configured:
        return None

    abs_path = os.path.abspath(os.path.expanduser(configured))
    if os.path.isdir(abs_path):
        logger.debug(f"Using bundled tool path: {abs_path}")
        return abs_path

    logger.warning(f"Tools directory {abs_path} does not exist, using system PATH")
    return None


def get_tool_path(tool_name: str) -> str:
    """
    Get the full path to a database tool.

    If bundled tools are available, returns the full path to the bundled binary.
    Otherwise, returns just the tool name (relying on system PATH).

    Args:
        tool_name: Name of the tool (e.g., "pg_dump", "mongodump")

    Returns:
        Full path to the tool if bundled, otherwise just the tool name.
    """
    if tool_name not in TOOL_NAMES:
        logger.warning(f"Unknown tool requested: {tool_name}, using as-is")
        binary_name = tool_name
    else:
        binary_name = TOOL_NAMES[tool_name]

    tools_bin = get_tools_bin_path()

    if tools_bin:
        tool_path = os.path.join(tools_bin, binary_name)
        if os.path.isfile(tool_path) and os.access(tool_path, os.X_OK):
            logger.debug(f"Using bundled tool: {tool_path}")
            return tool_path
        else:
            logger.debug(f"Bundled tool not found/executable: {tool_path}, falling back to PATH")

    return binary_name
