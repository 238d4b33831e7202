"""
MasstDB command line interface.

Usage:
    masstdb backup  --type postgres --host localhost --user admin --password secret --database mydb
    masstdb backup  --type sqlite --database /path/to/database.db --no-compress
    masstdb restore --type postgres --database mydb --file backups/mydb_full_20240101_120000.sql.gz
    masstdb test    --type mysql --host db.internal --user root --database shop
    masstdb list    --dir ./backups

Flags that are not given fall back to the configuration file
(``./.masstdb.yaml``, then ``~/.masstdb.yaml``, or ``--config``).
"""

import argparse
import logging
import os
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from . import __version__
from .config import AppConfig, get_settings, load_config, load_default_config
from .connectors import create_connector
from .exceptions import ConfigurationError, MasstDBError
from .models import BackupOptions, BackupType, ConnectionSpec, EngineType, RestoreOptions
from .services import BackupService, list_backups
from .utils import format_bytes, format_duration

logger = logging.getLogger("masstdb")

DATABASE_TYPES = [engine.value for engine in EngineType]


def configure_logging(verbose: bool, level: str = "INFO") -> None:
    """Configure root logging for command line use."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )


def _add_connection_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-t", "--type",
        choices=DATABASE_TYPES,
        help="database type (default: from config file)",
    )
    parser.add_argument("-H", "--host", help="database host")
    parser.add_argument(
        "-P", "--port",
        type=int,
        help="database port (default depends on database type)",
    )
    parser.add_argument("-u", "--user", help="database username")
    parser.add_argument("-p", "--password", help="database password")
    parser.add_argument(
        "-d", "--database",
        required=True,
        help="database name, or the database file for sqlite",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="masstdb",
        description="Back up and restore PostgreSQL, MySQL, MongoDB and SQLite databases",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", help="config file (default: ./.masstdb.yaml or ~/.masstdb.yaml)")
    parser.add_argument("-v", "--verbose", action="store_true", help="verbose output")

    subparsers = parser.add_subparsers(dest="command", required=True)

    backup_parser = subparsers.add_parser("backup", help="Create a database backup")
    _add_connection_arguments(backup_parser)
    backup_parser.add_argument("-o", "--output", help="output directory for backup files")
    backup_parser.add_argument(
        "-c", "--compress",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="gzip compress the backup file",
    )
    backup_parser.add_argument(
        "-b", "--backup-type",
        choices=[t.value for t in BackupType],
        help="backup type (only full is supported by the current engines)",
    )
    backup_parser.set_defaults(handler=run_backup)

    restore_parser = subparsers.add_parser("restore", help="Restore a database from backup")
    _add_connection_arguments(restore_parser)
    restore_parser.add_argument("-f", "--file", required=True, help="backup file to restore from")
    restore_parser.add_argument(
        "--tables",
        type=lambda value: [t.strip() for t in value.split(",") if t.strip()],
        default=[],
        help="specific tables to restore (comma-separated)",
    )
    restore_parser.set_defaults(handler=run_restore)

    test_parser = subparsers.add_parser("test", help="Test database connection")
    _add_connection_arguments(test_parser)
    test_parser.set_defaults(handler=run_test)

    list_parser = subparsers.add_parser("list", help="List available backups")
    list_parser.add_argument("-d", "--dir", help="directory to list backups from")
    list_parser.set_defaults(handler=run_list)

    return parser


def build_connection_spec(args: argparse.Namespace, config: AppConfig) -> ConnectionSpec:
    """Merge command line flags over the config file defaults."""
    defaults = config.default_database

    def pick(value, fallback):
        return fallback if value is None else value

    try:
        return ConnectionSpec(
            type=pick(args.type, defaults.type),
            host=pick(args.host, defaults.host),
            port=pick(args.port, defaults.port),
            username=pick(args.user, defaults.username),
            password=pick(args.password, defaults.password),
            database=args.database,
        )
    except ValidationError as e:
        raise ConfigurationError(f"invalid configuration: {e}") from e


def _backup_stem(spec: ConnectionSpec) -> str:
    if spec.type == EngineType.SQLITE.value:
        return Path(spec.database).stem
    return spec.database


def run_backup(args: argparse.Namespace, config: AppConfig) -> int:
    logger.info("Starting backup process...")

    spec = build_connection_spec(args, config)
    backup_type = BackupType(args.backup_type) if args.backup_type else config.backup.default_type
    compress = config.backup.compress if args.compress is None else args.compress
    output_dir = args.output or config.storage.local_path

    with create_connector(spec) as connector:
        logger.info("Testing database connection...")
        connector.test_connection()
        logger.info("Connection successful!")

        try:
            os.makedirs(output_dir, exist_ok=True)
        except OSError as e:
            raise ConfigurationError(f"failed to create output directory: {e}") from e

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filename = f"{_backup_stem(spec)}_{backup_type.value}_{timestamp}"

        logger.info("Creating backup...")
        start_time = time.monotonic()
        result = BackupService().backup(
            connector,
            BackupOptions(
                output_path=os.path.join(output_dir, filename),
                backup_type=backup_type,
                compress=compress,
            ),
        )
        duration = time.monotonic() - start_time

    logger.info("Backup completed successfully!")
    logger.info(f"  File: {result.file_path}")
    logger.info(f"  Size: {format_bytes(result.size_bytes)}")
    logger.info(f"  Duration: {format_duration(duration)}")
    return 0


def run_restore(args: argparse.Namespace, config: AppConfig) -> int:
    logger.info("Starting restore process...")

    spec = build_connection_spec(args, config)

    with create_connector(spec) as connector:
        if spec.type == EngineType.SQLITE.value and not os.path.exists(spec.database):
            logger.info("SQLite restore - will create database file if needed")
        else:
            logger.info("Testing database connection...")
            connector.test_connection()
            logger.info("Connection successful!")

        logger.info(f"Restoring from: {args.file}")
        start_time = time.monotonic()
        BackupService().restore(
            connector,
            RestoreOptions(file_path=args.file, tables=args.tables),
        )
        duration = time.monotonic() - start_time

    logger.info("Restore completed successfully!")
    logger.info(f"  Duration: {format_duration(duration)}")
    return 0


def run_test(args: argparse.Namespace, config: AppConfig) -> int:
    spec = build_connection_spec(args, config)

    with create_connector(spec) as connector:
        logger.info(
            f"Testing connection to {spec.type} database '{spec.database}' "
            f"at {spec.host}:{connector.spec.port}..."
        )
        connector.test_connection()

    logger.info("Connection successful!")
    return 0


def run_list(args: argparse.Namespace, config: AppConfig) -> int:
    directory = args.dir or config.storage.local_path

    if not os.path.isdir(directory):
        print(f"No backups found. Directory '{directory}' does not exist.")
        return 0

    backups = list_backups(directory)
    if not backups:
        print(f"No backups found in '{directory}'")
        return 0

    rows = [
        (b.name, format_bytes(b.size_bytes), b.modified_at.strftime("%Y-%m-%d %H:%M:%S"))
        for b in backups
    ]
    headers = [("NAME", "SIZE", "CREATED"), ("----", "----", "-------")]
    name_width = max(len(r[0]) for r in rows + headers)
    size_width = max(len(r[1]) for r in rows + headers)

    for name, size, created in headers + rows:
        print(f"{name:<{name_width}}  {size:<{size_width}}  {created}")

    print(f"\nTotal: {len(backups)} backup(s) in {directory}")
    print(f"Location: {os.path.abspath(directory)}")
    return 0


def _load_app_config(path: Optional[str]) -> AppConfig:
    path = path or get_settings().config_file
    if path:
        return load_config(path)
    return load_default_config()


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose, get_settings().log_level)

    try:
        config = _load_app_config(args.config)
        return args.handler(args, config)
    except MasstDBError as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
