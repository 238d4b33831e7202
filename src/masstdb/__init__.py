"""
MasstDB - database backup and restore

Backs up and restores PostgreSQL, MySQL, MongoDB and SQLite databases by
driving their native client tools, streaming dumps through optional gzip
compression to local files.

Modules:
- config: Runtime settings and the YAML configuration file
- models: Engine descriptors, connection specs, backup options and results
- connectors: One connector per database engine
- services: Backup/restore orchestration, compression, local catalog
- utils: Validators, process runner, tool paths, formatters
- exceptions: Custom exceptions
"""

__version__ = "0.1.0"
