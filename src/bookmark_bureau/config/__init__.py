"""Application configuration."""

from .database import (
    DatabaseConfig,
    MysqlDatabaseConfig,
    PostgresDatabaseConfig,
    SqliteDatabaseConfig,
)
from .logger import LoggerConfig

__all__ = [
    "DatabaseConfig",
    "LoggerConfig",
    "MysqlDatabaseConfig",
    "PostgresDatabaseConfig",
    "SqliteDatabaseConfig",
]
