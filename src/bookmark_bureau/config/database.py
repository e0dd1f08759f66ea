"""Database configuration: connection and default operation pipeline."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr
from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Connection, Engine
from sqlalchemy.pool import StaticPool

from ..adapters.sqlalchemy import SQLAlchemyTransactionalStore
from ..middleware.transaction import TransactionMiddleware
from ..pipeline.pipeline import Pipeline

logger = logging.getLogger("bookmark_bureau.config")


class DatabaseConfig(BaseModel, ABC):
    """Base class for database configurations.

    The engine, the connection and the default pipeline are created on first
    access and cached for the lifetime of the config, so every service built
    from one config shares a single connection and a single
    :class:`TransactionMiddleware`. Sharing the middleware is what lets a
    service operation call another one inside the same transaction.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    database_type: ClassVar[str]

    _engine: Engine | None = PrivateAttr(default=None)
    _connection: Connection | None = PrivateAttr(default=None)
    _default_pipeline: Pipeline | None = PrivateAttr(default=None)

    @abstractmethod
    def url(self) -> URL:
        """SQLAlchemy URL for this database."""
        ...

    def engine_options(self) -> dict[str, object]:
        return {}

    def engine(self) -> Engine:
        if self._engine is None:
            logger.debug("Creating %s engine", self.database_type)
            self._engine = create_engine(self.url(), **self.engine_options())
        return self._engine

    def connection(self) -> Connection:
        """Return the shared connection, opening it on first use."""
        if self._connection is None:
            self._connection = self.engine().connect()
        return self._connection

    def default_pipeline(self) -> Pipeline:
        """Return the shared transactional pipeline for database operations."""
        if self._default_pipeline is None:
            store = SQLAlchemyTransactionalStore(self.connection())
            self._default_pipeline = Pipeline(TransactionMiddleware(store))
        return self._default_pipeline

    def close(self) -> None:
        """Close the connection and dispose of the engine."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
        self._default_pipeline = None


class SqliteDatabaseConfig(DatabaseConfig):
    """SQLite database; ``path=":memory:"`` keeps everything in process."""

    database_type: ClassVar[str] = "sqlite"

    path: str = ":memory:"

    def url(self) -> URL:
        if self.path == ":memory:":
            return URL.create("sqlite+pysqlite")
        return URL.create("sqlite+pysqlite", database=self.path)

    def engine_options(self) -> dict[str, object]:
        if self.path == ":memory:":
            # one in-memory database shared by every checkout
            return {
                "poolclass": StaticPool,
                "connect_args": {"check_same_thread": False},
            }
        return {}


class MysqlDatabaseConfig(DatabaseConfig):
    database_type: ClassVar[str] = "mysql"

    host: str = Field(min_length=1)
    dbname: str = Field(min_length=1)
    user: str
    password: str = Field(repr=False)
    port: int = Field(default=3306, gt=0, lt=65536)
    charset: str = "utf8mb4"

    def url(self) -> URL:
        return URL.create(
            "mysql+pymysql",
            username=self.user,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.dbname,
            query={"charset": self.charset},
        )


class PostgresDatabaseConfig(DatabaseConfig):
    database_type: ClassVar[str] = "pgsql"

    host: str = Field(min_length=1)
    dbname: str = Field(min_length=1)
    user: str
    password: str = Field(repr=False)
    port: int = Field(default=5432, gt=0, lt=65536)
    charset: str = "utf8"

    def url(self) -> URL:
        return URL.create(
            "postgresql+psycopg",
            username=self.user,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.dbname,
            query={"client_encoding": self.charset},
        )
