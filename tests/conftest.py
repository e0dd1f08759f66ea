"""Shared fixtures for bookmark-bureau tests."""

from __future__ import annotations

import pytest
from sqlalchemy import text

from bookmark_bureau.adapters.memory import InMemoryTransactionalStore
from bookmark_bureau.config import SqliteDatabaseConfig


@pytest.fixture
def store() -> InMemoryTransactionalStore:
    return InMemoryTransactionalStore()


@pytest.fixture
def sqlite_config():
    """In-memory SQLite config with a ``links`` table."""
    config = SqliteDatabaseConfig()
    connection = config.connection()
    with connection.begin():
        connection.execute(
            text("CREATE TABLE links (id INTEGER PRIMARY KEY, url TEXT NOT NULL)")
        )
    yield config
    config.close()
