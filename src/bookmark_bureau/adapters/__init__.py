"""Adapters for the transaction control surface."""

from .memory import InMemoryTransactionalStore, InMemoryUnitOfWork
from .sqlalchemy import SQLAlchemyTransactionalStore, SQLAlchemyUnitOfWork

__all__ = [
    "InMemoryTransactionalStore",
    "InMemoryUnitOfWork",
    "SQLAlchemyTransactionalStore",
    "SQLAlchemyUnitOfWork",
]
