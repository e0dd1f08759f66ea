"""
SQLAlchemy adapters for the transaction control surface.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..ports.unit_of_work import UnitOfWork
from ..primitives.exceptions import TransactionStateError

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, RootTransaction


class SQLAlchemyTransactionalStore:
    """
    ITransactionalStore over a single SQLAlchemy ``Connection``.

    ``begin()`` opens the root transaction of the connection; like most
    drivers it is not reentrant, so pair it with
    :class:`~bookmark_bureau.middleware.TransactionMiddleware` or a
    :class:`~bookmark_bureau.ports.UnitOfWork` to nest operations.

    The connection is owned by the caller and never closed here.
    """

    def __init__(self, connection: Connection) -> None:
        self._connection = connection
        self._transaction: RootTransaction | None = None

    @property
    def connection(self) -> Connection:
        return self._connection

    @property
    def in_transaction(self) -> bool:
        return self._transaction is not None and self._transaction.is_active

    def begin(self) -> None:
        """Begin the root transaction on the connection."""
        self._transaction = self._connection.begin()

    def commit(self) -> None:
        """Commit the transaction opened by :meth:`begin`."""
        self._current().commit()
        self._transaction = None

    def rollback(self) -> None:
        """Roll back the transaction opened by :meth:`begin`."""
        transaction = self._current()
        self._transaction = None
        transaction.rollback()

    def _current(self) -> RootTransaction:
        if self._transaction is None:
            raise TransactionStateError("There is no active transaction")
        return self._transaction


class SQLAlchemyUnitOfWork(UnitOfWork):
    """
    Unit of Work over a single SQLAlchemy ``Connection``.

    Nested ``begin()`` calls join the root transaction; see
    :class:`~bookmark_bureau.ports.UnitOfWork`.
    """

    def __init__(self, connection: Connection) -> None:
        super().__init__()
        self._store = SQLAlchemyTransactionalStore(connection)

    @property
    def connection(self) -> Connection:
        return self._store.connection

    def _do_begin(self) -> None:
        self._store.begin()

    def _do_commit(self) -> None:
        self._store.commit()

    def _do_rollback(self) -> None:
        self._store.rollback()
