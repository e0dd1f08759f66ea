"""ITransactionalStore: the transaction control surface of a datastore."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ITransactionalStore(Protocol):
    """Begin/commit/rollback on one underlying connection.

    Return values are ignored by callers; a failing call must raise.
    Implementations are not expected to be reentrant, a second ``begin()``
    while a transaction is open may raise or open a sub-transaction.
    """

    def begin(self) -> Any: ...

    def commit(self) -> Any: ...

    def rollback(self) -> Any: ...
