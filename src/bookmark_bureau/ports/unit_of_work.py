"""UnitOfWork: reentrant transaction scope for the service layer."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import TYPE_CHECKING, Any

from ..primitives.exceptions import InactiveUnitOfWorkError

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

logger = logging.getLogger("bookmark_bureau.uow")


class UnitOfWork(ABC):
    """
    Abstract base class for Unit of Work implementations.

    Units of work control transactions and allow them to be managed. They are
    part of the service layer and should only be controlled from there, as no
    other layer knows the extent of a transaction.

    ``begin()`` joins an already started transaction instead of opening a new
    one; only the outermost ``commit()`` reaches the store. ``rollback()``
    always reaches the store and abandons every nesting level at once.

    Subclasses implement ``_do_begin``, ``_do_commit`` and ``_do_rollback``
    against their connection.

    Example:
        ```python
        class SQLiteUnitOfWork(UnitOfWork):
            def __init__(self, connection):
                super().__init__()
                self._connection = connection

            def _do_begin(self):
                self._connection.execute("BEGIN")

            def _do_commit(self):
                self._connection.commit()

            def _do_rollback(self):
                self._connection.rollback()
        ```
    """

    def __init__(self) -> None:
        self._transaction_level = 0
        self._on_commit_hooks: deque[Callable[[], Any]] = deque()

    @abstractmethod
    def _do_begin(self) -> None: ...

    @abstractmethod
    def _do_commit(self) -> None: ...

    @abstractmethod
    def _do_rollback(self) -> None: ...

    @property
    def is_active(self) -> bool:
        """Check if currently in a transaction."""
        return self._transaction_level > 0

    @property
    def level(self) -> int:
        return self._transaction_level

    def begin(self) -> None:
        """Start a transaction, or join the one already started."""
        if self._transaction_level == 0:
            self._do_begin()
        self._transaction_level += 1

    def commit(self) -> None:
        """Commit the current transaction if this is the outermost call.

        Registered ``on_commit`` hooks run after the store commit. If the
        store commit fails the transaction is rolled back, the hooks are
        discarded and the error is re-raised.
        """
        if self._transaction_level == 0:
            raise InactiveUnitOfWorkError("No active transaction to commit")

        self._transaction_level -= 1

        if self._transaction_level == 0:
            try:
                self._do_commit()
            except BaseException:
                self._on_commit_hooks.clear()
                self._do_rollback()
                raise
            self.trigger_commit_hooks()

    def rollback(self) -> None:
        """Roll back the current transaction, including every nesting level."""
        if self._transaction_level == 0:
            raise InactiveUnitOfWorkError("No active transaction to rollback")

        self._transaction_level = 0
        self._on_commit_hooks.clear()
        self._do_rollback()

    def transactional(self, operation: Callable[[], Any]) -> Any:
        """Execute *operation* within a transaction.

        Commits on success; rolls back and re-raises on any exception,
        including a failed commit.
        """
        self.begin()
        try:
            result = operation()
            self.commit()
        except BaseException:
            # A nested scope or a failed commit may already have rolled back
            if self.is_active:
                self.rollback()
            raise
        return result

    def on_commit(self, callback: Callable[[], Any]) -> None:
        """Register a callback to be executed after the outermost commit.

        Hooks are discarded on rollback.
        """
        self._on_commit_hooks.append(callback)

    def trigger_commit_hooks(self) -> None:
        """Execute all registered on_commit hooks.

        Hook failures are logged; the transaction is already committed.
        """
        while self._on_commit_hooks:
            callback = self._on_commit_hooks.popleft()
            try:
                callback()
            except Exception as exc:
                logger.error("Error in on_commit hook: %s", exc, exc_info=True)

    def __enter__(self) -> UnitOfWork:
        self.begin()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if exc_type is None:
            self.commit()
        elif self.is_active:
            self.rollback()
