"""TransactionMiddleware: run an operation inside one store transaction."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..ports.middleware import IPipelineMiddleware

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..ports.transactional_store import ITransactionalStore

logger = logging.getLogger("bookmark_bureau.middleware")


class TransactionMiddleware(IPipelineMiddleware):
    """Begins a transaction on entry, commits on success, rolls back on error.

    The same instance may be entered again while one of its ``process``
    calls is still running, e.g. a service operation calling another service
    operation whose pipeline shares this middleware and connection. A
    nesting level keeps that flat: only the outermost call begins and
    commits, so any depth of nesting issues a single begin/commit pair.

    Any exception, including one raised by ``commit()``, resets the level to
    zero and the outermost call issues a single rollback; the exception is
    re-raised unchanged. The instance starts a fresh transaction on its next
    call.

    Instances do not share their level, even over the same store. The level
    is not thread-safe: use one instance per unit-of-work scope.
    """

    __slots__ = ("_level", "_store")

    def __init__(self, store: ITransactionalStore) -> None:
        self._store = store
        self._level = 0

    @property
    def level(self) -> int:
        """Current nesting depth; ``0`` when no transaction is open."""
        return self._level

    def process(
        self,
        data: Any,
        next_handler: Callable[[Any], Any],
    ) -> Any:
        is_outermost = self._level == 0
        if is_outermost:
            logger.debug("Beginning transaction on %s", type(self._store).__name__)
            self._store.begin()
        self._level += 1

        try:
            result = next_handler(data)
            # An inner failure swallowed by the operation has already reset the level
            self._level = max(self._level - 1, 0)
            if is_outermost:
                logger.debug(
                    "Committing transaction on %s", type(self._store).__name__
                )
                self._store.commit()
        except BaseException:
            self._level = 0
            if is_outermost:
                logger.debug(
                    "Rolling back transaction on %s", type(self._store).__name__
                )
                self._store.rollback()
            raise

        return result
