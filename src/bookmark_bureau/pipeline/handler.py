"""OperationHandler: chain node with a once-only guard."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..primitives.exceptions import OperationPipelineError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..ports.middleware import IPipelineMiddleware
    from ..ports.pipeline import Operation


class OperationHandler:
    """Handles one position of a middleware chain.

    ``handle()`` hands the middleware at ``current_index`` a continuation
    bound to a fresh handler for ``current_index + 1``; past the last
    middleware it executes the operation. Every handler may be called once,
    so a middleware that invokes its continuation a second time gets an
    :class:`OperationPipelineError` instead of re-running the rest of the
    chain.

    Usage::

        handler = OperationHandler([TransactionMiddleware(store)])
        result = handler.handle(save_link, link)
    """

    __slots__ = ("_called", "_current_index", "_middlewares")

    def __init__(
        self,
        middlewares: Sequence[IPipelineMiddleware],
        current_index: int = 0,
    ) -> None:
        self._middlewares = tuple(middlewares)
        self._current_index = current_index
        self._called = False

    @property
    def called(self) -> bool:
        return self._called

    def handle(self, operation: Operation, data: Any = None) -> Any:
        """Process *data* through the remaining middleware, then *operation*.

        Raises:
            OperationPipelineError: If this handler was already called.
        """
        if self._called:
            raise OperationPipelineError(
                "Handler already called, cannot process twice"
            )
        self._called = True

        if self._current_index >= len(self._middlewares):
            return operation(data)

        middleware = self._middlewares[self._current_index]
        next_handler = OperationHandler(self._middlewares, self._current_index + 1)
        return middleware.process(
            data, lambda d: next_handler.handle(operation, d)
        )
