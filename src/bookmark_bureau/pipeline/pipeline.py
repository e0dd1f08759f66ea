"""Pipeline: compose middleware around an operation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .handler import OperationHandler

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from ..ports.middleware import IPipelineMiddleware
    from ..ports.pipeline import Operation


def build_chain(
    middlewares: Sequence[IPipelineMiddleware],
    operation: Operation,
) -> Callable[[Any], Any]:
    """Build a LIFO middleware chain ending at *operation*.

    The first middleware in the list is the **outermost** wrapper.
    """
    chain: Callable[[Any], Any] = operation

    for mw in reversed(middlewares):
        current_next = chain  # capture for closure

        def _wrapper(
            data: Any,
            _mw: IPipelineMiddleware = mw,
            _next: Callable[[Any], Any] = current_next,
        ) -> Any:
            return _mw.process(data, _next)

        chain = _wrapper

    return chain


class Pipeline:
    """Composes middleware into a decorator chain.

    Each middleware wraps the next, so the first one sees the input first
    and the result last. The middleware tuple is fixed at construction;
    :meth:`with_middleware` returns a new pipeline, which makes it safe to
    share a base pipeline between call sites that each add their own tail.

    With ``enforce_single_call=True`` the chain is driven by
    :class:`OperationHandler`, which rejects a middleware calling its
    continuation twice. The default chain trusts the middleware.

    Usage::

        pipeline = Pipeline(
            TransactionMiddleware(store),
            LoggingMiddleware(log, "createLink"),
        )
        result = pipeline.run(lambda link: repository.save(link), new_link)
    """

    __slots__ = ("_enforce_single_call", "_middlewares")

    def __init__(
        self,
        *middlewares: IPipelineMiddleware,
        enforce_single_call: bool = False,
    ) -> None:
        self._middlewares: tuple[IPipelineMiddleware, ...] = middlewares
        self._enforce_single_call = enforce_single_call

    @property
    def middlewares(self) -> tuple[IPipelineMiddleware, ...]:
        return self._middlewares

    @property
    def enforce_single_call(self) -> bool:
        return self._enforce_single_call

    def with_middleware(self, middleware: IPipelineMiddleware) -> Pipeline:
        """Return a new pipeline with *middleware* appended (innermost)."""
        return Pipeline(
            *self._middlewares,
            middleware,
            enforce_single_call=self._enforce_single_call,
        )

    def run(self, operation: Operation, data: Any = None) -> Any:
        """Run *operation* with *data* through every middleware."""
        if not self._middlewares:
            return operation(data)

        if self._enforce_single_call:
            return OperationHandler(self._middlewares).handle(operation, data)

        return build_chain(self._middlewares, operation)(data)

    def __len__(self) -> int:
        return len(self._middlewares)

    def __repr__(self) -> str:
        names = ", ".join(type(mw).__name__ for mw in self._middlewares)
        return f"Pipeline({names})"
