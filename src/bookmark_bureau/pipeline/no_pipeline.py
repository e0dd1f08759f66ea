"""NoPipeline: run an operation without any middleware."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .pipeline import Pipeline

if TYPE_CHECKING:
    from ..ports.middleware import IPipelineMiddleware
    from ..ports.pipeline import Operation


class NoPipeline:
    """Null-object implementation of :class:`~bookmark_bureau.ports.IPipeline`.

    Executes the operation directly. Use it for operations that need no
    cross-cutting behaviour, avoiding the overhead of building a chain.
    """

    __slots__ = ()

    def run(self, operation: Operation, data: Any = None) -> Any:
        return operation(data)

    def with_middleware(self, middleware: IPipelineMiddleware) -> Pipeline:
        """Return a :class:`Pipeline` holding only *middleware*."""
        return Pipeline(middleware)

    def __repr__(self) -> str:
        return "NoPipeline()"
