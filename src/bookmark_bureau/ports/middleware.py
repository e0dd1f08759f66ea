"""IPipelineMiddleware: onion middleware protocol."""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any,
    Protocol,
    runtime_checkable,
)

if TYPE_CHECKING:
    from collections.abc import Callable


@runtime_checkable
class IPipelineMiddleware(Protocol):
    """Protocol for middleware wrapping a single operation invocation.

    The chain is applied in **LIFO** order (first registered = outermost):
    middleware see the input in declared order and the result in reverse
    order.

    A well-behaved middleware calls ``next_handler`` exactly once and returns
    a value, either the untouched result or a transformed one. Skipping
    ``next_handler`` altogether short-circuits the remaining chain.
    """

    def process(
        self,
        data: Any,
        next_handler: Callable[[Any], Any],
    ) -> Any:
        """Execute middleware logic and call next_handler to proceed.

        Parameters
        ----------
        data:
            The operation input. ``None`` is a valid value, operations that
            create or list resources legitimately have no input object.
        next_handler:
            Callable running the rest of the chain (inner middleware, then
            the operation) and returning its result.

        Returns
        -------
        The result from the rest of the chain, possibly transformed.
        """
        ...
