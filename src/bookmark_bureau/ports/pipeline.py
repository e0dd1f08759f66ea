"""IPipeline: run an operation through a set of middleware."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

Operation = Callable[[Any], Any]


@runtime_checkable
class IPipeline(Protocol):
    """Protocol shared by :class:`Pipeline` and :class:`NoPipeline`."""

    def run(self, operation: Operation, data: Any = None) -> Any:
        """Run *operation* with *data* and return its (possibly wrapped) result."""
        ...
