"""LoggingMiddleware: log start and completion of an operation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..ports.middleware import IPipelineMiddleware
from ..primitives.exceptions import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Callable


def _type_name(value: Any) -> str:
    return "null" if value is None else type(value).__name__


def resolve_level(level: int | str) -> int:
    """Turn a level name such as ``"info"`` into its numeric value."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ConfigurationError(f"Unknown log level: {level!r}")
    return resolved


class LoggingMiddleware(IPipelineMiddleware):
    """Logs the start and completion of an operation with the payload types.

    Only type names are logged, never the payload itself. Exceptions are not
    caught: a failing operation leaves just the "started" entry.

    Attributes:
        operation_name: Prefix for every message, e.g. ``"links.create_link"``.
        level: The numeric logging level, ``logging.DEBUG`` by default.
    """

    __slots__ = ("_logger", "level", "operation_name")

    def __init__(
        self,
        logger: logging.Logger | logging.LoggerAdapter[Any],
        operation_name: str,
        level: int | str = logging.DEBUG,
    ) -> None:
        self._logger = logger
        self.operation_name = operation_name
        self.level = resolve_level(level)

    def process(
        self,
        data: Any,
        next_handler: Callable[[Any], Any],
    ) -> Any:
        input_type = _type_name(data)
        self._logger.log(
            self.level,
            f"{self.operation_name} started with object of type {input_type}",
        )
        result = next_handler(data)
        output_type = _type_name(result)
        self._logger.log(
            self.level,
            f"{self.operation_name} completed with object of type {output_type}",
        )
        return result
