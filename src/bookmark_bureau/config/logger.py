"""LoggerConfig: build the application logger."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field, PrivateAttr, field_validator

from ..middleware.logging import resolve_level
from ..primitives.exceptions import ConfigurationError

LINE_FORMAT = "[%(asctime)s] %(name)s.%(levelname)s: %(message)s"


class LoggerConfig(BaseModel):
    """Named logger writing single lines to a file, or to stderr.

    Calling :meth:`create_logger` again replaces the handler it installed
    earlier instead of adding a second one.
    """

    name: str = Field(min_length=1)
    log_path: Path | None = None
    level: str = "WARNING"

    _handler: logging.Handler | None = PrivateAttr(default=None)

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        try:
            resolve_level(value)
        except ConfigurationError as exc:
            raise ValueError(str(exc)) from exc
        return value.upper()

    @property
    def numeric_level(self) -> int:
        return resolve_level(self.level)

    def create_logger(self) -> logging.Logger:
        log = logging.getLogger(self.name)
        if self._handler is not None:
            log.removeHandler(self._handler)
            self._handler.close()

        handler: logging.Handler
        if self.log_path is None:
            handler = logging.StreamHandler()
        else:
            handler = logging.FileHandler(self.log_path, encoding="utf-8")
        handler.setLevel(self.numeric_level)
        handler.setFormatter(logging.Formatter(LINE_FORMAT))

        log.addHandler(handler)
        log.setLevel(self.numeric_level)
        self._handler = handler
        return log
