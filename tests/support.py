"""Test doubles shared across test modules."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Counter:
    """Minimal payload object threaded through pipelines."""

    value: int


class RecordingMiddleware:
    """Appends ``<name>_before`` / ``<name>_after`` to a shared list."""

    def __init__(self, name: str, calls: list[str]) -> None:
        self.name = name
        self.calls = calls

    def process(self, data, next_handler):
        self.calls.append(f"{self.name}_before")
        result = next_handler(data)
        self.calls.append(f"{self.name}_after")
        return result


class CallingTwiceMiddleware:
    """Misbehaving middleware invoking its continuation twice."""

    def process(self, data, next_handler):
        next_handler(data)
        return next_handler(data)
