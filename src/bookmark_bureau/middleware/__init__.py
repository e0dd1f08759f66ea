"""Operation middleware."""

from .logging import LoggingMiddleware
from .transaction import TransactionMiddleware

__all__ = [
    "LoggingMiddleware",
    "TransactionMiddleware",
]
