"""Primitives shared across bookmark-bureau."""

from .exceptions import (
    BookmarkBureauError,
    ConfigurationError,
    InactiveUnitOfWorkError,
    OperationPipelineError,
    PersistenceError,
    TransactionStateError,
    UnitOfWorkError,
)

__all__ = [
    "BookmarkBureauError",
    "ConfigurationError",
    "InactiveUnitOfWorkError",
    "OperationPipelineError",
    "PersistenceError",
    "TransactionStateError",
    "UnitOfWorkError",
]
