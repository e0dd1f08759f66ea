"""Exceptions for bookmark-bureau."""

from __future__ import annotations


class BookmarkBureauError(Exception):
    """Root exception for the entire bookmark-bureau package."""


class OperationPipelineError(BookmarkBureauError):
    """Raised when a middleware breaks the pipeline contract.

    Currently raised by :class:`~bookmark_bureau.pipeline.OperationHandler`
    when a continuation is invoked more than once for a single handling pass.
    """


class ConfigurationError(BookmarkBureauError):
    """Raised when configuration values are invalid or incomplete."""


class PersistenceError(BookmarkBureauError):
    """Base class for all persistence-related errors."""


class TransactionStateError(PersistenceError):
    """Raised when a store receives a transaction call it cannot honour.

    E.g. ``begin()`` while a transaction is already open on a
    non-reentrant driver, or ``commit()`` with nothing to commit.
    """


class UnitOfWorkError(PersistenceError):
    """Raised when Unit of Work operations fail."""


class InactiveUnitOfWorkError(UnitOfWorkError):
    """Raised on commit/rollback when no transaction has been started."""
