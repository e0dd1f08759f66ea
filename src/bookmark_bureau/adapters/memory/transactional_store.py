"""InMemoryTransactionalStore: records transaction calls for unit tests."""

from __future__ import annotations

from ...primitives.exceptions import TransactionStateError


class InMemoryTransactionalStore:
    """In-memory implementation of ITransactionalStore for testing.

    Behaves like a non-reentrant driver: ``begin()`` while a transaction is
    open raises, as does ``commit()``/``rollback()`` without one. Records
    every call for assertions.
    """

    def __init__(self) -> None:
        self.in_transaction: bool = False
        self.begin_count: int = 0
        self.commit_count: int = 0
        self.rollback_count: int = 0
        self.calls: list[str] = []

    def begin(self) -> bool:
        if self.in_transaction:
            raise TransactionStateError("There is already an active transaction")
        self.in_transaction = True
        self.begin_count += 1
        self.calls.append("begin")
        return True

    def commit(self) -> bool:
        if not self.in_transaction:
            raise TransactionStateError("There is no active transaction")
        self.in_transaction = False
        self.commit_count += 1
        self.calls.append("commit")
        return True

    def rollback(self) -> bool:
        if not self.in_transaction:
            raise TransactionStateError("There is no active transaction")
        self.in_transaction = False
        self.rollback_count += 1
        self.calls.append("rollback")
        return True

    # ── Test helpers ─────────────────────────────────────────────

    def reset(self) -> None:
        """Reset call tracking (for test setup)."""
        self.in_transaction = False
        self.begin_count = 0
        self.commit_count = 0
        self.rollback_count = 0
        self.calls.clear()
