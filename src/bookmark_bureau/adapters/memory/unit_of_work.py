"""InMemoryUnitOfWork: tracks begin/commit/rollback calls for unit tests."""

from __future__ import annotations

from ...ports.unit_of_work import UnitOfWork


class InMemoryUnitOfWork(UnitOfWork):
    """In-memory implementation of UnitOfWork for testing.

    Counts only the calls that reach the store, i.e. the outermost
    begin/commit and every rollback.
    """

    def __init__(self) -> None:
        super().__init__()
        self.begin_count: int = 0
        self.commit_count: int = 0
        self.rollback_count: int = 0

    @property
    def committed(self) -> bool:
        return self.commit_count > 0

    @property
    def rolled_back(self) -> bool:
        return self.rollback_count > 0

    def _do_begin(self) -> None:
        self.begin_count += 1

    def _do_commit(self) -> None:
        self.commit_count += 1

    def _do_rollback(self) -> None:
        self.rollback_count += 1

    # ── Test helpers ─────────────────────────────────────────────

    def reset(self) -> None:
        """Reset tracking and nesting state (for test setup)."""
        self._transaction_level = 0
        self._on_commit_hooks.clear()
        self.begin_count = 0
        self.commit_count = 0
        self.rollback_count = 0


def in_memory_unit_of_work_factory() -> InMemoryUnitOfWork:
    return InMemoryUnitOfWork()
