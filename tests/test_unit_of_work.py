"""Tests for the reentrant UnitOfWork."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest

from bookmark_bureau.adapters.memory import (
    InMemoryUnitOfWork,
    in_memory_unit_of_work_factory,
)
from bookmark_bureau.primitives.exceptions import InactiveUnitOfWorkError


def test_begin_and_commit() -> None:
    uow = InMemoryUnitOfWork()

    uow.begin()
    assert uow.is_active
    uow.commit()

    assert not uow.is_active
    assert uow.begin_count == 1
    assert uow.commit_count == 1


def test_nested_begin_joins_transaction() -> None:
    uow = InMemoryUnitOfWork()

    uow.begin()
    uow.begin()
    uow.begin()
    assert uow.level == 3
    uow.commit()
    uow.commit()
    assert uow.commit_count == 0
    uow.commit()

    assert uow.begin_count == 1
    assert uow.commit_count == 1


def test_commit_without_transaction_raises() -> None:
    with pytest.raises(InactiveUnitOfWorkError, match="No active transaction to commit"):
        InMemoryUnitOfWork().commit()


def test_rollback_without_transaction_raises() -> None:
    with pytest.raises(
        InactiveUnitOfWorkError, match="No active transaction to rollback"
    ):
        InMemoryUnitOfWork().rollback()


def test_rollback_abandons_every_level() -> None:
    uow = InMemoryUnitOfWork()
    uow.begin()
    uow.begin()

    uow.rollback()

    assert not uow.is_active
    assert uow.rollback_count == 1
    assert uow.rolled_back
    assert not uow.committed


def test_transactional_commits_on_success() -> None:
    uow = InMemoryUnitOfWork()

    assert uow.transactional(lambda: "saved") == "saved"

    assert uow.committed
    assert not uow.rolled_back


def test_transactional_rolls_back_and_reraises() -> None:
    uow = InMemoryUnitOfWork()
    error = ValueError("invalid link")

    def operation():
        raise error

    with pytest.raises(ValueError) as exc:
        uow.transactional(operation)

    assert exc.value is error
    assert uow.rollback_count == 1
    assert not uow.committed


def test_nested_transactional_failure_rolls_back_once() -> None:
    uow = InMemoryUnitOfWork()

    def inner():
        raise ValueError("inner failed")

    with pytest.raises(ValueError, match="inner failed"):
        uow.transactional(lambda: uow.transactional(inner))

    assert uow.begin_count == 1
    assert uow.rollback_count == 1
    assert not uow.is_active


class FailingCommitUnitOfWork(InMemoryUnitOfWork):
    def __init__(self) -> None:
        super().__init__()
        self.fail_next_commit = True

    def _do_commit(self) -> None:
        if self.fail_next_commit:
            self.fail_next_commit = False
            raise ConnectionError("commit failed")
        super()._do_commit()


def test_transactional_rolls_back_when_commit_fails() -> None:
    uow = FailingCommitUnitOfWork()

    with pytest.raises(ConnectionError, match="commit failed"):
        uow.transactional(lambda: 1)

    assert uow.rollback_count == 1
    assert uow.level == 0
    assert not uow.committed

    assert uow.transactional(lambda: 2) == 2
    assert uow.begin_count == 2
    assert uow.commit_count == 1
    assert uow.rollback_count == 1


def test_failed_commit_discards_hooks() -> None:
    uow = FailingCommitUnitOfWork()
    hook = MagicMock()

    with pytest.raises(ConnectionError):
        with uow:
            uow.on_commit(hook)

    hook.assert_not_called()
    assert uow.rollback_count == 1
    assert not uow.is_active


def test_context_manager_commits() -> None:
    uow = InMemoryUnitOfWork()

    with uow:
        with uow:
            assert uow.level == 2

    assert uow.commit_count == 1
    assert not uow.rolled_back


def test_context_manager_rolls_back_on_error() -> None:
    uow = InMemoryUnitOfWork()

    with pytest.raises(ValueError, match="oops"):
        with uow:
            with uow:
                raise ValueError("oops")

    assert uow.rollback_count == 1
    assert not uow.committed


def test_on_commit_hooks_run_after_outermost_commit() -> None:
    uow = InMemoryUnitOfWork()
    hook = MagicMock()

    with uow:
        with uow:
            uow.on_commit(hook)
        hook.assert_not_called()

    hook.assert_called_once_with()


def test_on_commit_hooks_are_discarded_on_rollback() -> None:
    uow = InMemoryUnitOfWork()
    hook = MagicMock()

    with pytest.raises(RuntimeError):
        with uow:
            uow.on_commit(hook)
            raise RuntimeError("abort")
    uow.transactional(lambda: None)

    hook.assert_not_called()


def test_failing_hook_is_logged_not_raised(caplog) -> None:
    caplog.set_level(logging.ERROR, logger="bookmark_bureau.uow")
    uow = InMemoryUnitOfWork()
    second_hook = MagicMock()

    with uow:
        uow.on_commit(MagicMock(side_effect=RuntimeError("hook failed")))
        uow.on_commit(second_hook)

    assert uow.committed
    second_hook.assert_called_once()
    assert "Error in on_commit hook: hook failed" in caplog.text


def test_reset() -> None:
    uow = in_memory_unit_of_work_factory()
    uow.begin()
    uow.rollback()
    uow.begin()

    uow.reset()

    assert not uow.is_active
    assert uow.begin_count == 0
    assert uow.rollback_count == 0
