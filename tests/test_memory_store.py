"""Tests for InMemoryTransactionalStore."""

from __future__ import annotations

import pytest

from bookmark_bureau.adapters.memory import InMemoryTransactionalStore
from bookmark_bureau.ports import ITransactionalStore
from bookmark_bureau.primitives.exceptions import TransactionStateError


def test_records_calls(store: InMemoryTransactionalStore) -> None:
    assert store.begin() is True
    assert store.commit() is True
    store.begin()
    store.rollback()

    assert store.calls == ["begin", "commit", "begin", "rollback"]
    assert (store.begin_count, store.commit_count, store.rollback_count) == (2, 1, 1)
    assert isinstance(store, ITransactionalStore)


def test_is_not_reentrant(store: InMemoryTransactionalStore) -> None:
    store.begin()

    with pytest.raises(TransactionStateError, match="already an active transaction"):
        store.begin()


@pytest.mark.parametrize("method", ["commit", "rollback"])
def test_requires_active_transaction(
    store: InMemoryTransactionalStore, method: str
) -> None:
    with pytest.raises(TransactionStateError, match="no active transaction"):
        getattr(store, method)()


def test_reset(store: InMemoryTransactionalStore) -> None:
    store.begin()

    store.reset()

    assert not store.in_transaction
    assert store.calls == []
    assert store.begin_count == 0
