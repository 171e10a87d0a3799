"""Tests for the transaction store."""

import pytest

from txflow.domain.errors import ConflictError, NotFoundError, ValidationError
from txflow.domain.store import TransactionStore


def test_preserves_load_order(store):
    assert [txn.id for txn in store.all_transactions()] == ["t1", "t2"]
    assert len(store) == 2


def test_duplicate_ids_rejected(make_txn):
    with pytest.raises(ConflictError) as excinfo:
        TransactionStore([make_txn("t1", "A", "B", 1), make_txn("t1", "B", "C", 2)])

    assert "t1" in str(excinfo.value)


@pytest.mark.parametrize("amount", [0, -25])
def test_non_positive_amount_rejected(make_txn, amount):
    with pytest.raises(ValidationError) as excinfo:
        TransactionStore([make_txn("t1", "A", "B", 10), make_txn("t2", "B", "C", amount)])

    assert "t2" in str(excinfo.value)


def test_toggle_flag_in_place(store):
    txn = store.get_transaction("t1")

    assert store.toggle_flag("t1") is True
    assert txn.is_flagged
    assert store.toggle_flag("t1") is False
    assert not txn.is_flagged


def test_toggle_unknown_transaction(store):
    with pytest.raises(NotFoundError):
        store.toggle_flag("missing")


def test_reset_flags(store):
    store.toggle_flag("t1")
    store.toggle_flag("t2")

    assert store.reset_flags() == 2
    assert store.flagged_transactions() == []
    assert store.reset_flags() == 0


def test_account_name_falls_back_to_id(store):
    assert store.account_name("A") == "Alpha"
    assert store.account_name("acc-unknown") == "acc-unknown"


def test_account_ids_include_referenced_accounts(directory, make_txn):
    store = TransactionStore([make_txn("t1", "A", "Q", 5)], directory)

    assert store.account_ids() == {"A", "B", "C", "Q"}
    assert store.get_account("Q") is None
