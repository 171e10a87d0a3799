"""Tests for building records from raw rows."""

from datetime import date
from decimal import Decimal

import pytest

from txflow.domain.errors import ValidationError
from txflow.domain.records import build_accounts, build_transaction, build_transactions


def _row(**overrides):
    row = {
        "id": "tx-1",
        "date": "2024-07-01",
        "from": "acc1",
        "to": "acc2",
        "amount": 1500.75,
        "type": "DEFT",
        "description": "Salary Deposit - July",
    }
    row.update(overrides)
    return row


def test_build_transaction():
    txn = build_transaction(_row())

    assert txn.id == "tx-1"
    assert txn.date == date(2024, 7, 1)
    assert txn.source == "acc1"
    assert txn.destination == "acc2"
    assert txn.amount == Decimal("1500.75")
    assert txn.type == "DEFT"
    assert txn.is_flagged is False
    assert txn.raw_date == "2024-07-01"


def test_snake_case_fields_and_flag():
    row = _row(is_flagged=True)
    row["source"] = row.pop("from")
    row["destination"] = row.pop("to")

    txn = build_transaction(row)

    assert txn.source == "acc1"
    assert txn.destination == "acc2"
    assert txn.is_flagged is True


def test_malformed_date_keeps_record(caplog):
    txn = build_transaction(_row(date="2024-13-45"))

    assert txn.date is None
    assert txn.raw_date == "2024-13-45"
    assert "malformed date" in caplog.text


def test_partial_iso_date_keeps_record(caplog):
    txn = build_transaction(_row(date="2024-07"))

    assert txn.date is None
    assert txn.raw_date == "2024-07"
    assert "malformed date" in caplog.text


def test_time_of_day_is_discarded():
    assert build_transaction(_row(date="2024-07-01T23:59:00")).date == date(2024, 7, 1)


@pytest.mark.parametrize("amount", [0, -5, "0.00"])
def test_non_positive_amount_rejected(amount):
    with pytest.raises(ValidationError):
        build_transaction(_row(amount=amount))


def test_unparseable_amount_rejected():
    with pytest.raises(ValidationError):
        build_transaction(_row(amount="lots"))


def test_missing_account_rejected():
    row = _row()
    del row["to"]

    with pytest.raises(ValidationError):
        build_transaction(row)


def test_missing_id_rejected():
    with pytest.raises(ValidationError):
        build_transaction(_row(id=""))


def test_build_transactions_preserves_order():
    rows = [_row(id="b"), _row(id="a")]

    assert [txn.id for txn in build_transactions(rows)] == ["b", "a"]


def test_build_accounts_name_fallback():
    accounts = build_accounts([{"id": "acc1", "name": "Alpha"}, {"id": "acc9"}])

    assert [(acc.id, acc.name) for acc in accounts] == [("acc1", "Alpha"), ("acc9", "acc9")]
