"""Build store records from raw in-memory rows.

Rows use the field names of the visualizer's data feed: ``id``, ``date``,
``from``, ``to``, ``amount``, ``type``, ``description`` and ``isFlagged``.
Snake-case variants (``source``, ``destination``, ``is_flagged``) are
accepted as well.
"""

import logging
from typing import Any, Iterable, Mapping

from txflow.domain.entities import Account, Transaction
from txflow.domain.errors import MalformedDateError, ValidationError, non_positive_amount
from txflow.utils.amount_parser import parse_amount
from txflow.utils.date_parser import parse_transaction_date

logger = logging.getLogger(__name__)


def _first(row: Mapping[str, Any], *keys: str, default=None):
    for key in keys:
        if key in row and row[key] is not None:
            return row[key]
    return default


def build_transaction(row: Mapping[str, Any]) -> Transaction:
    """Build a Transaction from a raw row.

    A date that fails to parse is not fatal: the record is kept with
    ``date=None`` so it still shows up in flat lists and trees.

    Args:
        row: Raw transaction row

    Returns:
        Transaction entity

    Raises:
        ValidationError: If the id, accounts or amount are missing or invalid
    """
    transaction_id = str(_first(row, "id", default="")).strip()
    if not transaction_id:
        raise ValidationError("Transaction id is required")

    source = _first(row, "from", "source")
    destination = _first(row, "to", "destination")
    if source is None or destination is None:
        raise ValidationError(
            f"Transaction '{transaction_id}' needs both a source and a destination account"
        )

    try:
        amount = parse_amount(_first(row, "amount"))
    except ValueError as e:
        raise ValidationError(f"Transaction '{transaction_id}': {e}")
    if amount <= 0:
        raise ValidationError(non_positive_amount(transaction_id, amount))

    raw_date = _first(row, "date")
    try:
        day = parse_transaction_date(raw_date)
    except MalformedDateError as e:
        logger.warning("Transaction %s has a malformed date: %s", transaction_id, e)
        day = None

    return Transaction(
        id=transaction_id,
        date=day,
        source=str(source),
        destination=str(destination),
        amount=amount,
        type=str(_first(row, "type", default="Other")),
        description=_first(row, "description"),
        is_flagged=bool(_first(row, "isFlagged", "is_flagged", default=False)),
        raw_date=None if raw_date is None else str(raw_date),
    )


def build_transactions(rows: Iterable[Mapping[str, Any]]) -> list[Transaction]:
    """Build Transactions from raw rows, preserving order."""
    return [build_transaction(row) for row in rows]


def build_accounts(rows: Iterable[Mapping[str, Any]]) -> list[Account]:
    """Build Accounts from raw ``{"id": ..., "name": ...}`` rows.

    A missing name falls back to the id.
    """
    accounts = []
    for row in rows:
        account_id = str(row["id"])
        accounts.append(Account(id=account_id, name=str(row.get("name") or account_id)))
    return accounts
