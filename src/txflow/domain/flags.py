"""Flag propagation from transactions to the aggregates built from them."""

from typing import Iterable, Protocol


class Flaggable(Protocol):
    id: str
    is_flagged: bool


def any_flagged(transactions: Iterable[Flaggable]) -> bool:
    """Return True if at least one constituent transaction is flagged.

    The result is derived on every call; callers re-read it after a toggle.
    """
    return any(txn.is_flagged for txn in transactions)


def flagged_ids(transactions: Iterable[Flaggable]) -> list[str]:
    """Return the ids of flagged transactions, in input order."""
    return [txn.id for txn in transactions if txn.is_flagged]
