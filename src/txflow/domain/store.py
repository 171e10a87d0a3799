"""In-memory transaction store."""

import logging
from typing import Iterable, Optional

from txflow.domain.entities import Account, Transaction
from txflow.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    duplicate_transaction_id,
    non_positive_amount,
    transaction_not_found,
)

logger = logging.getLogger(__name__)


class TransactionStore:
    """Holds the transaction and account records handed over at load time.

    Records are never added or removed afterwards. The flag toggle is the
    only mutation, applied in place by transaction id.
    """

    def __init__(
        self,
        transactions: Iterable[Transaction],
        accounts: Iterable[Account] = (),
    ):
        """Initialize the store.

        Args:
            transactions: Transaction records, in load order
            accounts: Account directory entries

        Raises:
            ConflictError: If two transactions share an id
            ValidationError: If a transaction amount is not positive
        """
        self._transactions: list[Transaction] = []
        self._by_id: dict[str, Transaction] = {}
        for txn in transactions:
            if txn.id in self._by_id:
                raise ConflictError(duplicate_transaction_id(txn.id))
            if txn.amount <= 0:
                raise ValidationError(non_positive_amount(txn.id, txn.amount))
            self._by_id[txn.id] = txn
            self._transactions.append(txn)

        self._accounts: dict[str, Account] = {acc.id: acc for acc in accounts}
        logger.debug(
            "Loaded %d transactions and %d accounts",
            len(self._transactions),
            len(self._accounts),
        )

    def __len__(self) -> int:
        return len(self._transactions)

    def all_transactions(self) -> list[Transaction]:
        """Return every transaction in load order."""
        return list(self._transactions)

    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        """Get transaction by ID, or None if unknown."""
        return self._by_id.get(transaction_id)

    def list_accounts(self) -> list[Account]:
        """List directory accounts in load order."""
        return list(self._accounts.values())

    def get_account(self, account_id: str) -> Optional[Account]:
        return self._accounts.get(account_id)

    def account_ids(self) -> set[str]:
        """Return ids from the directory plus any referenced by a transaction."""
        ids = set(self._accounts)
        for txn in self._transactions:
            ids.add(txn.source)
            ids.add(txn.destination)
        return ids

    def account_name(self, account_id: str) -> str:
        """Return the display name of an account.

        Accounts missing from the directory are shown under their raw id.
        """
        account = self._accounts.get(account_id)
        return account.name if account is not None else account_id

    def toggle_flag(self, transaction_id: str) -> bool:
        """Flip the flag of one transaction.

        Args:
            transaction_id: Transaction ID

        Returns:
            The new flag value

        Raises:
            NotFoundError: If transaction doesn't exist
        """
        txn = self._by_id.get(transaction_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))

        txn.is_flagged = not txn.is_flagged
        logger.debug("Transaction %s flagged=%s", transaction_id, txn.is_flagged)
        return txn.is_flagged

    def reset_flags(self) -> int:
        """Clear every flag. Returns the number of transactions that changed."""
        cleared = 0
        for txn in self._transactions:
            if txn.is_flagged:
                txn.is_flagged = False
                cleared += 1
        return cleared

    def flagged_transactions(self) -> list[Transaction]:
        return [txn for txn in self._transactions if txn.is_flagged]
