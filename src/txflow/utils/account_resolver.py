"""Utility for resolving account names to IDs."""

from txflow.domain.errors import NotFoundError, account_not_found
from txflow.domain.store import TransactionStore


def resolve_account(store: TransactionStore, account: str) -> str:
    """Resolve account name or ID to account ID.

    An id known to the directory wins over a name. Ids that only appear on
    transactions are accepted as well, since such accounts are displayed
    under their raw id.

    Args:
        store: TransactionStore instance
        account: Account ID or display name (case-insensitive)

    Returns:
        Account ID

    Raises:
        NotFoundError: If account is not found
    """
    account = account.strip()
    if account in store.account_ids():
        return account

    wanted = account.lower()
    for acc in store.list_accounts():
        if acc.name.lower() == wanted:
            return acc.id

    raise NotFoundError(account_not_found(account))
