"""CLI helpers for account resolution."""

from __future__ import annotations

import click

from txflow.cli.error_handling import handle_domain_error
from txflow.domain.store import TransactionStore
from txflow.utils.account_resolver import resolve_account


def resolve_account_or_exit(ctx: click.Context, store: TransactionStore, account: str) -> str:
    """Resolve account name or ID, or exit with a CLI error."""
    try:
        return resolve_account(store, account)
    except ValueError as exc:
        handle_domain_error(ctx, exc)
