"""CLI helpers for filter criteria and day windows."""

from decimal import Decimal
from typing import Optional

import click

from txflow.cli.account_resolution import resolve_account_or_exit
from txflow.cli.error_handling import handle_domain_error
from txflow.domain.entities import AmountRange, DayWindow, FilterCriteria
from txflow.domain.filters import FilterPipeline
from txflow.domain.store import TransactionStore
from txflow.utils.amount_parser import parse_amount
from txflow.utils.date_parser import parse_date


def filter_options(command):
    """Attach the shared amount, flow and account filter options to a command."""
    options = [
        click.option("--min-amount", help="Smallest transaction amount to keep"),
        click.option("--max-amount", help="Largest transaction amount to keep"),
        click.option("--min-flow", help="Smallest total volume between an account pair"),
        click.option("--max-flow", help="Largest total volume between an account pair"),
        click.option(
            "--account",
            "accounts",
            multiple=True,
            help="Only show transactions touching this account (name or ID, repeatable)",
        ),
    ]
    for option in reversed(options):
        command = option(command)
    return command


def _parse_optional_amount(ctx, label: str, value: Optional[str]) -> Optional[Decimal]:
    if value is None:
        return None
    try:
        return parse_amount(value)
    except ValueError as e:
        handle_domain_error(ctx, ValueError(f"Invalid {label}: {e}"))


def _resolve_range(
    ctx,
    label: str,
    low: Optional[str],
    high: Optional[str],
    bounds: AmountRange,
) -> Optional[AmountRange]:
    """Build an inclusive range; a missing side falls back to the data bounds."""
    low_value = _parse_optional_amount(ctx, f"minimum {label}", low)
    high_value = _parse_optional_amount(ctx, f"maximum {label}", high)
    if low_value is None and high_value is None:
        return None

    if low_value is None:
        low_value = min(bounds[0], high_value)
    if high_value is None:
        high_value = max(bounds[1], low_value)
    if low_value > high_value:
        handle_domain_error(
            ctx, ValueError(f"Minimum {label} {low_value} is greater than maximum {high_value}")
        )
    return (low_value, high_value)


def resolve_cli_criteria(
    ctx,
    store: TransactionStore,
    *,
    min_amount: Optional[str],
    max_amount: Optional[str],
    min_flow: Optional[str],
    max_flow: Optional[str],
    accounts: tuple[str, ...] = (),
) -> FilterCriteria:
    """Resolve CLI filter options into FilterCriteria."""
    pipeline = FilterPipeline()
    transactions = store.all_transactions()

    return FilterCriteria(
        amount_range=_resolve_range(
            ctx, "amount", min_amount, max_amount, pipeline.amount_bounds(transactions)
        ),
        flow_range=_resolve_range(
            ctx, "flow", min_flow, max_flow, pipeline.flow_bounds(transactions)
        ),
        active_accounts=frozenset(
            resolve_account_or_exit(ctx, store, account) for account in accounts
        ),
    )


def resolve_cli_window(
    ctx, *, start_date: Optional[str], end_date: Optional[str]
) -> Optional[DayWindow]:
    """Resolve --start-date/--end-date into a DayWindow, or None if both are unset."""
    start = None
    if start_date:
        try:
            start = parse_date(start_date)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)

    end = None
    if end_date:
        try:
            end = parse_date(end_date)
        except ValueError as e:
            click.echo(f"Error: Invalid end date: {e}", err=True)
            ctx.exit(1)

    if start is None and end is None:
        return None
    if start is not None and end is not None and start > end:
        click.echo("Error: Start date must not be after end date.", err=True)
        ctx.exit(1)
    return DayWindow(start=start, end=end)
