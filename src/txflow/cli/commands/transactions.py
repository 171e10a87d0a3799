"""Transaction listing command."""

import click

from txflow.cli.filter_options import filter_options, resolve_cli_criteria
from txflow.cli.formatting import flag_marker, format_amount
from txflow.domain.filters import FilterPipeline


@click.command("transactions")
@filter_options
@click.option("--flagged", is_flag=True, help="Only show flagged transactions")
@click.option("--flag", "flag_ids", multiple=True, help="Toggle the flag of a transaction ID first (repeatable)")
@click.pass_context
def list_transactions(
    ctx,
    min_amount: str | None,
    max_amount: str | None,
    min_flow: str | None,
    max_flow: str | None,
    accounts: tuple[str, ...],
    flagged: bool,
    flag_ids: tuple[str, ...],
):
    """List transactions matching the filters.

    Examples:
        txflow transactions --min-amount 9000 --max-amount 9999
        txflow transactions --account acc1 --flag tx-8 --flagged
    """
    store = ctx.obj["store"]

    for transaction_id in flag_ids:
        try:
            store.toggle_flag(transaction_id)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)

    criteria = resolve_cli_criteria(
        ctx,
        store,
        min_amount=min_amount,
        max_amount=max_amount,
        min_flow=min_flow,
        max_flow=max_flow,
        accounts=accounts,
    )
    transactions = FilterPipeline().apply(store.all_transactions(), criteria)
    if flagged:
        transactions = [txn for txn in transactions if txn.is_flagged]

    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    click.echo("-" * 110)
    click.echo(
        f"{'ID':<8} {'Date':<12} {'Amount':<14} {'From':<24} {'To':<24} {'Type':<6} {'Flag':<4}"
    )
    click.echo("-" * 110)

    for txn in transactions:
        day = str(txn.date) if txn.date is not None else f"? {txn.raw_date or ''}"
        click.echo(
            f"{txn.id:<8} {day:<12} {format_amount(txn.amount):<14} "
            f"{store.account_name(txn.source)[:24]:<24} "
            f"{store.account_name(txn.destination)[:24]:<24} "
            f"{txn.type:<6} {flag_marker(txn.is_flagged):<4}"
        )


def register_commands(cli):
    """Register transactions command with main CLI."""
    cli.add_command(list_transactions)
