"""Account listing command."""

import click

from txflow.cli.formatting import format_amount
from txflow.domain.flow import TemporalFlowAggregator


@click.command("accounts")
@click.pass_context
def list_accounts(ctx):
    """List accounts ordered by total volume moved.

    Accounts referenced by transactions but missing from the directory are
    listed under their raw ID.
    """
    store = ctx.obj["store"]
    aggregator = TemporalFlowAggregator(ctx.obj["config"])

    volumes = aggregator.account_volumes(store.all_transactions())
    if not volumes:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 70)
    for account_id, volume in volumes:
        name = store.account_name(account_id)
        click.echo(f"ID: {account_id:8s} | {name:28s} | Volume: {format_amount(volume)}")


def register_commands(cli):
    """Register accounts command with main CLI."""
    cli.add_command(list_accounts)
