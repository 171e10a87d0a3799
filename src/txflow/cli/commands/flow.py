"""Flow band and running balance command."""

import click

from txflow.cli.account_resolution import resolve_account_or_exit
from txflow.cli.filter_options import (
    filter_options,
    resolve_cli_criteria,
    resolve_cli_window,
)
from txflow.cli.formatting import flag_marker, format_amount, format_signed
from txflow.domain.entities import ViewState
from txflow.domain.investigation import InvestigationService


@click.command("flow")
@filter_options
@click.option("--start-date", help="First visible day (YYYY-MM-DD)")
@click.option("--end-date", help="Last visible day (YYYY-MM-DD)")
@click.option("--balances-for", help="Show the running balance history of this account")
@click.pass_context
def show_flow(
    ctx,
    min_amount: str | None,
    max_amount: str | None,
    min_flow: str | None,
    max_flow: str | None,
    accounts: tuple[str, ...],
    start_date: str | None,
    end_date: str | None,
    balances_for: str | None,
):
    """Show day-bucketed flows between accounts and running balances.

    Examples:
        txflow flow --start-date 2024-07-01 --end-date 2024-07-31
        txflow flow --account acc3 --balances-for acc3
    """
    store = ctx.obj["store"]
    service = InvestigationService(store, ctx.obj["config"])

    criteria = resolve_cli_criteria(
        ctx,
        store,
        min_amount=min_amount,
        max_amount=max_amount,
        min_flow=min_flow,
        max_flow=max_flow,
        accounts=accounts,
    )
    window = resolve_cli_window(ctx, start_date=start_date, end_date=end_date)
    history_account = None
    if balances_for:
        history_account = resolve_account_or_exit(ctx, store, balances_for)

    snapshot = service.snapshot(ViewState(filters=criteria, window=window))
    flow = snapshot.flow
    if window is None:
        # No explicit dates: show the padded span of the selection
        window = service.flow_aggregator.default_window(snapshot.full_flow.bands)
        flow = snapshot.full_flow.restrict(window)

    if not flow.bands:
        click.echo("No flows found.")
        return

    click.echo(f"\nWindow: {window.start or 'open'} to {window.end or 'open'}")
    click.echo(f"\nFound {len(flow.bands)} flow band(s):")
    click.echo("-" * 90)
    click.echo(f"{'Day':<12} {'From':<26} {'To':<26} {'Amount':<14} {'Txns':<5} {'Flag':<4}")
    click.echo("-" * 90)
    for band in flow.bands:
        click.echo(
            f"{str(band.day):<12} {store.account_name(band.source)[:26]:<26} "
            f"{store.account_name(band.destination)[:26]:<26} "
            f"{format_amount(band.amount):<14} {len(band.transactions):<5} "
            f"{flag_marker(band.is_flagged):<4}"
        )

    click.echo("\nBalances at end of window:")
    for account_id, balance in flow.final_balances().items():
        click.echo(f"  {store.account_name(account_id):<28} {format_signed(balance)}")

    if history_account is not None:
        history = flow.history(history_account)
        click.echo(f"\nBalance history for {store.account_name(history_account)}:")
        if not history:
            click.echo("  No samples in window.")
        for sample in history:
            click.echo(
                f"  {sample.day}  in {format_amount(sample.inflow):>12}  "
                f"out {format_amount(sample.outflow):>12}  "
                f"balance {format_signed(sample.balance)}"
            )


def register_commands(cli):
    """Register flow command with main CLI."""
    cli.add_command(show_flow)
