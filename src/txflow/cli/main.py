"""Main CLI entry point."""

import logging
from dataclasses import replace

import click

from txflow.cli.commands import accounts, flow, transactions, tree
from txflow.cli.error_handling import handle_domain_error
from txflow.config import EngineConfig, TieBreak, parse_tie_break
from txflow.domain.errors import ConfigurationError
from txflow.sample_data import load_sample_store


@click.group()
@click.option(
    "--max-depth",
    type=int,
    envvar="TXFLOW_MAX_DEPTH",
    help="Maximum number of edges on a tree path (env: TXFLOW_MAX_DEPTH)",
)
@click.option(
    "--max-children",
    type=int,
    envvar="TXFLOW_MAX_CHILDREN",
    help="Maximum counterparties kept per tree node (env: TXFLOW_MAX_CHILDREN)",
)
@click.option(
    "--tie-break",
    type=click.Choice([option.value for option in TieBreak]),
    envvar="TXFLOW_TIE_BREAK",
    help="Ordering of counterparties with equal totals (env: TXFLOW_TIE_BREAK)",
)
@click.option(
    "--date-padding-days",
    type=int,
    envvar="TXFLOW_DATE_PADDING_DAYS",
    help="Days added around the data when no flow window is given (env: TXFLOW_DATE_PADDING_DAYS)",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    envvar="TXFLOW_LOG_LEVEL",
    show_default=True,
    help="Logging level (env: TXFLOW_LOG_LEVEL)",
)
@click.pass_context
def cli(
    ctx,
    max_depth: int | None,
    max_children: int | None,
    tie_break: str | None,
    date_padding_days: int | None,
    log_level: str,
):
    """txflow - Transaction flow inspection.

    Builds relationship trees and day-bucketed flow views over the bundled
    sample dataset.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Only build state when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        overrides = {}
        if max_depth is not None:
            overrides["max_depth"] = max_depth
        if max_children is not None:
            overrides["max_children_per_node"] = max_children
        if date_padding_days is not None:
            overrides["date_padding_days"] = date_padding_days
        try:
            if tie_break is not None:
                overrides["tie_break"] = parse_tie_break(tie_break)
            ctx.obj["config"] = replace(EngineConfig.from_env(), **overrides)
        except ConfigurationError as e:
            handle_domain_error(ctx, e)
        ctx.obj["store"] = load_sample_store()


accounts.register_commands(cli)
transactions.register_commands(cli)
tree.register_commands(cli)
flow.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
