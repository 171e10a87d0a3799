"""Relationship tree command."""

import click

from txflow.cli.account_resolution import resolve_account_or_exit
from txflow.cli.filter_options import filter_options, resolve_cli_criteria
from txflow.cli.formatting import flag_marker, format_amount
from txflow.domain.entities import TreeDirection, TreeNode, ViewState
from txflow.domain.investigation import InvestigationService

ARROWS = {
    TreeDirection.OUTGOING: "->",
    TreeDirection.INCOMING: "<-",
}


def render_node(node: TreeNode, indent: int = 0) -> list[str]:
    """Render a subtree as indented text lines."""
    if node.depth == 0:
        label = "Money sent" if node.direction == TreeDirection.OUTGOING else "Money received"
        head = f"{label}: {format_amount(node.value)} in {node.transaction_count} transaction(s)"
    else:
        head = (
            f"{ARROWS[node.direction]} {node.name} ({node.account_id}) "
            f"{format_amount(node.value)} [{node.transaction_count}]"
        )
    marker = flag_marker(node.is_flagged)
    lines = ["  " * indent + head + (f" {marker}" if marker else "")]
    for child in node.children:
        lines.extend(render_node(child, indent + 1))
    return lines


@click.command("tree")
@click.argument("root", metavar="ACCOUNT")
@filter_options
@click.option(
    "--direction",
    type=click.Choice(["both", "out", "in"]),
    default="both",
    show_default=True,
    help="Which side of the tree to show",
)
@click.pass_context
def show_tree(
    ctx,
    root: str,
    min_amount: str | None,
    max_amount: str | None,
    min_flow: str | None,
    max_flow: str | None,
    accounts: tuple[str, ...],
    direction: str,
):
    """Show where money sent by ACCOUNT went and where its money came from.

    ACCOUNT can be an account name or ID.

    Examples:
        txflow tree acc1
        txflow tree "Shell Corp Beta" --direction out --min-amount 1000
    """
    store = ctx.obj["store"]
    service = InvestigationService(store, ctx.obj["config"])

    root_id = resolve_account_or_exit(ctx, store, root)
    criteria = resolve_cli_criteria(
        ctx,
        store,
        min_amount=min_amount,
        max_amount=max_amount,
        min_flow=min_flow,
        max_flow=max_flow,
        accounts=accounts,
    )
    tree = service.build_tree(ViewState(filters=criteria, root_account=root_id))

    click.echo(
        f"\n{tree.name} ({tree.account_id}): {format_amount(tree.value)} "
        f"across {tree.transaction_count} transaction(s)"
    )
    click.echo("-" * 70)

    shown = [
        side
        for side in tree.children
        if direction == "both" or side.direction.value == direction
    ]
    if not shown:
        click.echo("No counterparties found.")
        return

    for side in shown:
        for line in render_node(side):
            click.echo(line)


def register_commands(cli):
    """Register tree command with main CLI."""
    cli.add_command(show_tree)
