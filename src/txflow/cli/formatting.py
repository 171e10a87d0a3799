"""Shared output formatting for CLI commands."""

from decimal import Decimal


def format_amount(amount: Decimal) -> str:
    """Format an amount as currency, e.g. $1,500.75."""
    return f"${amount:,.2f}"


def format_signed(amount: Decimal) -> str:
    """Format a signed balance, e.g. -$20.00."""
    if amount < 0:
        return f"-{format_amount(-amount)}"
    return format_amount(amount)


def flag_marker(is_flagged: bool) -> str:
    return "[!]" if is_flagged else ""
