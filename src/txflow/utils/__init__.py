"""Utility functions for txflow."""

from txflow.utils.date_parser import parse_date, parse_transaction_date
from txflow.utils.amount_parser import parse_amount

__all__ = ["parse_date", "parse_transaction_date", "parse_amount"]
