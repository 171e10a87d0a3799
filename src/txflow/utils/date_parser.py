"""Date parsing utilities."""

import re
from datetime import date, datetime, timedelta
from typing import Union

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from txflow.domain.errors import MalformedDateError

DateLike = Union[str, date, datetime]

ISO_DAY = re.compile(r"\d{4}-\d{2}-\d{2}(?:[T ]|$)")


def parse_transaction_date(value: DateLike) -> date:
    """Parse a transaction date into a calendar day.

    Transaction dates must start with a full YYYY-MM-DD day ("2024-07-01",
    "2024-07-01T09:30:00"). Partial, week and ordinal ISO forms are rejected.
    Any time-of-day component is discarded.

    Args:
        value: ISO date string, date or datetime

    Returns:
        Calendar day of the transaction

    Raises:
        MalformedDateError: If the value is not a valid ISO date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise MalformedDateError(f"Could not parse date {value!r}: empty or not a string")

    value = value.strip()
    if not ISO_DAY.match(value):
        raise MalformedDateError(f"Could not parse date '{value}': expected YYYY-MM-DD")

    try:
        return date_parser.isoparse(value).date()
    except (ValueError, OverflowError) as e:
        raise MalformedDateError(f"Could not parse date '{value}': {e}")


def parse_date(date_str: str) -> date:
    """Parse a user-supplied date string into a date object.

    Supports absolute dates ("2024-01-15", "January 15, 2024") and the
    relative words "today", "yesterday", "last month" and "this month".

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        MalformedDateError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "this month": today.replace(day=1),
        "last month": (today - relativedelta(months=1)).replace(day=1),
    }
    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        return date_parser.parse(date_str).date()
    except (ValueError, TypeError, OverflowError) as e:
        raise MalformedDateError(f"Could not parse date '{date_str}': {e}")


def pad_day_range(start: date, end: date, padding_days: int) -> tuple[date, date]:
    """Widen an inclusive day range by padding_days on each side."""
    padding = timedelta(days=padding_days)
    return (start - padding, end + padding)
