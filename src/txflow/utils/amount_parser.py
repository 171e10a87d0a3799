"""Amount parsing utilities."""

import re
from decimal import Decimal, InvalidOperation
from typing import Union

AmountLike = Union[str, int, float, Decimal]


def parse_amount(value: AmountLike) -> Decimal:
    """Parse an amount into a Decimal.

    Handles numbers and strings such as:
    - "123.45"
    - "$123.45"
    - "1,234.56"
    - "A$9,500.00"

    Floats are converted through their string form so that 1500.75 stays
    Decimal("1500.75").

    Args:
        value: Amount as a number or string

    Returns:
        Decimal amount

    Raises:
        ValueError: If the value cannot be parsed
    """
    if isinstance(value, bool):
        raise ValueError(f"Could not parse amount {value!r}")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, float):
        amount = Decimal(repr(value))
    else:
        if value is None or not str(value).strip():
            raise ValueError("Empty amount string")
        amount_str = re.sub(r"[A-Z]*[$€£¥]", "", str(value).strip())
        amount_str = amount_str.replace(",", "").strip()
        try:
            amount = Decimal(amount_str)
        except InvalidOperation as e:
            raise ValueError(f"Could not parse amount '{value}': {e!r}")

    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{value}': not a finite number")
    return amount
