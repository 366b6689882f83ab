"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

_NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)$")


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount or rate string into a Decimal.

    Accepts plain decimal notation:
    - "123.45"
    - "-123.45"
    - "0.05"
    - ".5"

    Exponents, thousands separators and non-finite values such as
    "NaN" or "Infinity" are rejected.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if amount_str is None or not amount_str.strip():
        raise ValueError("Empty amount string")

    # Remove whitespace
    amount_str = amount_str.strip()

    if not _NUMBER_RE.match(amount_str):
        raise ValueError(f"Could not parse amount '{amount_str}'")

    try:
        return Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")
