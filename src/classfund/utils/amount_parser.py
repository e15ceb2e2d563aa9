"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "฿123.45" or "$123.45"
    - "1,234.56"
    - "123.45 THB" / "123 baht"

    The sign is preserved so callers can reject negative input with a
    proper domain error instead of a parse failure.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    # Remove whitespace
    amount_str = amount_str.strip()

    # Remove currency symbols and unit words
    amount_str = re.sub(r"[฿$€£¥]", "", amount_str)
    amount_str = re.sub(r"(?i)\s*(thb|baht)$", "", amount_str)

    # Remove thousands separators
    amount_str = amount_str.replace(",", "")

    # Remove whitespace again
    amount_str = amount_str.strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e!r}")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}': not a finite number")
    return amount
