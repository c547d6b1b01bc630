"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


def parse_amount(amount: str | int | float | Decimal) -> Decimal:
    """Parse an amount into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "-123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Numbers are accepted directly; floats go through ``str`` so that
    ``0.1`` becomes ``Decimal("0.1")`` rather than its binary expansion.

    Args:
        amount: Amount string or number

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount cannot be parsed
    """
    if isinstance(amount, bool):
        raise ValueError(f"Could not parse amount {amount!r}")
    if isinstance(amount, (int, float, Decimal)):
        amount_str = str(amount)
    elif amount is None or not str(amount).strip():
        raise ValueError("Empty amount string")
    else:
        amount_str = str(amount)

    amount_str = amount_str.strip()

    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Remove currency symbols
    amount_str = re.sub(r"[$€£¥]", "", amount_str)
    amount_str = amount_str.replace(",", "").strip()

    try:
        value = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")
    if not value.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}': not a finite number")
    return -value if is_negative else value
