"""Money presentation helpers.

Amounts are accumulated as full-precision ``Decimal`` values throughout the
engine and rounded to cents only when they leave it.
"""

from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")


def to_cents(amount: Decimal | int | str) -> Decimal:
    """Round an amount to two decimal places (half up).

    Negative zero is normalized so it never renders as "-0.00".
    """
    quantized = as_decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)
    if quantized == 0:
        return abs(quantized)
    return quantized


def money_str(amount: Decimal | int | str) -> str:
    """Return a plain 2-decimal string, e.g. '1234.50'."""
    return str(to_cents(amount))


def format_money(amount: Decimal | int | str, symbol: str = "$") -> str:
    """Format an amount for display, e.g. '$1,234.56'."""
    return f"{symbol}{to_cents(amount):,.2f}"


def format_percent(value: Decimal | int | str) -> str:
    """Format a percentage for display, e.g. '18.99%'."""
    return f"{to_cents(value)}%"


def as_decimal(value: Decimal | int | float | str) -> Decimal:
    """Coerce a number to Decimal without picking up float binary noise."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))
