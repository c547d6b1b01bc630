"""Utility functions for flowcast."""

from flowcast.utils.date_parser import as_day, parse_date, last_day_of_month
from flowcast.utils.amount_parser import parse_amount
from flowcast.utils.money import as_decimal, format_money, money_str, to_cents

__all__ = [
    "as_day",
    "parse_date",
    "last_day_of_month",
    "parse_amount",
    "format_money",
    "money_str",
    "to_cents",
    "as_decimal",
]
