"""Date parsing and calendar utilities."""

import calendar
from datetime import date, datetime, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def parse_date(date_str: str | date, reference: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "tomorrow", "next month", etc.

    Args:
        date_str: Date string in various formats (a date is returned as-is)
        reference: Date that relative words are resolved against
            (defaults to the system date)

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    if isinstance(date_str, datetime):
        return date_str.date()
    if isinstance(date_str, date):
        return date_str

    date_str = date_str.strip().lower()
    today = reference or date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    if date_str.startswith("this "):
        period = date_str[5:]
        if period == "month":
            return today.replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1)
        elif period == "week":
            return today - timedelta(days=today.weekday())

    elif date_str.startswith("next "):
        period = date_str[5:]
        if period == "month":
            return (today + relativedelta(months=1)).replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1) + relativedelta(years=1)
        elif period == "week":
            return today + timedelta(days=(7 - today.weekday()))

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def as_day(value: date) -> date:
    """Drop the time-of-day from datetimes."""
    if isinstance(value, datetime):
        return value.date()
    return value


def last_day_of_month(d: date) -> date:
    """Return the last calendar day of the month containing ``d``."""
    return d.replace(day=calendar.monthrange(d.year, d.month)[1])


def months_until(start: date, end: date) -> int:
    """Whole months from ``start`` to ``end``, rounded up; 0 if ``end`` is not later."""
    if end <= start:
        return 0
    delta = relativedelta(end, start)
    months = delta.years * 12 + delta.months
    if delta.days > 0:
        months += 1
    return max(months, 1)
