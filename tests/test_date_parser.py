"""Tests for date parser with relative dates."""

from datetime import date, datetime, timedelta

import pytest

from flowcast.utils.date_parser import as_day, last_day_of_month, months_until, parse_date

REFERENCE = date(2024, 1, 31)


def test_parse_absolute_date():
    """Test parsing absolute dates."""
    assert parse_date("2024-01-15") == date(2024, 1, 15)
    assert parse_date("January 15, 2024") == date(2024, 1, 15)


def test_parse_date_passthrough():
    assert parse_date(date(2024, 2, 1)) == date(2024, 2, 1)
    assert parse_date(datetime(2024, 2, 1, 9, 30)) == date(2024, 2, 1)


def test_parse_today():
    """Test parsing 'today'."""
    assert parse_date("today") == date.today()
    assert parse_date(" Today ", reference=REFERENCE) == REFERENCE


def test_parse_yesterday_and_tomorrow():
    assert parse_date("yesterday", reference=REFERENCE) == REFERENCE - timedelta(days=1)
    assert parse_date("tomorrow", reference=REFERENCE) == date(2024, 2, 1)


def test_parse_this_periods():
    assert parse_date("this month", reference=REFERENCE) == date(2024, 1, 1)
    assert parse_date("this year", reference=REFERENCE) == date(2024, 1, 1)
    # January 31, 2024 is a Wednesday
    assert parse_date("this week", reference=REFERENCE) == date(2024, 1, 29)


def test_parse_next_periods():
    """Test that 'next' periods resolve to the first day of the period."""
    assert parse_date("next month", reference=REFERENCE) == date(2024, 2, 1)
    assert parse_date("next year", reference=REFERENCE) == date(2025, 1, 1)
    assert parse_date("next week", reference=REFERENCE) == date(2024, 2, 5)


def test_parse_invalid_date():
    with pytest.raises(ValueError, match="Could not parse date"):
        parse_date("not a date")


@pytest.mark.parametrize(
    "day,expected",
    [
        (date(2024, 2, 10), date(2024, 2, 29)),
        (date(2023, 2, 10), date(2023, 2, 28)),
        (date(2024, 4, 30), date(2024, 4, 30)),
        (date(2024, 12, 1), date(2024, 12, 31)),
    ],
)
def test_last_day_of_month(day, expected):
    assert last_day_of_month(day) == expected


def test_months_until():
    assert months_until(date(2024, 1, 15), date(2024, 7, 15)) == 6
    assert months_until(date(2024, 1, 15), date(2024, 7, 16)) == 7
    assert months_until(date(2024, 1, 15), date(2024, 1, 20)) == 1
    assert months_until(date(2024, 1, 15), date(2024, 1, 15)) == 0
    assert months_until(date(2024, 1, 15), date(2023, 1, 15)) == 0


def test_as_day():
    assert as_day(datetime(2024, 1, 10, 9, 30)) == date(2024, 1, 10)
    assert as_day(date(2024, 1, 10)) == date(2024, 1, 10)
