"""Date parsing utilities."""

from datetime import date, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

PERIODS = ("this-month", "this-year", "last-month", "last-year")


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "15 Jan 2024", etc.
    - Relative dates: "today", "yesterday", "tomorrow"

    Args:
        date_str: Date string in various formats
        today: Reference date for relative dates (defaults to today)

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = today or date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        # Slashed dates are DD/MM/YYYY
        dt = date_parser.parse(date_str, dayfirst="/" in date_str)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def get_date_range(period: str, today: Optional[date] = None) -> tuple[date, date]:
    """Get start and end dates for a specified period.

    Args:
        period: Period string (this-month, this-year, last-month, last-year)
        today: Reference date (defaults to today)

    Returns:
        Tuple of (start_date, end_date) for the specified period

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = today or date.today()

    if period == "this-month":
        return (today.replace(day=1), today)

    elif period == "this-year":
        return (today.replace(month=1, day=1), today)

    elif period == "last-month":
        start_date = (today - relativedelta(months=1)).replace(day=1)
        end_date = today.replace(day=1) - timedelta(days=1)
        return (start_date, end_date)

    elif period == "last-year":
        start_date = today.replace(month=1, day=1) - relativedelta(years=1)
        end_date = today.replace(month=1, day=1) - timedelta(days=1)
        return (start_date, end_date)

    else:
        raise ValueError(
            f"Unknown period: '{period}'. Supported periods: {', '.join(PERIODS)}"
        )
