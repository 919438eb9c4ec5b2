"""Date parsing utilities."""

import calendar
import re
from datetime import date, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]

PERIODS = ("this-month", "this-year", "this-week", "last-month", "last-year", "last-week")

_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")


def _start_of_week(day: date) -> date:
    return day - timedelta(days=day.weekday())


def _start_of_period(period: str, offset: int, today: date) -> date | None:
    """Return the first day of the month/year/week shifted by offset periods."""
    if period == "month":
        return today.replace(day=1) + relativedelta(months=offset)
    if period == "year":
        return today.replace(month=1, day=1) + relativedelta(years=offset)
    if period == "week":
        return _start_of_week(today) + timedelta(weeks=offset)
    return None


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "last month", "this year",
      "last friday", etc. Periods resolve to their first day.

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }
    if date_str in relative_dates:
        return relative_dates[date_str]

    offsets = {"last ": -1, "this ": 0, "next ": 1}
    for prefix, offset in offsets.items():
        if not date_str.startswith(prefix):
            continue
        period = date_str[len(prefix):]
        start = _start_of_period(period, offset, today)
        if start is not None:
            return start
        if prefix == "last " and period in WEEKDAYS:
            days_ago = (today.weekday() - WEEKDAYS.index(period)) % 7 or 7
            return today - timedelta(days=days_ago)

    # Try parsing as absolute date
    try:
        return date_parser.parse(date_str).date()
    except (ValueError, OverflowError, TypeError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_iso_date(date_str: str) -> date:
    """Parse a strict ISO YYYY-MM-DD date.

    Raises:
        ValueError: If the string is not an ISO calendar date
    """
    try:
        return date.fromisoformat(date_str.strip())
    except ValueError:
        raise ValueError(f"Invalid ISO date '{date_str}' (expected YYYY-MM-DD)")


def parse_month(month_str: str) -> tuple[int, int]:
    """Parse a YYYY-MM month string into (year, month).

    Raises:
        ValueError: If the string is not a valid month
    """
    match = _MONTH_RE.match(month_str.strip())
    if match is None:
        raise ValueError(f"Invalid month '{month_str}' (expected YYYY-MM)")
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month '{month_str}' (month must be 01-12)")
    return year, month


def last_day_of_month(month_str: str) -> date:
    """Return the last calendar day of a YYYY-MM month."""
    year, month = parse_month(month_str)
    return date(year, month, calendar.monthrange(year, month)[1])


def month_range(month_str: str) -> tuple[date, date]:
    """Return (first day, last day) of a YYYY-MM month."""
    year, month = parse_month(month_str)
    return date(year, month, 1), last_day_of_month(month_str)


def get_date_range(period: str) -> tuple[date, date]:
    """Get start and end dates for a specified period.

    Current periods end today; previous periods end on their last day.

    Args:
        period: Period string (this-month, this-year, this-week, last-month, last-year, last-week)

    Returns:
        Tuple of (start_date, end_date) for the specified period

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = date.today()

    if period not in PERIODS:
        raise ValueError(
            f"Unknown period: '{period}'. Supported periods: {', '.join(PERIODS)}"
        )

    which, unit = period.split("-")
    if which == "this":
        return _start_of_period(unit, 0, today), today

    start_date = _start_of_period(unit, -1, today)
    # Previous period ends the day before the current one starts
    end_date = _start_of_period(unit, 0, today) - timedelta(days=1)
    return start_date, end_date
