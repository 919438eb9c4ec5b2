"""Display formatting helpers."""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")


def format_currency(amount: Decimal | int | float, symbol: str = "$") -> str:
    """Format an amount as currency, e.g. "$1,234.50" or "-$12.00"."""
    value = Decimal(str(amount)).quantize(CENT, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def format_date(value: date) -> str:
    """Format a date for display, e.g. "Mar 1, 2024"."""
    return f"{value:%b} {value.day}, {value.year}"
