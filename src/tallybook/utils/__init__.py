"""Utility functions for tallybook."""

from tallybook.utils.date_parser import parse_date, parse_iso_date, month_range
from tallybook.utils.amount_parser import parse_amount
from tallybook.utils.formatting import format_currency

__all__ = ["parse_date", "parse_iso_date", "month_range", "parse_amount", "format_currency"]
