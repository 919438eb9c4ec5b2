"""Tests for amount parsing, formatting and logging setup."""

import logging
from datetime import date
from decimal import Decimal

import pytest

from tallybook.logger import LOGGER_NAME, resolve_log_level, setup_logging
from tallybook.utils.amount_parser import parse_amount
from tallybook.utils.formatting import format_currency, format_date


@pytest.mark.parametrize(
    "text,expected",
    [
        ("123.45", Decimal("123.45")),
        ("$123.45", Decimal("123.45")),
        ("1,234.56", Decimal("1234.56")),
        ("€ 10", Decimal("10")),
        ("-12.00", Decimal("-12.00")),
        ("(12.00)", Decimal("-12.00")),
    ],
)
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "NaN", "Infinity", "1.2.3"])
def test_parse_amount_invalid(text):
    with pytest.raises(ValueError):
        parse_amount(text)


def test_format_currency():
    assert format_currency(Decimal("1234.5")) == "$1,234.50"
    assert format_currency(Decimal("-12")) == "-$12.00"
    assert format_currency(Decimal("0.005")) == "$0.01"
    assert format_currency(7, symbol="€") == "€7.00"


def test_format_date():
    assert format_date(date(2024, 3, 1)) == "Mar 1, 2024"
    assert format_date(date(2023, 12, 25)) == "Dec 25, 2023"


def test_resolve_log_level(monkeypatch):
    monkeypatch.delenv("TALLYBOOK_LOG_LEVEL", raising=False)
    assert resolve_log_level() == "WARNING"
    assert resolve_log_level("debug") == "DEBUG"

    monkeypatch.setenv("TALLYBOOK_LOG_LEVEL", "info")
    assert resolve_log_level() == "INFO"

    with pytest.raises(ValueError, match="Unknown log level"):
        resolve_log_level("chatty")


def test_setup_logging_replaces_handlers():
    logger = setup_logging("INFO")
    setup_logging("INFO")

    assert logger is logging.getLogger(LOGGER_NAME)
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
