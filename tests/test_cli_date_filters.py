"""Tests for CLI date filter helper."""

from datetime import date

import click
import pytest

from tallybook.cli.date_filters import date_filter_options, resolve_cli_date_range
from tallybook.utils.date_parser import get_date_range, parse_date


def _ctx() -> click.Context:
    return click.Context(click.Command("test"))


def _resolve(**kwargs):
    kwargs.setdefault("start_date", None)
    kwargs.setdefault("end_date", None)
    kwargs.setdefault("period_flags", {})
    return resolve_cli_date_range(_ctx(), **kwargs)


def test_resolve_cli_date_range_rejects_multiple_periods(capsys):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        _resolve(period_flags={"this-month": True, "last-month": True})

    assert excinfo.value.exit_code == 1
    assert "Only one period option" in capsys.readouterr().err


def test_resolve_cli_date_range_rejects_month_with_period(capsys):
    with pytest.raises(click.exceptions.Exit):
        _resolve(period_flags={"this-year": True}, month="2024-03")

    assert "Only one period option" in capsys.readouterr().err


def test_resolve_cli_date_range_rejects_period_with_start_end(capsys):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        _resolve(start_date="2024-01-01", period_flags={"this-month": True})

    assert excinfo.value.exit_code == 1
    assert "cannot be combined" in capsys.readouterr().err


def test_resolve_cli_date_range_returns_period_range():
    assert _resolve(period_flags={"this-month": True}) == get_date_range("this-month")


def test_resolve_cli_date_range_month():
    assert _resolve(month="2024-02") == (date(2024, 2, 1), date(2024, 2, 29))


def test_resolve_cli_date_range_invalid_month(capsys):
    with pytest.raises(click.exceptions.Exit):
        _resolve(month="March")

    assert "Invalid month" in capsys.readouterr().err


def test_resolve_cli_date_range_parses_explicit_dates():
    start, end = _resolve(start_date="2024-01-02", end_date="2024-01-05")

    assert start == parse_date("2024-01-02")
    assert end == parse_date("2024-01-05")


def test_resolve_cli_date_range_open_ended():
    assert _resolve(end_date="2024-01-05") == (None, date(2024, 1, 5))


def test_resolve_cli_date_range_applies_default_range():
    default_range = (date(2020, 1, 1), date(2020, 1, 31))

    assert _resolve(default_range=default_range) == default_range


def test_resolve_cli_date_range_no_default_range():
    assert _resolve() == (None, None)


@pytest.mark.parametrize("field", ["start", "end"])
def test_resolve_cli_date_range_invalid_date(capsys, field):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        _resolve(**{f"{field}_date": "not-a-date"})

    assert excinfo.value.exit_code == 1
    assert f"Invalid {field} date" in capsys.readouterr().err


def test_date_filter_options_passes_resolved_range(cli_runner):
    @click.command()
    @date_filter_options
    @click.option("--label", default="range")
    def show(label, date_range):
        start, end = date_range
        click.echo(f"{label}: {start} {end}")

    result = cli_runner.invoke(show, ["--month", "2024-03", "--label", "march"])

    assert result.exit_code == 0
    assert "march: 2024-03-01 2024-03-31" in result.output

    result = cli_runner.invoke(show, ["--this-month", "--last-week"])
    assert result.exit_code == 1
