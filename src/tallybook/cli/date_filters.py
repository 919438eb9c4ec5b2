"""CLI helpers for date range resolution."""

from datetime import date
from functools import wraps

import click

from tallybook.utils.date_parser import PERIODS, get_date_range, month_range, parse_date


def date_filter_options(func):
    """Add --start-date/--end-date, --month and period flags to a command.

    The wrapped command receives a single ``date_range`` keyword argument
    holding the resolved (start, end) tuple.
    """

    @click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month')")
    @click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
    @click.option("--month", help="Calendar month (YYYY-MM)")
    @click.option("--this-month", is_flag=True, help="Filter to current month")
    @click.option("--this-year", is_flag=True, help="Filter to current year")
    @click.option("--this-week", is_flag=True, help="Filter to current week")
    @click.option("--last-month", is_flag=True, help="Filter to previous month")
    @click.option("--last-year", is_flag=True, help="Filter to previous year")
    @click.option("--last-week", is_flag=True, help="Filter to previous week")
    @click.pass_context
    @wraps(func)
    def wrapper(ctx, *args, start_date, end_date, month, **kwargs):
        period_flags = {period: kwargs.pop(period.replace("-", "_")) for period in PERIODS}
        date_range = resolve_cli_date_range(
            ctx,
            start_date=start_date,
            end_date=end_date,
            period_flags=period_flags,
            month=month,
        )
        return func(*args, date_range=date_range, **kwargs)

    return wrapper


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    period_flags: dict[str, bool],
    month: str | None = None,
    default_range: tuple[date, date] | None = None,
) -> tuple[date | None, date | None]:
    """Resolve CLI date range from period flags, a month or explicit dates."""
    period_count = sum(1 for is_set in period_flags.values() if is_set)
    if month:
        period_count += 1

    if period_count > 1:
        click.echo(
            "Error: Only one period option (--month, --this-month, --this-year, --this-week, --last-month, --last-year, --last-week) can be specified at a time.",
            err=True,
        )
        ctx.exit(1)

    if period_count > 0 and (start_date or end_date):
        click.echo(
            "Error: Period options (--month, --this-month, etc.) cannot be combined with --start-date or --end-date.",
            err=True,
        )
        ctx.exit(1)

    start = None
    end = None

    if month:
        try:
            start, end = month_range(month)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)
    elif period_count == 1:
        for period, is_set in period_flags.items():
            if is_set:
                start, end = get_date_range(period)
                break
    else:
        if start_date:
            try:
                start = parse_date(start_date)
            except ValueError as e:
                click.echo(f"Error: Invalid start date: {e}", err=True)
                ctx.exit(1)

        if end_date:
            try:
                end = parse_date(end_date)
            except ValueError as e:
                click.echo(f"Error: Invalid end date: {e}", err=True)
                ctx.exit(1)

        if start is None and end is None and default_range is not None:
            start, end = default_range

    return start, end
