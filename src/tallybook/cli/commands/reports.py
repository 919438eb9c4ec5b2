"""Accounting report commands."""

import click
from tallybook.cli.date_filters import date_filter_options
from tallybook.domain.entities import AccountCategory
from tallybook.domain.reports import ReportService
from tallybook.logger import get_logger
from tallybook.utils.formatting import format_currency, format_date

logger = get_logger()

CATEGORY_ORDER = [c.value for c in AccountCategory]


def _label(value) -> str:
    return str(getattr(value, "value", value))


def _category_sort_key(category) -> tuple[int, str]:
    label = _label(category)
    if label in CATEGORY_ORDER:
        return CATEGORY_ORDER.index(label), label
    return len(CATEGORY_ORDER), label


def _amount_or_dash(amount) -> str:
    return format_currency(amount) if amount > 0 else "-"


@click.command("journal")
@date_filter_options
@click.pass_context
def journal(ctx, date_range):
    """Show journal entries, newest first.

    Each transaction is shown against the Cash/Bank counterpart account.
    """
    service = ReportService(ctx.obj["db"])
    entries = service.journal(*date_range)

    if not entries:
        click.echo("No journal entries found.")
        return

    click.echo("\nJournal Entries:")
    click.echo("-" * 110)
    click.echo(f"{'Date':<14} {'Description':<30} {'Debit':<26} {'Credit':<26} {'Amount':>12}")
    click.echo("-" * 110)
    for entry in entries:
        click.echo(
            f"{format_date(entry.date):<14} {entry.description[:30]:<30} "
            f"{entry.debit_account[:26]:<26} {entry.credit_account[:26]:<26} "
            f"{format_currency(entry.amount):>12}"
        )


@click.command("ledger")
@date_filter_options
@click.pass_context
def ledger(ctx, date_range):
    """Show ledger accounts with debit and credit totals."""
    service = ReportService(ctx.obj["db"])
    accounts = service.ledger(*date_range)

    if not accounts:
        click.echo("No ledger accounts found.")
        return

    conflicts = service.category_conflicts(*date_range)
    for name in sorted(conflicts):
        categories = ", ".join(sorted(_label(c) for c in conflicts[name]))
        click.echo(
            f"Warning: account '{name}' is recorded under several categories "
            f"({categories}); using '{_label(accounts[name].category)}'",
            err=True,
        )

    ordered = sorted(
        accounts.values(), key=lambda acc: (_category_sort_key(acc.category), acc.name)
    )

    click.echo("\nLedger Accounts:")
    click.echo("-" * 90)
    click.echo(f"{'Account':<30} {'Category':<10} {'Debits':>15} {'Credits':>15} {'Balance':>15}")
    click.echo("-" * 90)
    for acc in ordered:
        click.echo(
            f"{acc.name[:30]:<30} {_label(acc.category):<10} "
            f"{format_currency(acc.debits_total):>15} {format_currency(acc.credits_total):>15} "
            f"{format_currency(acc.balance):>15}"
        )


@click.command("trial-balance")
@date_filter_options
@click.pass_context
def trial_balance(ctx, date_range):
    """Show the trial balance and whether the books balance.

    Only named accounts appear; the Cash/Bank counterpart used in the
    journal is not part of the trial balance.
    """
    service = ReportService(ctx.obj["db"])
    report = service.trial_balance(*date_range)

    if not report.items:
        click.echo("No accounts to display.")
        return

    click.echo("\nTrial Balance:")
    click.echo("-" * 75)
    click.echo(f"{'Account':<30} {'Category':<10} {'Debit':>16} {'Credit':>16}")
    click.echo("-" * 75)
    for item in report.items:
        click.echo(
            f"{item.account[:30]:<30} {_label(item.category):<10} "
            f"{_amount_or_dash(item.debit):>16} {_amount_or_dash(item.credit):>16}"
        )
    click.echo("-" * 75)
    totals = report.totals
    click.echo(
        f"{'Total':<41} {format_currency(totals.total_debits):>16} "
        f"{format_currency(totals.total_credits):>16}"
    )

    if totals.is_balanced:
        click.echo("\nBooks are balanced.")
    else:
        logger.warning("Trial balance does not balance")
        click.echo(
            f"\nBooks are not balanced (difference {format_currency(abs(totals.difference))})."
        )


@click.command("profit-loss")
@date_filter_options
@click.pass_context
def profit_loss(ctx, date_range):
    """Show the profit & loss statement."""
    service = ReportService(ctx.obj["db"])
    statement = service.profit_loss(*date_range)

    click.echo("\nProfit & Loss Statement")
    click.echo("=" * 50)

    sections = (
        ("Revenue", statement.revenue_items, statement.total_revenue),
        ("Expenses", statement.expense_items, statement.total_expenses),
    )
    for title, items, total in sections:
        click.echo(f"\n{title}")
        click.echo("-" * 50)
        if not items:
            click.echo(f"  No {title.lower()} recorded")
            continue
        for item in items:
            click.echo(f"  {item.account[:30]:<30} {format_currency(item.amount):>17}")
        click.echo(f"  {'Total ' + title:<30} {format_currency(total):>17}")

    label = "Net Income" if statement.is_profit else "Net Loss"
    click.echo("\n" + "=" * 50)
    click.echo(f"{label:<32} {format_currency(abs(statement.net_income)):>17}")


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(journal)
    cli.add_command(ledger)
    cli.add_command(trial_balance)
    cli.add_command(profit_loss)
