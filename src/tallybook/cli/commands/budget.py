"""Monthly budget commands."""

from datetime import date

import click
from tallybook.cli.error_handling import exit_on_domain_error, handle_domain_error
from tallybook.domain.budget import BudgetService
from tallybook.domain.entities import BudgetStatus
from tallybook.utils.amount_parser import parse_amount
from tallybook.utils.formatting import format_currency

STATUS_LABELS = {
    BudgetStatus.UNDER: "Under Budget",
    BudgetStatus.ON_TRACK: "On Track",
    BudgetStatus.OVER: "Over Budget",
}


def _current_month() -> str:
    return date.today().strftime("%Y-%m")


@click.group()
def budget_group():
    """Manage monthly budgets per account."""
    pass


@budget_group.command("set")
@click.argument("account", metavar="ACCOUNT_NAME")
@click.option("--amount", required=True, help="Budgeted amount (e.g., 400.00)")
@click.option("--month", help="Month as YYYY-MM (default: current month)")
@click.pass_context
def set_budget(ctx, account: str, amount: str, month: str | None):
    """Set the budget for an account in a month.

    Setting a budget that already exists changes its amount.

    Examples:
        tallybook budget set "Office Supplies" --amount 200
        tallybook budget set "Rent Expense" --amount 1500 --month 2024-03
    """
    db = ctx.obj["db"]
    service = BudgetService(db)
    month = month or _current_month()

    try:
        budget_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    with exit_on_domain_error(ctx):
        budget_id = service.set_budget(account=account, amount=budget_amount, month=month)
    click.echo(
        f"Budget for '{account.strip()}' in {month}: "
        f"{format_currency(budget_amount)} (ID: {budget_id})"
    )


@budget_group.command("list")
@click.option("--month", help="Only show one month (YYYY-MM)")
@click.pass_context
def list_budgets(ctx, month: str | None):
    """List budgets."""
    db = ctx.obj["db"]
    service = BudgetService(db)

    with exit_on_domain_error(ctx):
        budgets = service.list_budgets(month=month)
    if not budgets:
        click.echo("No budgets found.")
        return

    click.echo("\nBudgets:")
    click.echo("-" * 70)
    for budget in budgets:
        click.echo(
            f"ID: {budget.id:3d} | {budget.month} | {budget.account:30s} | "
            f"{format_currency(budget.amount):>14s}"
        )


@budget_group.command("delete")
@click.argument("budget_id", type=int)
@click.pass_context
def delete_budget(ctx, budget_id: int):
    """Delete a budget."""
    db = ctx.obj["db"]
    service = BudgetService(db)

    with exit_on_domain_error(ctx):
        service.delete_budget(budget_id)
    click.echo(f"Deleted budget {budget_id}")


@budget_group.command("report")
@click.option("--month", help="Month as YYYY-MM (default: current month)")
@click.pass_context
def budget_report(ctx, month: str | None):
    """Compare budgets with what was posted to each account.

    Spending is the account's debits minus credits within the month.
    """
    db = ctx.obj["db"]
    service = BudgetService(db)
    month = month or _current_month()

    try:
        rows = service.analyze(month)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not rows:
        click.echo(f"No budgets set for {month}.")
        return

    click.echo(f"\nBudget vs Actual ({month}):")
    click.echo("-" * 96)
    click.echo(
        f"{'Account':30s} {'Budgeted':>14s} {'Spent':>14s} {'Remaining':>14s} "
        f"{'Used':>7s}  Status"
    )
    click.echo("-" * 96)
    for row in rows:
        click.echo(
            f"{row.account:30s} {format_currency(row.budgeted):>14s} "
            f"{format_currency(row.spent):>14s} {format_currency(row.remaining):>14s} "
            f"{row.percentage:6.1f}%  {STATUS_LABELS[row.status]}"
        )


def register_commands(cli):
    """Register budget commands with main CLI."""
    cli.add_command(budget_group, name="budget")
