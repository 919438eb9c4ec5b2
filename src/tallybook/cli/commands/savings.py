"""Savings goal commands."""

import click
from tallybook.cli.error_handling import exit_on_domain_error
from tallybook.domain.entities import SavingsTransactionType
from tallybook.domain.savings import SavingsService
from tallybook.utils.amount_parser import parse_amount
from tallybook.utils.date_parser import parse_date
from tallybook.utils.formatting import format_currency, format_date


def _parse_date_option(ctx, value: str):
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)


def _parse_amount_option(ctx, value: str):
    try:
        return parse_amount(value)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)


@click.group()
def savings_group():
    """Track savings goals."""
    pass


@savings_group.command("create")
@click.argument("name", metavar="GOAL_NAME")
@click.option("--target", required=True, help="Target amount (e.g., 5000)")
@click.option("--by", "target_date", required=True, help="Target date (YYYY-MM-DD)")
@click.option("--description", help="Optional description")
@click.pass_context
def create_goal(ctx, name: str, target: str, target_date: str, description: str | None):
    """Create a savings goal.

    Examples:
        tallybook savings create "Emergency Fund" --target 5000 --by 2025-12-31
    """
    db = ctx.obj["db"]
    service = SavingsService(db)

    target_amount = _parse_amount_option(ctx, target)
    goal_date = _parse_date_option(ctx, target_date)

    with exit_on_domain_error(ctx):
        goal_id = service.create_goal(
            name=name,
            target_amount=target_amount,
            target_date=goal_date,
            description=description,
        )
    click.echo(f"Created savings goal '{name.strip()}' (ID: {goal_id})")


@savings_group.command("list")
@click.option("--all", "show_all", is_flag=True, help="Include closed goals")
@click.pass_context
def list_goals(ctx, show_all: bool):
    """List savings goals."""
    db = ctx.obj["db"]
    service = SavingsService(db)

    goals = service.list_goals(active_only=not show_all)
    if not goals:
        click.echo("No savings goals found.")
        return

    click.echo("\nSavings Goals:")
    click.echo("-" * 90)
    for goal in goals:
        status = "" if goal.is_active else " (closed)"
        click.echo(
            f"ID: {goal.id:3d} | {goal.name:25s} | "
            f"{format_currency(goal.current_amount)} of {format_currency(goal.target_amount)} | "
            f"by {format_date(goal.target_date)}{status}"
        )


def _record(ctx, goal_id: int, txn_type: SavingsTransactionType, amount: str, date: str, description: str):
    db = ctx.obj["db"]
    service = SavingsService(db)

    txn_amount = _parse_amount_option(ctx, amount)
    txn_date = _parse_date_option(ctx, date)

    with exit_on_domain_error(ctx):
        service.add_transaction(
            goal_id=goal_id,
            type=txn_type,
            amount=txn_amount,
            transaction_date=txn_date,
            description=description,
        )
        goal = service.require_goal(goal_id)
    click.echo(
        f"Recorded {txn_type.value} of {format_currency(txn_amount)} on '{goal.name}'. "
        f"Saved: {format_currency(goal.current_amount)} of {format_currency(goal.target_amount)}"
    )


@savings_group.command("deposit")
@click.argument("goal_id", type=int)
@click.option("--amount", required=True, help="Amount to add")
@click.option("--description", default="Deposit", show_default=True, help="Description")
@click.option("--date", default="today", show_default=True, help="Date of the deposit")
@click.pass_context
def deposit(ctx, goal_id: int, amount: str, description: str, date: str):
    """Add money to a savings goal."""
    _record(ctx, goal_id, SavingsTransactionType.DEPOSIT, amount, date, description)


@savings_group.command("withdraw")
@click.argument("goal_id", type=int)
@click.option("--amount", required=True, help="Amount to take out")
@click.option("--description", default="Withdrawal", show_default=True, help="Description")
@click.option("--date", default="today", show_default=True, help="Date of the withdrawal")
@click.pass_context
def withdraw(ctx, goal_id: int, amount: str, description: str, date: str):
    """Take money out of a savings goal."""
    _record(ctx, goal_id, SavingsTransactionType.WITHDRAWAL, amount, date, description)


@savings_group.command("history")
@click.argument("goal_id", type=int, required=False)
@click.pass_context
def history(ctx, goal_id: int | None):
    """List deposits and withdrawals, newest first."""
    db = ctx.obj["db"]
    service = SavingsService(db)

    with exit_on_domain_error(ctx):
        transactions = service.list_transactions(goal_id=goal_id)
    if not transactions:
        click.echo("No savings transactions found.")
        return

    click.echo("\nSavings Transactions:")
    click.echo("-" * 80)
    for txn in transactions:
        sign = "+" if txn.type == SavingsTransactionType.DEPOSIT else "-"
        click.echo(
            f"{format_date(txn.date):13s} | goal {txn.goal_id:3d} | "
            f"{txn.description:30s} | {sign}{format_currency(txn.amount)}"
        )


@savings_group.command("progress")
@click.pass_context
def progress(ctx):
    """Show progress towards each active goal."""
    db = ctx.obj["db"]
    service = SavingsService(db)

    summary = service.summary()
    click.echo(f"Total Saved:     {format_currency(summary.total_saved)}")
    click.echo(f"Monthly Average: {format_currency(summary.monthly_average)}")

    if not summary.goals:
        click.echo("\nNo active savings goals.")
        return

    click.echo("\nGoals:")
    click.echo("-" * 90)
    for item in summary.goals:
        if item.days_left >= 0:
            timing = f"{item.days_left} days left"
        else:
            timing = f"{abs(item.days_left)} days overdue"
        status = "on track" if item.on_track else "behind"
        click.echo(
            f"{item.goal.name:25s} | {item.progress:6.1f}% | "
            f"remaining {format_currency(item.remaining)} | {timing} | {status}"
        )


@savings_group.command("close")
@click.argument("goal_id", type=int)
@click.pass_context
def close_goal(ctx, goal_id: int):
    """Close a goal. Its history is kept."""
    db = ctx.obj["db"]
    service = SavingsService(db)

    with exit_on_domain_error(ctx):
        service.close_goal(goal_id)
    click.echo(f"Closed savings goal {goal_id}")


@savings_group.command("reopen")
@click.argument("goal_id", type=int)
@click.pass_context
def reopen_goal(ctx, goal_id: int):
    """Reopen a closed goal."""
    db = ctx.obj["db"]
    service = SavingsService(db)

    with exit_on_domain_error(ctx):
        service.reopen_goal(goal_id)
    click.echo(f"Reopened savings goal {goal_id}")


@savings_group.command("delete")
@click.argument("goal_id", type=int)
@click.option("--yes", is_flag=True, help="Confirm deleting the goal and its history")
@click.pass_context
def delete_goal(ctx, goal_id: int, yes: bool):
    """Delete a goal together with its deposits and withdrawals."""
    if not yes:
        click.confirm(f"Delete savings goal {goal_id} and its history?", abort=True)

    db = ctx.obj["db"]
    service = SavingsService(db)

    with exit_on_domain_error(ctx):
        service.delete_goal(goal_id)
    click.echo(f"Deleted savings goal {goal_id}")


def register_commands(cli):
    """Register savings commands with main CLI."""
    cli.add_command(savings_group, name="savings")
