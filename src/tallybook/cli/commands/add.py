"""Add transaction command."""

import click
from tallybook.cli.error_handling import handle_domain_error
from tallybook.domain.entities import AccountCategory, TransactionType
from tallybook.domain.transaction import TransactionService
from tallybook.utils.date_parser import parse_date
from tallybook.utils.amount_parser import parse_amount
from tallybook.utils.formatting import format_currency


@click.command("add")
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option(
    "--type",
    "txn_type",
    required=True,
    type=click.Choice([t.value for t in TransactionType], case_sensitive=False),
    help="Debit or credit against the account",
)
@click.option("--amount", required=True, help="Transaction amount (e.g., 45.00)")
@click.option("--description", required=True, help="Transaction description")
@click.option("--account", required=True, help="Account name (e.g., 'Office Supplies')")
@click.option(
    "--category",
    required=True,
    type=click.Choice([c.value for c in AccountCategory], case_sensitive=False),
    help="Accounting category of the account",
)
@click.pass_context
def add_transaction(
    ctx,
    date: str,
    txn_type: str,
    amount: str,
    description: str,
    account: str,
    category: str,
):
    """Record a transaction.

    Examples:
        tallybook add --type debit --amount 45.00 --account "Office Supplies" --category expense --description "Paper"
        tallybook add --date 2024-03-01 --type credit --amount 200 --account "Sales Revenue" --category revenue --description "Invoice 17"
    """
    db = ctx.obj["db"]
    transaction_service = TransactionService(db)

    # Parse date
    try:
        txn_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    # Parse amount
    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        transaction_id = transaction_service.create_transaction(
            date=txn_date,
            type=txn_type,
            amount=txn_amount,
            description=description,
            account=account,
            category=category,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transaction {transaction_id}")
    click.echo(f"  Date: {txn_date}")
    click.echo(f"  {txn_type.capitalize()}: {account.strip()} ({category.lower()})")
    click.echo(f"  Amount: {format_currency(txn_amount)}")
    click.echo(f"  Description: {description.strip()}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
