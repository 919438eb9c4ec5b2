"""Transaction management commands."""

import click
from tallybook.cli.date_filters import date_filter_options
from tallybook.cli.error_handling import exit_on_domain_error
from tallybook.domain.transaction import TransactionService
from tallybook.utils.formatting import format_currency


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("list")
@date_filter_options
@click.option("--verbose", "-v", is_flag=True, help="Show full transaction IDs")
@click.pass_context
def list_transactions(ctx, date_range, verbose: bool):
    """List transactions, newest first."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    start, end = date_range
    transactions = service.list_transactions(start_date=start, end_date=end)

    if not transactions:
        click.echo("No transactions found.")
        return

    id_width = 36 if verbose else 8
    click.echo(f"\nFound {len(transactions)} transaction(s):")
    click.echo("-" * (id_width + 96))
    click.echo(
        f"{'ID':<{id_width}} {'Date':<12} {'Type':<7} {'Amount':>14} {'Account':<24} {'Category':<10} {'Description':<25}"
    )
    click.echo("-" * (id_width + 96))

    for txn in transactions:
        txn_id = txn.id if verbose else txn.id[:8]
        txn_type = getattr(txn.type, "value", txn.type)
        category = getattr(txn.category, "value", txn.category)
        click.echo(
            f"{txn_id:<{id_width}} {str(txn.date):<12} {txn_type:<7} {format_currency(txn.amount):>14} "
            f"{txn.account[:24]:<24} {category:<10} {txn.description[:25]:<25}"
        )


@transaction_group.command("delete")
@click.argument("transaction_id")
@click.pass_context
def delete_transaction(ctx, transaction_id: str):
    """Delete a transaction by ID."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    with exit_on_domain_error(ctx):
        service.delete_transaction(transaction_id)
    click.echo(f"Deleted transaction {transaction_id}")


@transaction_group.command("clear")
@click.option("--yes", is_flag=True, help="Confirm deleting every transaction")
@click.pass_context
def clear_transactions(ctx, yes: bool):
    """Delete every transaction. This cannot be undone."""
    if not yes:
        click.confirm("Delete ALL transactions? This cannot be undone", abort=True)

    db = ctx.obj["db"]
    service = TransactionService(db)
    count = service.clear_transactions()
    click.echo(f"Deleted {count} transaction(s)")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
