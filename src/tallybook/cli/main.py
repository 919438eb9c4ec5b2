"""Main CLI entry point."""

import click
from tallybook.database.factories import create_sqlite_database
from tallybook.logger import setup_logging

# Import and register all commands at module level
from tallybook.cli.commands import (
    account,
    add,
    budget,
    data,
    reports,
    savings,
    transaction,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides TALLYBOOK_DB_PATH environment variable)",
    envvar="TALLYBOOK_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    envvar="TALLYBOOK_LOG_LEVEL",
    help="Log level for messages on stderr (default WARNING)",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str | None):
    """Tallybook - bookkeeping for small businesses and households.

    Record debit and credit transactions against your accounts and read the
    journal, ledger, trial balance and profit & loss derived from them, and
    track monthly budgets and savings goals alongside.
    """
    ctx.ensure_object(dict)
    setup_logging(log_level)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
account.register_commands(cli)
add.register_commands(cli)
budget.register_commands(cli)
data.register_commands(cli)
reports.register_commands(cli)
savings.register_commands(cli)
transaction.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
