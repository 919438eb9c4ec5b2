"""Data export and import commands."""

import click
from tallybook.cli.date_filters import date_filter_options
from tallybook.cli.error_handling import exit_on_domain_error
from tallybook.domain.data_transfer import DataTransferService


@click.group()
def data_group():
    """Back up and restore transactions."""
    pass


@data_group.command("export")
@click.argument("file_path", type=click.Path(dir_okay=False, writable=True))
@date_filter_options
@click.pass_context
def export_data(ctx, file_path: str, date_range):
    """Export transactions to a JSON file."""
    service = DataTransferService(ctx.obj["db"])
    start, end = date_range
    count = service.export_transactions(file_path, start_date=start, end_date=end)
    click.echo(f"Exported {count} transaction(s) to {file_path}")


@data_group.command("import")
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--yes", is_flag=True, help="Confirm replacing existing transactions")
@click.pass_context
def import_data(ctx, file_path: str, yes: bool):
    """Replace all transactions with those in an exported JSON file."""
    if not yes:
        click.confirm(
            "Importing replaces ALL existing transactions. Continue?", abort=True
        )

    service = DataTransferService(ctx.obj["db"])
    with exit_on_domain_error(ctx):
        saved = service.import_transactions(file_path)
    click.echo(f"Imported {len(saved)} transaction(s) from {file_path}")


def register_commands(cli):
    """Register data commands with main CLI."""
    cli.add_command(data_group, name="data")
