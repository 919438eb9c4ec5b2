"""Custom account management commands."""

import click
from tallybook.cli.error_handling import exit_on_domain_error
from tallybook.domain.account import AccountService
from tallybook.domain.accounting import ACCOUNT_CATEGORY_DESCRIPTIONS
from tallybook.domain.entities import AccountCategory

CATEGORY_CHOICE = click.Choice([c.value for c in AccountCategory], case_sensitive=False)


@click.group()
def account_group():
    """Manage custom account names."""
    pass


@account_group.command("create")
@click.argument("name", metavar="ACCOUNT_NAME")
@click.option("--category", required=True, type=CATEGORY_CHOICE, help="Accounting category")
@click.pass_context
def create_account(ctx, name: str, category: str):
    """Create a custom account.

    Examples:
        tallybook account create "Consulting Income" --category revenue
        tallybook account create "Van Loan" --category liability
    """
    db = ctx.obj["db"]
    service = AccountService(db)

    with exit_on_domain_error(ctx):
        account_id = service.create_account(name=name, category=category)
    click.echo(f"Created account '{name.strip()}' (ID: {account_id})")


@account_group.command("list")
@click.pass_context
def list_accounts(ctx):
    """List custom accounts."""
    db = ctx.obj["db"]
    service = AccountService(db)

    accounts = service.list_accounts()
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 60)
    for acc in accounts:
        category = getattr(acc.category, "value", acc.category)
        click.echo(f"ID: {acc.id:3d} | {acc.name:30s} | {category}")


@account_group.command("delete")
@click.argument("account_id", type=int)
@click.pass_context
def delete_account(ctx, account_id: int):
    """Delete a custom account.

    Transactions already posted to the account are kept.
    """
    db = ctx.obj["db"]
    service = AccountService(db)

    with exit_on_domain_error(ctx):
        service.delete_account(account_id)
    click.echo(f"Deleted account {account_id}")


@account_group.command("suggestions")
@click.option("--category", type=CATEGORY_CHOICE, help="Only show one category")
@click.pass_context
def show_suggestions(ctx, category: str | None):
    """Show account names to use for each category."""
    db = ctx.obj["db"]
    service = AccountService(db)

    suggestions = service.get_suggestions()
    categories = [AccountCategory(category.lower())] if category else list(AccountCategory)

    for i, cat in enumerate(categories):
        if i > 0:
            click.echo()
        click.echo(ACCOUNT_CATEGORY_DESCRIPTIONS[cat])
        for name in suggestions[cat]:
            click.echo(f"  {name}")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
