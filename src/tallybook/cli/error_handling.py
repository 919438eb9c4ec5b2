"""CLI error handling helpers."""

from contextlib import contextmanager

import click

from tallybook.domain.errors import DomainError
from tallybook.logger import get_logger

logger = get_logger()


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    logger.debug("Command failed: %r", error)
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


@contextmanager
def exit_on_domain_error(ctx: click.Context):
    """Turn DomainError/ValueError raised in the block into a CLI failure."""
    try:
        yield
    except ValueError as e:
        handle_domain_error(ctx, e)
