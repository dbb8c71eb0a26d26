"""CLI error handling helpers."""

import logging

import click

from ledgerbook.domain.errors import DomainError

logger = logging.getLogger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain or template error and exit with failure."""
    logger.debug("%s in '%s': %s", type(error).__name__, ctx.info_name, error)
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
