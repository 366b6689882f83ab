"""CLI error handling helpers."""

import click

from bankapp.domain.errors import DomainError


def report_domain_error(error: DomainError | ValueError) -> None:
    """Render a domain error without leaving the menu loop."""
    click.echo(f"Error: {error}", err=True)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    report_domain_error(error)
    ctx.exit(1)
