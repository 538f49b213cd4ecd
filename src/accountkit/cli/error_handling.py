"""CLI error handling helpers."""

import click

from accountkit.domain.errors import DomainError


def handle_domain_error(
    ctx: click.Context, error: DomainError | ValueError, context: str | None = None
) -> None:
    """Render a domain error and exit with failure."""
    prefix = f"{context}: " if context else ""
    click.echo(f"Error: {prefix}{error}", err=True)
    ctx.exit(1)
