"""Main CLI entry point."""

import click

from accountkit.cli.error_handling import handle_domain_error
from accountkit.config import LOG_FORMATS, AppConfig
from accountkit.domain.account import AccountService
from accountkit.domain.errors import ConfigurationError
from accountkit.logging_config import setup_logging

# Import and register all commands at module level
from accountkit.cli.commands import demo, run


@click.group()
@click.option(
    "--log-level",
    help="Log level for diagnostics on stderr (overrides ACCOUNTKIT_LOG_LEVEL, default WARNING)",
)
@click.option(
    "--log-format",
    type=click.Choice(LOG_FORMATS),
    help="Log record format (overrides ACCOUNTKIT_LOG_FORMAT, default standard)",
)
@click.pass_context
def cli(ctx, log_level: str | None, log_format: str | None):
    """accountkit - bank account model playground.

    Demonstrates standard, savings and checking accounts that share one
    interface but enforce different withdrawal rules.
    """
    ctx.ensure_object(dict)

    # Only set up state when a command actually runs (not for --help)
    if ctx.invoked_subcommand is None:
        return

    try:
        env_config = AppConfig.from_env()
    except ConfigurationError as e:
        handle_domain_error(ctx, e)

    config = AppConfig(
        log_level=log_level or env_config.log_level,
        log_format=log_format or env_config.log_format,
    )
    setup_logging(level=config.log_level, format_type=config.log_format)
    ctx.obj["config"] = config
    ctx.obj["service"] = AccountService()


# Register all commands
demo.register_commands(cli)
run.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
