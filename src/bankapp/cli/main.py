"""Main CLI entry point."""

import click

from bankapp.cli.error_handling import handle_domain_error
from bankapp.config import BankConfig
from bankapp.database.factories import create_memory_database
from bankapp.domain.bank import BankService
from bankapp.logging import setup_logging

# Import and register all commands at module level
from bankapp.cli.commands import shell


@click.group(invoke_without_command=True)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Log level (overrides BANKAPP_LOG_LEVEL environment variable)",
    envvar="BANKAPP_LOG_LEVEL",
)
@click.option(
    "--log-format",
    type=click.Choice(["standard", "json"]),
    help="Log format (overrides BANKAPP_LOG_FORMAT environment variable)",
    envvar="BANKAPP_LOG_FORMAT",
)
@click.pass_context
def cli(ctx, log_level: str | None, log_format: str | None):
    """Bankapp - Banking ledger simulator.

    Register, log in, open savings or checking accounts and move money
    through an interactive menu. Nothing is saved between runs.
    """
    ctx.ensure_object(dict)

    try:
        config = BankConfig.from_env()
        if log_level is not None:
            config.log_level = log_level
        if log_format is not None:
            config.log_format = log_format
    except ValueError as e:
        handle_domain_error(ctx, e)

    setup_logging(level=config.log_level, format_type=config.log_format)

    db = create_memory_database()
    db.connect()
    db.initialize_schema()
    ctx.obj["bank"] = BankService(db, config)
    ctx.call_on_close(db.disconnect)

    if ctx.invoked_subcommand is None:
        ctx.invoke(shell.shell)


# Register all commands
shell.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
