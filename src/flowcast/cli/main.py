"""Main CLI entry point."""

import click
from flowcast.cli.date_filters import resolve_cli_today
from flowcast.logger import get_logger, setup_logging
from flowcast.snapshot.factories import create_json_source

# Import and register all commands at module level
from flowcast.cli.commands import (
    forecast,
    summary,
    optimize,
    calendar_cmd,
)

logger = get_logger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.group()
@click.option(
    "--data-path",
    type=click.Path(dir_okay=False),
    help="Path to snapshot JSON file (overrides FLOWCAST_DATA_PATH environment variable)",
    envvar="FLOWCAST_DATA_PATH",
)
@click.option(
    "--today",
    help="Reference date for projections (YYYY-MM-DD or 'today', 'next month', ...)",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    envvar="FLOWCAST_LOG_LEVEL",
    help="Logging verbosity (overrides FLOWCAST_LOG_LEVEL environment variable)",
)
@click.pass_context
def cli(ctx, data_path: str | None, today: str | None, log_level: str | None):
    """Flowcast - Cash-flow forecasting and debt payoff planning.

    Reads income, expenses, accounts and savings goals from a snapshot file
    and projects balances, summaries, payment plans and due dates.
    """
    ctx.ensure_object(dict)
    setup_logging(log_level)

    # Resolve inputs only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        ctx.obj["source"] = create_json_source(data_path=data_path)
        ctx.obj["today"] = resolve_cli_today(ctx, today)
        logger.debug("Running %s as of %s", ctx.invoked_subcommand, ctx.obj["today"])


# Register all commands
forecast.register_commands(cli)
summary.register_commands(cli)
optimize.register_commands(cli)
calendar_cmd.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
