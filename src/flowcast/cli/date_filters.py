"""CLI helpers for reference-date resolution."""

from datetime import date

import click

from flowcast.utils.date_parser import parse_date


def resolve_cli_today(ctx, today: str | None) -> date:
    """Resolve the --today option, defaulting to the system date.

    This is the only place the clock is read; everything downstream gets the
    resolved date passed in.
    """
    if not today:
        return date.today()
    try:
        return parse_date(today)
    except ValueError as e:
        click.echo(f"Error: Invalid --today date: {e}", err=True)
        ctx.exit(1)
