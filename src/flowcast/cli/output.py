"""CLI output helpers."""

import json
from typing import Any

import click


def echo_json(data: Any) -> None:
    """Print data as indented JSON."""
    click.echo(json.dumps(data, indent=2))


def echo_rule(width: int = 80) -> None:
    click.echo("-" * width)
