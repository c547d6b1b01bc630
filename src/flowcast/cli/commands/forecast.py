"""Cash-flow forecast commands."""

import click

from flowcast.cli.error_handling import handle_domain_error
from flowcast.cli.output import echo_json, echo_rule
from flowcast.config import DEFAULT_UPCOMING_DAYS, horizon_days
from flowcast.domain.errors import DomainError
from flowcast.domain.projection import CashFlowProjector
from flowcast.utils.money import format_money


@click.command("forecast")
@click.option(
    "--days",
    type=click.IntRange(min=0),
    default=horizon_days,
    show_default="30, or FLOWCAST_HORIZON_DAYS",
    help="Number of days after today to project",
)
@click.option("--transactions", "-t", is_flag=True, help="List each day's transactions")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table")
@click.pass_context
def forecast(ctx, days: int, transactions: bool, as_json: bool):
    """Project the running balance day by day.

    Examples:
        flowcast forecast
        flowcast forecast --days 60 -t
        flowcast --today 2024-03-01 forecast --json
    """
    source = ctx.obj["source"]
    today = ctx.obj["today"]
    projector = CashFlowProjector()

    try:
        projection = projector.project(
            source.list_income_rules(),
            source.list_expense_rules(),
            source.get_current_balance(),
            today,
            horizon_days=days,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    if as_json:
        echo_json([day.to_dict() for day in projection])
        return

    click.echo(f"\nCash flow forecast from {today} ({len(projection)} days):")
    echo_rule()
    click.echo(f"{'Date':<12} {'Daily change':>15} {'Balance':>15}  {'Note':<10}")
    echo_rule()
    for day in projection:
        note = "NEGATIVE" if day.is_negative else ""
        click.echo(
            f"{str(day.date):<12} {format_money(day.daily_total):>15} "
            f"{format_money(day.running_balance):>15}  {note:<10}"
        )
        if transactions:
            for txn in day.transactions:
                click.echo(
                    f"{'':<12}   {txn.description[:30]:<30} {format_money(txn.amount):>12} "
                    f"[{txn.category}]"
                )


@click.command("upcoming")
@click.option(
    "--days",
    type=click.IntRange(min=1),
    default=DEFAULT_UPCOMING_DAYS,
    show_default=True,
    help="Look-ahead window in days",
)
@click.pass_context
def upcoming(ctx, days: int):
    """List expenses due in the next few days."""
    source = ctx.obj["source"]
    today = ctx.obj["today"]
    projector = CashFlowProjector()

    try:
        projection = projector.project(
            source.list_income_rules(),
            source.list_expense_rules(),
            source.get_current_balance(),
            today,
            horizon_days=days,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    payments = projector.upcoming_payments(projection, today, days=days)
    if not payments:
        click.echo(f"No payments due in the next {days} days.")
        return

    click.echo(f"\nPayments due in the next {days} days:")
    echo_rule()
    for payment in payments:
        if payment.days_until == 0:
            due = "Due today!"
        elif payment.days_until == 1:
            due = "Due tomorrow"
        else:
            due = f"Due in {payment.days_until} days"
        click.echo(
            f"{str(payment.date):<12} {payment.description[:30]:<30} "
            f"{format_money(payment.amount):>12}  {due:<16} {payment.category}"
        )


def register_commands(cli):
    """Register forecast commands with main CLI."""
    cli.add_command(forecast)
    cli.add_command(upcoming)
