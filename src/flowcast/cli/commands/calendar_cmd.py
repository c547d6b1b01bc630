"""Payment calendar command."""

import click

from flowcast.cli.error_handling import handle_domain_error
from flowcast.cli.output import echo_json, echo_rule
from flowcast.domain.errors import DomainError
from flowcast.domain.payment_calendar import PaymentCalendarGenerator
from flowcast.utils.money import format_money


@click.command("calendar")
@click.option(
    "--days",
    type=click.IntRange(min=1),
    default=30,
    show_default=True,
    help="Number of days to cover, starting today",
)
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table")
@click.pass_context
def calendar(ctx, days: int, as_json: bool):
    """List payment due dates (card minimums and expense payment days).

    This is a reminder list keyed on day-of-month only; use 'forecast' for
    the full recurrence-aware projection.
    """
    source = ctx.obj["source"]
    today = ctx.obj["today"]
    generator = PaymentCalendarGenerator()

    try:
        entries = generator.calendar(
            source.list_accounts(), source.list_expense_rules(), today, days
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    if as_json:
        echo_json([entry.to_dict() for entry in entries])
        return

    if not entries:
        click.echo(f"No payments due in the next {days} days.")
        return

    click.echo(f"\nPayment calendar ({days} days from {today}):")
    echo_rule()
    for entry in entries:
        click.echo(f"{entry.date}  total {format_money(entry.total_amount)}")
        for payment in entry.payments:
            label = "minimum" if payment.kind.value == "minimum_payment" else "expense"
            click.echo(f"    {label:<8} {payment.name[:40]:<40} {format_money(payment.amount):>12}")


def register_commands(cli):
    """Register calendar command with main CLI."""
    cli.add_command(calendar)
