"""Debt payoff recommendation command."""

import click

from flowcast.cli.error_handling import handle_domain_error
from flowcast.cli.output import echo_json, echo_rule
from flowcast.domain.entities import Strategy
from flowcast.domain.errors import DomainError
from flowcast.domain.optimizer import PaymentOptimizer
from flowcast.utils.amount_parser import parse_amount
from flowcast.utils.money import format_money


@click.command("optimize")
@click.option("--extra", required=True, help="Extra money to allocate (e.g. 500 or '$1,200.00')")
@click.option(
    "--strategy",
    type=click.Choice([s.value for s in Strategy]),
    default=Strategy.AVALANCHE.value,
    show_default=True,
    help="avalanche = highest APR first, snowball = lowest balance first, custom = account priority",
)
@click.option("--no-goals", is_flag=True, help="Do not send leftover money to savings goals")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table")
@click.pass_context
def optimize(ctx, extra: str, strategy: str, no_goals: bool, as_json: bool):
    """Recommend how to split extra money across debts and savings goals.

    Examples:
        flowcast optimize --extra 500
        flowcast optimize --extra 1200 --strategy snowball
    """
    source = ctx.obj["source"]
    optimizer = PaymentOptimizer()

    try:
        extra_amount = parse_amount(extra)
    except ValueError as e:
        click.echo(f"Error: Invalid --extra amount: {e}", err=True)
        ctx.exit(1)
    if extra_amount < 0:
        click.echo("Error: --extra must not be negative", err=True)
        ctx.exit(1)

    try:
        debts = optimizer.debts_from_accounts(source.list_accounts())
        goal_list = [] if no_goals else source.list_goals()
        result = optimizer.optimize(debts, goal_list, extra_amount, strategy)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if as_json:
        echo_json(result.to_dict())
        return

    if not result.recommendations:
        click.echo("No debts or open savings goals to allocate to.")
        return

    click.echo(f"\nPayment plan ({result.strategy_used.value}):")
    echo_rule(90)
    click.echo(f"{'Type':<9} {'Target':<24} {'Amount':>12}  {'Why':<40}")
    echo_rule(90)
    for rec in result.recommendations:
        click.echo(
            f"{rec.payment_type.value:<9} {rec.target_name[:24]:<24} "
            f"{format_money(rec.amount):>12}  {rec.reasoning:<40}"
        )
    echo_rule(90)
    click.echo(f"{'Extra allocated':<34} {format_money(result.total_extra_allocated):>12}")
    click.echo(f"{'Extra remaining':<34} {format_money(result.remaining_extra):>12}")
    click.echo(f"{'Interest avoided (6 months)':<34} {format_money(result.projected_interest_saved):>12}")
    if result.estimated_payoff_months:
        click.echo(f"Estimated debt-free in {result.estimated_payoff_months} month(s)")


def register_commands(cli):
    """Register optimize command with main CLI."""
    cli.add_command(optimize)
