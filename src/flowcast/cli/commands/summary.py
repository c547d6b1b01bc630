"""Summary commands."""

import click

from flowcast.cli.error_handling import handle_domain_error
from flowcast.cli.output import echo_json, echo_rule
from flowcast.domain.errors import DomainError
from flowcast.domain.summary import FinancialSummaryCalculator, total_budget
from flowcast.utils.money import format_money, format_percent


@click.command("summary")
@click.option("--accounts", "with_accounts", is_flag=True, help="Include the multi-account overview")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table")
@click.pass_context
def summary(ctx, with_accounts: bool, as_json: bool):
    """Show monthly figures and the 30-day balance outlook."""
    source = ctx.obj["source"]
    today = ctx.obj["today"]
    calculator = FinancialSummaryCalculator()

    try:
        result = calculator.summarize(
            source.list_income_rules(),
            source.list_expense_rules(),
            source.get_current_balance(),
            total_budget(source.list_budget_categories()),
            today,
            accounts=source.list_accounts() if with_accounts else None,
            goals=source.list_goals() if with_accounts else (),
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    if as_json:
        echo_json(result.to_dict())
        return

    click.echo(f"\nFinancial summary as of {today}:")
    echo_rule(50)
    rows = [
        ("Current balance", result.current_balance),
        ("Monthly income", result.monthly_income),
        ("Monthly expenses", result.monthly_expenses),
        ("Net monthly", result.net_income),
        ("Total budget", result.total_budget),
        ("End of month", result.end_of_month_balance),
        ("Lowest balance", result.lowest_balance),
    ]
    for label, amount in rows:
        click.echo(f"{label:<30} {format_money(amount):>19}")
    if result.days_until_negative >= 0:
        click.echo(
            f"Warning: balance goes negative in {result.days_until_negative} day(s)"
        )

    if result.overview is not None:
        click.echo()
        _echo_overview(result.overview)


@click.command("overview")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table")
@click.pass_context
def overview(ctx, as_json: bool):
    """Show account-level totals: cash, debt, utilization and net worth."""
    source = ctx.obj["source"]
    calculator = FinancialSummaryCalculator()

    try:
        result = calculator.overview(source.list_accounts(), source.list_goals())
    except DomainError as e:
        handle_domain_error(ctx, e)

    if as_json:
        echo_json(result.to_dict())
        return

    _echo_overview(result)


@click.command("goals")
@click.pass_context
def goals(ctx):
    """Show progress toward each savings goal."""
    source = ctx.obj["source"]
    today = ctx.obj["today"]
    calculator = FinancialSummaryCalculator()

    try:
        goal_list = source.list_goals()
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not goal_list:
        click.echo("No savings goals found.")
        return

    click.echo("\nSavings goals:")
    echo_rule()
    for goal in sorted(goal_list, key=lambda g: g.priority):
        progress = calculator.goal_progress(goal, today)
        status = "complete" if progress.is_complete else f"{format_money(progress.remaining)} to go"
        click.echo(
            f"{goal.name[:24]:<24} {format_percent(progress.percent):>9} "
            f"{format_money(goal.current_amount):>12} / {format_money(goal.target_amount):<12} {status}"
        )
        if progress.months_left and not progress.is_complete:
            click.echo(
                f"{'':<24} needs {format_money(progress.required_monthly)}/month "
                f"for {progress.months_left} month(s)"
            )


def _echo_overview(result) -> None:
    click.echo("Account overview:")
    echo_rule(50)
    click.echo(f"{'Liquid cash':<30} {format_money(result.liquid_cash):>19}")
    click.echo(f"{'Total debt':<30} {format_money(result.total_debt):>19}")
    click.echo(f"{'Net worth':<30} {format_money(result.net_worth):>19}")
    click.echo(f"{'Minimum payments':<30} {format_money(result.total_minimum_payments):>19}")
    click.echo(f"{'Credit utilization':<30} {format_percent(result.credit_utilization):>19}")
    click.echo(f"{'Weighted APR':<30} {format_percent(result.weighted_apr):>19}")
    click.echo(f"{'Savings goals progress':<30} {format_percent(result.savings_progress):>19}")


def register_commands(cli):
    """Register summary commands with main CLI."""
    cli.add_command(summary)
    cli.add_command(overview)
    cli.add_command(goals)
