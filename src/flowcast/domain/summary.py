"""Financial summary domain service."""

from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from flowcast.domain.entities import (
    Account,
    AccountType,
    BudgetCategory,
    DayProjection,
    FinancialOverview,
    Frequency,
    GoalProgress,
    RecurrenceRule,
    SavingsGoal,
    Summary,
)
from flowcast.domain.projection import CashFlowProjector
from flowcast.logger import get_logger
from flowcast.utils.date_parser import as_day, last_day_of_month, months_until
from flowcast.utils.money import as_decimal

logger = get_logger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")

# Occurrences per month, used to normalize every rule to a monthly figure.
FREQUENCY_MULTIPLIERS: dict[Frequency, Decimal] = {
    Frequency.WEEKLY: Decimal("4.33"),
    Frequency.BIWEEKLY: Decimal("2.17"),
    Frequency.MONTHLY: Decimal("1"),
    Frequency.YEARLY: Decimal("1") / Decimal("12"),
    Frequency.ONE_TIME: ZERO,
}

SUMMARY_WINDOW_DAYS = 30

LIQUID_ACCOUNT_TYPES = (AccountType.CHECKING, AccountType.SAVINGS)


class FinancialSummaryCalculator:
    """Service for deriving headline figures from rules, accounts and goals."""

    def __init__(self, projector: Optional[CashFlowProjector] = None):
        """Initialize summary calculator.

        Args:
            projector: Cash-flow projector (a default one is created if omitted)
        """
        self.projector = projector or CashFlowProjector()

    def summarize(
        self,
        income_rules: Sequence[RecurrenceRule],
        expense_rules: Sequence[RecurrenceRule],
        current_balance: Decimal | int | str,
        budget_total: Decimal | int | str,
        today: date,
        accounts: Optional[Sequence[Account]] = None,
        goals: Sequence[SavingsGoal] = (),
    ) -> Summary:
        """Build the headline summary for the next 30 days.

        Args:
            income_rules: Income rules
            expense_rules: Expense rules
            current_balance: Balance before today's transactions
            budget_total: Sum of budgeted category amounts
            today: Reference date
            accounts: If given, the summary also carries an account-aware overview
            goals: Savings goals used by the overview

        Returns:
            Summary with full-precision monetary values
        """
        today = as_day(today)
        current_balance = as_decimal(current_balance)
        monthly_income = self.monthly_income(income_rules)
        monthly_expenses = self.monthly_expenses(expense_rules)

        projection = self.projector.project(
            income_rules,
            expense_rules,
            current_balance,
            today,
            horizon_days=SUMMARY_WINDOW_DAYS,
        )

        overview = None
        if accounts is not None:
            overview = self.overview(accounts, goals)

        return Summary(
            current_balance=current_balance,
            monthly_income=monthly_income,
            monthly_expenses=monthly_expenses,
            total_budget=as_decimal(budget_total),
            net_income=monthly_income - monthly_expenses,
            end_of_month_balance=self.end_of_month_balance(
                projection, today, current_balance
            ),
            lowest_balance=self.lowest_balance(projection, current_balance),
            days_until_negative=self.days_until_negative(projection),
            overview=overview,
        )

    def monthly_amount(self, rule: RecurrenceRule) -> Decimal:
        """Normalize one rule's amount to a monthly figure."""
        multiplier = FREQUENCY_MULTIPLIERS.get(rule.frequency, ZERO)
        return as_decimal(rule.amount) * multiplier

    def monthly_income(self, income_rules: Iterable[RecurrenceRule]) -> Decimal:
        return sum(
            (self.monthly_amount(rule) for rule in income_rules if rule.is_active),
            ZERO,
        )

    def monthly_expenses(self, expense_rules: Iterable[RecurrenceRule]) -> Decimal:
        """Monthly expenses; non-recurring expenses are left out."""
        return sum(
            (
                self.monthly_amount(rule)
                for rule in expense_rules
                if rule.is_active and rule.is_recurring
            ),
            ZERO,
        )

    def end_of_month_balance(
        self,
        projection: Sequence[DayProjection],
        today: date,
        fallback: Decimal,
    ) -> Decimal:
        """Running balance on the last day of the current month.

        Falls back to ``fallback`` when that day is outside the projection.
        """
        month_end = last_day_of_month(as_day(today))
        for day in projection:
            if day.date == month_end:
                return day.running_balance
        return fallback

    def lowest_balance(
        self, projection: Sequence[DayProjection], fallback: Decimal
    ) -> Decimal:
        if not projection:
            return fallback
        return min(day.running_balance for day in projection)

    def days_until_negative(self, projection: Sequence[DayProjection]) -> int:
        """Index of the first negative day, or -1 if the balance stays non-negative."""
        for index, day in enumerate(projection):
            if day.is_negative:
                return index
        return -1

    def overview(
        self, accounts: Sequence[Account], goals: Sequence[SavingsGoal] = ()
    ) -> FinancialOverview:
        """Aggregate account and goal figures for multi-account mode."""
        liquid_cash = sum(
            (as_decimal(acc.balance) for acc in accounts if acc.type in LIQUID_ACCOUNT_TYPES),
            ZERO,
        )
        debts = [acc for acc in accounts if acc.is_debt]
        total_debt = sum((as_decimal(acc.balance) for acc in debts), ZERO)
        total_credit_limit = sum(
            (as_decimal(acc.credit_limit) for acc in debts if acc.credit_limit is not None),
            ZERO,
        )
        total_minimum_payments = sum(
            (as_decimal(acc.minimum_payment) for acc in debts if acc.minimum_payment is not None),
            ZERO,
        )

        credit_utilization = ZERO
        if total_credit_limit:
            credit_utilization = total_debt / total_credit_limit * HUNDRED

        weighted_apr = ZERO
        if total_debt:
            weighted_apr = (
                sum(
                    (as_decimal(acc.balance) * as_decimal(acc.apr or 0) for acc in debts),
                    ZERO,
                )
                / total_debt
            )

        target_total = sum((as_decimal(goal.target_amount) for goal in goals), ZERO)
        current_total = sum((as_decimal(goal.current_amount) for goal in goals), ZERO)
        savings_progress = ZERO
        if target_total:
            savings_progress = current_total / target_total * HUNDRED

        logger.debug(
            "Overview over %d account(s), %d debt(s), %d goal(s)",
            len(accounts),
            len(debts),
            len(goals),
        )
        return FinancialOverview(
            liquid_cash=liquid_cash,
            total_debt=total_debt,
            total_credit_limit=total_credit_limit,
            credit_utilization=credit_utilization,
            weighted_apr=weighted_apr,
            net_worth=liquid_cash - total_debt,
            savings_progress=savings_progress,
            total_minimum_payments=total_minimum_payments,
        )

    def goal_progress(self, goal: SavingsGoal, today: date) -> GoalProgress:
        """Progress of a goal, including the monthly amount needed to hit its date."""
        target = as_decimal(goal.target_amount)
        current = as_decimal(goal.current_amount)
        percent = current / target * HUNDRED if target else ZERO
        remaining = goal.amount_needed

        months_left = 0
        if goal.target_date is not None:
            months_left = months_until(as_day(today), goal.target_date)
        required_monthly = remaining / months_left if months_left else ZERO

        return GoalProgress(
            goal_id=goal.id,
            name=goal.name,
            percent=percent,
            remaining=remaining,
            is_complete=current >= target,
            months_left=months_left,
            required_monthly=required_monthly,
        )


def total_budget(categories: Iterable[BudgetCategory]) -> Decimal:
    """Sum budgeted amounts across categories."""
    return sum((as_decimal(cat.budgeted_amount) for cat in categories), ZERO)
