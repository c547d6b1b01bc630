"""Cash-flow projection domain service."""

from collections import defaultdict
from dataclasses import replace
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from flowcast.domain.entities import (
    DayProjection,
    RecurrenceRule,
    RuleKind,
    Transaction,
    UpcomingPayment,
)
from flowcast.domain.recurrence import RecurrenceExpander
from flowcast.logger import get_logger
from flowcast.utils.date_parser import as_day
from flowcast.utils.money import as_decimal

logger = get_logger(__name__)

INCOME_CATEGORY = "Income"
EXPENSE_CATEGORY = "Expense"


class CashFlowProjector:
    """Service for projecting a day-by-day running balance from recurrence rules."""

    def __init__(self, expander: Optional[RecurrenceExpander] = None):
        """Initialize cash-flow projector.

        Args:
            expander: Recurrence expander (a default one is created if omitted)
        """
        self.expander = expander or RecurrenceExpander()

    def project(
        self,
        income_rules: Sequence[RecurrenceRule],
        expense_rules: Sequence[RecurrenceRule],
        current_balance: Decimal | int | str,
        today: date,
        horizon_days: int = 30,
    ) -> list[DayProjection]:
        """Project the running balance from ``today`` to ``today + horizon_days``.

        Args:
            income_rules: Income rules (inactive ones are ignored)
            expense_rules: Expense rules (inactive ones are ignored)
            current_balance: Balance before the first projected day
            today: First projected day
            horizon_days: Number of days after ``today`` to project

        Returns:
            One DayProjection per calendar day, inclusive of both ends, with
            no gaps on days without transactions
        """
        today = as_day(today)
        window_end = today + timedelta(days=horizon_days)
        ledger = self.build_ledger(income_rules, expense_rules, today, window_end)
        by_day = self.group_by_day(ledger)

        running_balance = as_decimal(current_balance)
        projection: list[DayProjection] = []
        for offset in range(horizon_days + 1):
            day = today + timedelta(days=offset)
            day_transactions = tuple(by_day.get(day, ()))
            daily_total = sum((txn.amount for txn in day_transactions), Decimal("0"))
            running_balance += daily_total
            projection.append(
                DayProjection(
                    date=day,
                    transactions=day_transactions,
                    daily_total=daily_total,
                    running_balance=running_balance,
                )
            )

        logger.debug(
            "Projected %d day(s) from %s with %d transaction(s)",
            len(projection),
            today,
            len(ledger),
        )
        return projection

    def build_ledger(
        self,
        income_rules: Iterable[RecurrenceRule],
        expense_rules: Iterable[RecurrenceRule],
        today: date,
        window_end: date,
    ) -> list[Transaction]:
        """Expand all active rules into a date-ordered transaction ledger.

        Income is positive with category "Income"; expenses are negative
        with the rule category or "Expense". Same-day transactions keep
        their input order (incomes first).
        """
        ledger: list[Transaction] = []

        for rule in income_rules:
            if not rule.is_active:
                continue
            if rule.kind != RuleKind.INCOME:
                # Rules in the income list are income whatever their kind says
                rule = replace(rule, kind=RuleKind.INCOME)
            for occurrence in self.expander.expand(rule, window_end, today):
                ledger.append(
                    Transaction(
                        date=occurrence,
                        type=RuleKind.INCOME,
                        description=rule.description,
                        amount=as_decimal(rule.amount),
                        category=INCOME_CATEGORY,
                    )
                )

        for rule in expense_rules:
            if not rule.is_active:
                continue
            if rule.kind != RuleKind.EXPENSE:
                rule = replace(rule, kind=RuleKind.EXPENSE)
            for occurrence in self.expander.expand(rule, window_end, today):
                ledger.append(
                    Transaction(
                        date=occurrence,
                        type=RuleKind.EXPENSE,
                        description=rule.description,
                        amount=-as_decimal(rule.amount),
                        category=rule.category or EXPENSE_CATEGORY,
                    )
                )

        ledger.sort(key=lambda txn: txn.date)
        return ledger

    def group_by_day(self, ledger: Iterable[Transaction]) -> dict[date, list[Transaction]]:
        """Bucket transactions by calendar day, preserving ledger order."""
        by_day: dict[date, list[Transaction]] = defaultdict(list)
        for txn in ledger:
            by_day[as_day(txn.date)].append(txn)
        return dict(by_day)

    def upcoming_payments(
        self,
        projection: Sequence[DayProjection],
        today: date,
        days: int = 7,
    ) -> list[UpcomingPayment]:
        """List expenses from a projection falling within the next ``days`` days.

        Args:
            projection: Output of ``project``
            today: Reference date
            days: Size of the look-ahead window (``today`` counts as day 0)

        Returns:
            Upcoming payments in date order, amounts positive
        """
        today = as_day(today)
        cutoff = today + timedelta(days=days)
        payments: list[UpcomingPayment] = []
        for day in projection:
            if not today <= day.date < cutoff:
                continue
            for txn in day.transactions:
                if txn.type != RuleKind.EXPENSE:
                    continue
                payments.append(
                    UpcomingPayment(
                        date=day.date,
                        description=txn.description,
                        amount=abs(txn.amount),
                        category=txn.category,
                        days_until=(day.date - today).days,
                    )
                )
        return payments
