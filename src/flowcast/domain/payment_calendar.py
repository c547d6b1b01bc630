"""Payment calendar domain service.

Expenses are placed on the day whose day-of-month equals their payment day,
without consulting frequency, start/end dates or specific dates. The calendar
is a list of raw payment-day reminders; ``CashFlowProjector`` is the
recurrence-aware forecast, and the two may disagree.
"""

from datetime import date, timedelta
from decimal import Decimal
from typing import Sequence

from flowcast.domain.entities import (
    Account,
    CalendarDay,
    RecurrenceRule,
    ScheduledPayment,
    ScheduledPaymentKind,
)
from flowcast.utils.date_parser import as_day
from flowcast.utils.money import as_decimal


class PaymentCalendarGenerator:
    """Service for listing payments due over the next few days."""

    def calendar(
        self,
        accounts: Sequence[Account],
        expenses: Sequence[RecurrenceRule],
        today: date,
        days: int = 30,
    ) -> list[CalendarDay]:
        """Build a sparse payment calendar.

        Args:
            accounts: Accounts; credit cards contribute minimum payments on their due day
            expenses: Expense rules; each contributes on its payment day
            today: First calendar day
            days: Number of days to cover, starting with ``today``

        Returns:
            CalendarDay entries in date order, only for days with payments
        """
        today = as_day(today)
        result: list[CalendarDay] = []
        for offset in range(days):
            day = today + timedelta(days=offset)
            payments = self.payments_on(accounts, expenses, day)
            if not payments:
                continue
            result.append(
                CalendarDay(
                    date=day,
                    payments=tuple(payments),
                    total_amount=sum((p.amount for p in payments), Decimal("0")),
                )
            )
        return result

    def payments_on(
        self,
        accounts: Sequence[Account],
        expenses: Sequence[RecurrenceRule],
        day: date,
    ) -> list[ScheduledPayment]:
        payments: list[ScheduledPayment] = []
        for account in accounts:
            if not account.is_debt or account.due_day != day.day:
                continue
            minimum = as_decimal(account.minimum_payment or 0)
            if minimum > 0:
                payments.append(
                    ScheduledPayment(
                        kind=ScheduledPaymentKind.MINIMUM_PAYMENT,
                        name=account.name,
                        amount=minimum,
                        source_id=account.id,
                    )
                )
        for expense in expenses:
            if not expense.is_active or expense.anchor_day != day.day:
                continue
            payments.append(
                ScheduledPayment(
                    kind=ScheduledPaymentKind.EXPENSE,
                    name=expense.description,
                    amount=as_decimal(expense.amount),
                    source_id=expense.id,
                )
            )
        return payments
