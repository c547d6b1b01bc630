"""Domain layer for flowcast application."""

from flowcast.domain.recurrence import RecurrenceExpander
from flowcast.domain.projection import CashFlowProjector
from flowcast.domain.summary import FinancialSummaryCalculator
from flowcast.domain.optimizer import PaymentOptimizer
from flowcast.domain.payment_calendar import PaymentCalendarGenerator

__all__ = [
    "RecurrenceExpander",
    "CashFlowProjector",
    "FinancialSummaryCalculator",
    "PaymentOptimizer",
    "PaymentCalendarGenerator",
]
