"""Domain model entities for flowcast.

These are pure data classes representing the records the forecasting engine
consumes (rules, accounts, goals) and the results it produces. They are
independent of how the surrounding application stores or transports them.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from flowcast.utils.money import money_str


class Frequency(str, Enum):
    """How often a recurrence rule repeats."""

    WEEKLY = "weekly"
    BIWEEKLY = "bi-weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    ONE_TIME = "one-time"


class RuleKind(str, Enum):
    """Whether a rule adds or removes money."""

    INCOME = "income"
    EXPENSE = "expense"


class AccountType(str, Enum):
    CHECKING = "checking"
    SAVINGS = "savings"
    CREDIT_CARD = "credit_card"


class GoalType(str, Enum):
    EMERGENCY = "emergency"
    TIME_SENSITIVE = "time_sensitive"
    FLEXIBLE = "flexible"
    LONG_TERM = "long_term"


class Strategy(str, Enum):
    """Debt payoff ordering criterion."""

    AVALANCHE = "avalanche"
    SNOWBALL = "snowball"
    CUSTOM = "custom"


class PaymentType(str, Enum):
    MINIMUM = "minimum"
    EXTRA = "extra"
    SAVINGS = "savings"


class TargetKind(str, Enum):
    DEBT = "debt"
    GOAL = "goal"


class ScheduledPaymentKind(str, Enum):
    MINIMUM_PAYMENT = "minimum_payment"
    EXPENSE = "expense"


@dataclass(frozen=True)
class RecurrenceRule:
    """Income or expense recurrence rule.

    ``amount`` is always stored positive; the sign comes from ``kind``.
    ``anchor_day`` is the deposit day for income and the payment day for
    expenses. ``is_recurring`` only has meaning for expenses.
    """

    description: str
    amount: Decimal
    frequency: Frequency
    start_date: date
    kind: RuleKind = RuleKind.EXPENSE
    anchor_day: Optional[int] = None
    specific_date: Optional[date] = None
    end_date: Optional[date] = None
    is_recurring: bool = True
    is_active: bool = True
    category: Optional[str] = None
    account_id: Optional[int] = None
    id: Optional[int] = None

    @property
    def is_expense(self) -> bool:
        return self.kind == RuleKind.EXPENSE

    @property
    def repeats(self) -> bool:
        """True if the rule can yield more than one occurrence."""
        if self.specific_date is not None or self.frequency == Frequency.ONE_TIME:
            return False
        if self.is_expense and not self.is_recurring:
            return False
        return True


@dataclass(frozen=True)
class Account:
    """Bank or credit account.

    For credit cards ``balance`` is the amount owed, not available funds.
    """

    id: int
    name: str
    type: AccountType
    balance: Decimal
    credit_limit: Optional[Decimal] = None
    apr: Optional[Decimal] = None
    minimum_payment: Optional[Decimal] = None
    due_day: Optional[int] = None
    priority: int = 5

    @property
    def is_debt(self) -> bool:
        return self.type == AccountType.CREDIT_CARD


@dataclass(frozen=True)
class SavingsGoal:
    """Savings goal. ``current_amount`` may exceed ``target_amount``."""

    id: int
    name: str
    target_amount: Decimal
    current_amount: Decimal = Decimal("0")
    target_date: Optional[date] = None
    priority: int = 5
    goal_type: GoalType = GoalType.FLEXIBLE
    auto_contribution: Decimal = Decimal("0")

    @property
    def amount_needed(self) -> Decimal:
        return max(self.target_amount - self.current_amount, Decimal("0"))


@dataclass(frozen=True)
class BudgetCategory:
    """Budgeted amount for a spending category."""

    category: str
    budgeted_amount: Decimal


@dataclass(frozen=True)
class Transaction:
    """Projected transaction produced by expanding a rule.

    ``amount`` is signed: income positive, expense negative.
    """

    date: date
    type: RuleKind
    description: str
    amount: Decimal
    category: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "type": self.type.value,
            "description": self.description,
            "amount": money_str(self.amount),
            "category": self.category,
        }


@dataclass(frozen=True)
class DayProjection:
    """One calendar day of a cash-flow projection."""

    date: date
    transactions: tuple[Transaction, ...]
    daily_total: Decimal
    running_balance: Decimal

    @property
    def is_negative(self) -> bool:
        return self.running_balance < 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "transactions": [txn.to_dict() for txn in self.transactions],
            "daily_total": money_str(self.daily_total),
            "running_balance": money_str(self.running_balance),
            "is_negative": self.is_negative,
        }


@dataclass(frozen=True)
class UpcomingPayment:
    """Expense due within the next few days of a projection."""

    date: date
    description: str
    amount: Decimal
    category: str
    days_until: int


@dataclass(frozen=True)
class FinancialOverview:
    """Account-aware aggregate figures."""

    liquid_cash: Decimal
    total_debt: Decimal
    total_credit_limit: Decimal
    credit_utilization: Decimal
    weighted_apr: Decimal
    net_worth: Decimal
    savings_progress: Decimal
    total_minimum_payments: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {
            "liquid_cash": money_str(self.liquid_cash),
            "total_debt": money_str(self.total_debt),
            "total_credit_limit": money_str(self.total_credit_limit),
            "credit_utilization": money_str(self.credit_utilization),
            "weighted_apr": money_str(self.weighted_apr),
            "net_worth": money_str(self.net_worth),
            "savings_progress": money_str(self.savings_progress),
            "total_minimum_payments": money_str(self.total_minimum_payments),
        }


@dataclass(frozen=True)
class Summary:
    """Headline forecast figures.

    Monetary fields hold full-precision values; ``to_dict`` rounds them.
    ``days_until_negative`` is -1 when the balance never goes negative.
    """

    current_balance: Decimal
    monthly_income: Decimal
    monthly_expenses: Decimal
    total_budget: Decimal
    net_income: Decimal
    end_of_month_balance: Decimal
    lowest_balance: Decimal
    days_until_negative: int
    overview: Optional[FinancialOverview] = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "current_balance": money_str(self.current_balance),
            "monthly_income": money_str(self.monthly_income),
            "monthly_expenses": money_str(self.monthly_expenses),
            "total_budget": money_str(self.total_budget),
            "net_income": money_str(self.net_income),
            "end_of_month_balance": money_str(self.end_of_month_balance),
            "lowest_balance": money_str(self.lowest_balance),
            "days_until_negative": self.days_until_negative,
        }
        if self.overview is not None:
            result["overview"] = self.overview.to_dict()
        return result


@dataclass(frozen=True)
class GoalProgress:
    """Progress of one savings goal toward its target."""

    goal_id: int
    name: str
    percent: Decimal
    remaining: Decimal
    is_complete: bool
    months_left: int
    required_monthly: Decimal


@dataclass(frozen=True)
class PaymentRecommendation:
    """Single allocation produced by the payment optimizer."""

    target_kind: TargetKind
    target_id: int
    amount: Decimal
    payment_type: PaymentType
    reasoning: str
    target_name: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "target_kind": self.target_kind.value,
            "target_id": self.target_id,
            "target_name": self.target_name,
            "amount": money_str(self.amount),
            "payment_type": self.payment_type.value,
            "reasoning": self.reasoning,
        }


@dataclass(frozen=True)
class OptimizationResult:
    """Outcome of distributing a surplus across debts and goals."""

    recommendations: tuple[PaymentRecommendation, ...]
    total_extra_allocated: Decimal
    remaining_extra: Decimal
    projected_interest_saved: Decimal
    estimated_payoff_months: int
    strategy_used: Strategy

    def to_dict(self) -> dict[str, Any]:
        return {
            "recommendations": [rec.to_dict() for rec in self.recommendations],
            "total_extra_allocated": money_str(self.total_extra_allocated),
            "remaining_extra": money_str(self.remaining_extra),
            "projected_interest_saved": money_str(self.projected_interest_saved),
            "estimated_payoff_months": self.estimated_payoff_months,
            "strategy_used": self.strategy_used.value,
        }


@dataclass(frozen=True)
class ScheduledPayment:
    """Payment reminder placed on a payment-calendar day."""

    kind: ScheduledPaymentKind
    name: str
    amount: Decimal
    source_id: Optional[int] = None


@dataclass(frozen=True)
class CalendarDay:
    """Payment-calendar day with at least one payment due."""

    date: date
    payments: tuple[ScheduledPayment, ...] = field(default_factory=tuple)
    total_amount: Decimal = Decimal("0")

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "payments": [
                {
                    "kind": payment.kind.value,
                    "name": payment.name,
                    "amount": money_str(payment.amount),
                    "source_id": payment.source_id,
                }
                for payment in self.payments
            ],
            "total_amount": money_str(self.total_amount),
        }
