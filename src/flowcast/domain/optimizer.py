"""Debt payoff and savings allocation domain service."""

import math
from decimal import Decimal
from typing import Callable, Iterable, Sequence

from flowcast.domain.entities import (
    Account,
    OptimizationResult,
    PaymentRecommendation,
    PaymentType,
    SavingsGoal,
    Strategy,
    TargetKind,
)
from flowcast.domain.errors import ValidationError, unknown_choice
from flowcast.logger import get_logger
from flowcast.utils.money import as_decimal

logger = get_logger(__name__)

ZERO = Decimal("0")

# Share of the remaining surplus a single goal may take in one pass.
GOAL_SHARE_CAP = Decimal("0.4")
INTEREST_ESTIMATE_MONTHS = 6


def _apr(debt: Account) -> Decimal:
    return as_decimal(debt.apr) if debt.apr is not None else ZERO


def _balance(debt: Account) -> Decimal:
    return as_decimal(debt.balance)


# Sort keys per strategy. Ties fall back to the other criteria, then input order.
_ORDERING: dict[Strategy, Callable[[Account], tuple]] = {
    Strategy.AVALANCHE: lambda debt: (-_apr(debt), _balance(debt)),
    Strategy.SNOWBALL: lambda debt: (_balance(debt), -_apr(debt)),
    Strategy.CUSTOM: lambda debt: (debt.priority, -_apr(debt)),
}

_REASONING: dict[Strategy, Callable[[Account], str]] = {
    Strategy.AVALANCHE: lambda debt: f"Highest APR ({_apr(debt):.2f}%)",
    Strategy.SNOWBALL: lambda debt: f"Lowest balance (${_balance(debt):,.2f})",
    Strategy.CUSTOM: lambda debt: f"Priority level {debt.priority}",
}


class PaymentOptimizer:
    """Service for distributing surplus money across debts and savings goals."""

    def optimize(
        self,
        debts: Sequence[Account],
        goals: Sequence[SavingsGoal],
        extra_amount: Decimal | int | str,
        strategy: Strategy | str,
    ) -> OptimizationResult:
        """Allocate ``extra_amount`` under the chosen strategy.

        Minimum payments are always recommended. The surplus then goes to
        debts in strategy order, each up to its balance, and anything left
        goes to unfinished goals by priority, each capped at 40% of what
        remains at that point.

        Args:
            debts: Debt accounts
            goals: Savings goals
            extra_amount: Surplus to allocate on top of minimum payments
            strategy: Ordering strategy for debts

        Returns:
            OptimizationResult with recommendations in allocation order

        Raises:
            ValidationError: If strategy is not one of avalanche, snowball, custom
        """
        strategy = parse_strategy(strategy)
        extra_amount = as_decimal(extra_amount)
        remaining = extra_amount
        recommendations: list[PaymentRecommendation] = []

        minimum_total = ZERO
        for debt in debts:
            minimum = as_decimal(debt.minimum_payment or 0)
            if minimum > 0:
                minimum_total += minimum
                recommendations.append(
                    PaymentRecommendation(
                        target_kind=TargetKind.DEBT,
                        target_id=debt.id,
                        target_name=debt.name,
                        amount=minimum,
                        payment_type=PaymentType.MINIMUM,
                        reasoning="Required minimum payment",
                    )
                )

        extra_total = ZERO
        interest_saved = ZERO
        for debt in self.order_debts(debts, strategy):
            if remaining <= 0:
                break
            payment = min(remaining, _balance(debt))
            if payment <= 0:
                continue
            recommendations.append(
                PaymentRecommendation(
                    target_kind=TargetKind.DEBT,
                    target_id=debt.id,
                    target_name=debt.name,
                    amount=payment,
                    payment_type=PaymentType.EXTRA,
                    reasoning=_REASONING[strategy](debt),
                )
            )
            remaining -= payment
            extra_total += payment
            interest_saved += self.interest_avoided(debt)
            logger.debug("Allocated %s extra to debt %s", payment, debt.id)

        if remaining > 0 and goals:
            goal_recommendations, remaining = self._allocate_goals(goals, remaining)
            recommendations.extend(goal_recommendations)

        total_debt = sum((_balance(debt) for debt in debts), ZERO)
        payoff_months = self.estimate_payoff_months(total_debt, minimum_total + extra_total)

        return OptimizationResult(
            recommendations=tuple(recommendations),
            total_extra_allocated=extra_amount - remaining,
            remaining_extra=remaining,
            projected_interest_saved=interest_saved,
            estimated_payoff_months=payoff_months,
            strategy_used=strategy,
        )

    def order_debts(self, debts: Iterable[Account], strategy: Strategy) -> list[Account]:
        """Return debts in the order the strategy pays them down."""
        return sorted(debts, key=_ORDERING[parse_strategy(strategy)])

    def interest_avoided(self, debt: Account) -> Decimal:
        """Simple (non-compounded) interest on the pre-payment balance over six months."""
        monthly_interest = _balance(debt) * _apr(debt) / Decimal("100") / Decimal("12")
        return monthly_interest * INTEREST_ESTIMATE_MONTHS

    def estimate_payoff_months(self, total_debt: Decimal, monthly_payments: Decimal) -> int:
        """Months to clear ``total_debt`` at ``monthly_payments``; 0 if either is zero."""
        if total_debt <= 0 or monthly_payments <= 0:
            return 0
        return math.ceil(total_debt / monthly_payments)

    def debts_from_accounts(self, accounts: Iterable[Account]) -> list[Account]:
        """Credit-card accounts that still carry a balance, in input order."""
        return [acc for acc in accounts if acc.is_debt and _balance(acc) > 0]

    def _allocate_goals(
        self, goals: Iterable[SavingsGoal], remaining: Decimal
    ) -> tuple[list[PaymentRecommendation], Decimal]:
        open_goals = [
            goal
            for goal in goals
            if as_decimal(goal.current_amount) < as_decimal(goal.target_amount)
        ]
        recommendations: list[PaymentRecommendation] = []
        for goal in sorted(open_goals, key=lambda g: g.priority):
            if remaining <= 0:
                break
            contribution = min(remaining, goal.amount_needed, remaining * GOAL_SHARE_CAP)
            if contribution <= 0:
                continue
            recommendations.append(
                PaymentRecommendation(
                    target_kind=TargetKind.GOAL,
                    target_id=goal.id,
                    target_name=goal.name,
                    amount=contribution,
                    payment_type=PaymentType.SAVINGS,
                    reasoning=f"Savings goal priority {goal.priority} ({goal.goal_type.value})",
                )
            )
            remaining -= contribution
        return recommendations, remaining


def parse_strategy(strategy: Strategy | str) -> Strategy:
    """Resolve a strategy name to the Strategy enum."""
    try:
        return Strategy(strategy)
    except ValueError:
        raise ValidationError(
            unknown_choice("strategy", "name", strategy, [s.value for s in Strategy])
        )
