"""Abstract snapshot source interface."""

from abc import ABC, abstractmethod
from decimal import Decimal

from flowcast.domain.entities import (
    Account,
    BudgetCategory,
    RecurrenceRule,
    SavingsGoal,
)


class SnapshotSource(ABC):
    """Read-only supplier of the record lists the engine works on."""

    @abstractmethod
    def load(self) -> None:
        """Load the snapshot from its backing store."""
        pass

    @abstractmethod
    def get_current_balance(self) -> Decimal:
        """Get the current spendable balance."""
        pass

    @abstractmethod
    def list_income_rules(self, active_only: bool = True) -> list[RecurrenceRule]:
        """List income rules (soft-deleted rules are skipped unless asked for)."""
        pass

    @abstractmethod
    def list_expense_rules(self, active_only: bool = True) -> list[RecurrenceRule]:
        """List expense rules (soft-deleted rules are skipped unless asked for)."""
        pass

    @abstractmethod
    def list_accounts(self) -> list[Account]:
        """List all accounts."""
        pass

    @abstractmethod
    def list_goals(self) -> list[SavingsGoal]:
        """List all savings goals."""
        pass

    @abstractmethod
    def list_budget_categories(self) -> list[BudgetCategory]:
        """List all budget categories."""
        pass
