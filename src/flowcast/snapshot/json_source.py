"""JSON-file snapshot source."""

import json
from decimal import Decimal
from pathlib import Path
from typing import Any, Optional

from flowcast.domain.entities import (
    Account,
    BudgetCategory,
    RecurrenceRule,
    SavingsGoal,
)
from flowcast.domain.errors import NotFoundError, ValidationError, snapshot_not_found
from flowcast.logger import get_logger
from flowcast.snapshot.base import SnapshotSource
from flowcast.snapshot.mappers import (
    account_from_dict,
    budget_category_from_dict,
    expense_rule_from_dict,
    goal_from_dict,
    income_rule_from_dict,
)
from flowcast.utils.amount_parser import parse_amount

logger = get_logger(__name__)


class JSONSnapshotSource(SnapshotSource):
    """Snapshot stored as a single JSON document.

    Expected top-level keys (all optional): ``current_balance``, ``income``,
    ``expenses``, ``accounts``, ``savings_goals``, ``budget_categories``.
    """

    def __init__(self, path: str | Path):
        """Initialize JSON snapshot source.

        Args:
            path: Path to the snapshot file
        """
        self.path = Path(path)
        self._data: Optional[dict[str, Any]] = None

    def load(self) -> None:
        """Read and decode the snapshot file.

        Raises:
            NotFoundError: If the file does not exist
            ValidationError: If the file is not a JSON object
        """
        if not self.path.exists():
            raise NotFoundError(snapshot_not_found(str(self.path)))
        with open(self.path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValidationError(f"Snapshot file {self.path} is not valid JSON: {e}")
        if not isinstance(data, dict):
            raise ValidationError(f"Snapshot file {self.path} must contain a JSON object")
        self._data = data
        logger.debug("Loaded snapshot from %s", self.path)

    def _records(self, key: str) -> list[dict[str, Any]]:
        if self._data is None:
            self.load()
        records = self._data.get(key) or []
        if not isinstance(records, list):
            raise ValidationError(f"Snapshot key '{key}' must be a list")
        return records

    def get_current_balance(self) -> Decimal:
        if self._data is None:
            self.load()
        raw = self._data.get("current_balance")
        if raw is None:
            return Decimal("0")
        try:
            return parse_amount(raw)
        except ValueError as e:
            raise ValidationError(f"Snapshot current_balance {raw!r} is invalid: {e}")

    def list_income_rules(self, active_only: bool = True) -> list[RecurrenceRule]:
        rules = [income_rule_from_dict(rec) for rec in self._records("income")]
        return [rule for rule in rules if rule.is_active or not active_only]

    def list_expense_rules(self, active_only: bool = True) -> list[RecurrenceRule]:
        rules = [expense_rule_from_dict(rec) for rec in self._records("expenses")]
        return [rule for rule in rules if rule.is_active or not active_only]

    def list_accounts(self) -> list[Account]:
        return [account_from_dict(rec) for rec in self._records("accounts")]

    def list_goals(self) -> list[SavingsGoal]:
        return [goal_from_dict(rec) for rec in self._records("savings_goals")]

    def list_budget_categories(self) -> list[BudgetCategory]:
        return [budget_category_from_dict(rec) for rec in self._records("budget_categories")]
