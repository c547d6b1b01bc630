"""Shared pytest fixtures for flowcast tests."""

import json
from datetime import date
from decimal import Decimal

import pytest

from flowcast.domain.entities import (
    Account,
    AccountType,
    Frequency,
    GoalType,
    RecurrenceRule,
    RuleKind,
    SavingsGoal,
)
from flowcast.domain.optimizer import PaymentOptimizer
from flowcast.domain.payment_calendar import PaymentCalendarGenerator
from flowcast.domain.projection import CashFlowProjector
from flowcast.domain.recurrence import RecurrenceExpander
from flowcast.domain.summary import FinancialSummaryCalculator


@pytest.fixture
def today():
    """Fixed reference date so nothing depends on the system clock."""
    return date(2024, 1, 15)


@pytest.fixture
def expander():
    return RecurrenceExpander()


@pytest.fixture
def projector():
    return CashFlowProjector()


@pytest.fixture
def calculator():
    return FinancialSummaryCalculator()


@pytest.fixture
def optimizer():
    return PaymentOptimizer()


@pytest.fixture
def calendar_generator():
    return PaymentCalendarGenerator()


@pytest.fixture
def make_rule():
    """Build a RecurrenceRule with sensible defaults."""

    def _make_rule(**overrides):
        values = {
            "description": "Rule",
            "amount": Decimal("100"),
            "frequency": Frequency.MONTHLY,
            "start_date": date(2024, 1, 1),
            "kind": RuleKind.EXPENSE,
        }
        values.update(overrides)
        return RecurrenceRule(**values)

    return _make_rule


@pytest.fixture
def salary():
    """Monthly salary deposited on the 20th."""
    return RecurrenceRule(
        id=1,
        description="Salary",
        amount=Decimal("2000"),
        frequency=Frequency.MONTHLY,
        start_date=date(2024, 1, 20),
        anchor_day=20,
        kind=RuleKind.INCOME,
    )


@pytest.fixture
def rent():
    """Monthly rent paid on the 16th."""
    return RecurrenceRule(
        id=1,
        description="Rent",
        amount=Decimal("1500"),
        frequency=Frequency.MONTHLY,
        start_date=date(2024, 1, 16),
        anchor_day=16,
        category="Housing",
    )


@pytest.fixture
def gym():
    """Monthly gym membership paid on the 15th."""
    return RecurrenceRule(
        id=2,
        description="Gym",
        amount=Decimal("50"),
        frequency=Frequency.MONTHLY,
        start_date=date(2024, 1, 15),
        anchor_day=15,
    )


@pytest.fixture
def sample_accounts():
    """A checking account and two credit cards."""
    return [
        Account(id=1, name="Checking", type=AccountType.CHECKING, balance=Decimal("1000")),
        Account(
            id=2,
            name="Visa",
            type=AccountType.CREDIT_CARD,
            balance=Decimal("2000"),
            credit_limit=Decimal("5000"),
            apr=Decimal("24"),
            minimum_payment=Decimal("50"),
            due_day=18,
            priority=2,
        ),
        Account(
            id=3,
            name="Store Card",
            type=AccountType.CREDIT_CARD,
            balance=Decimal("500"),
            apr=Decimal("10"),
            minimum_payment=Decimal("25"),
            due_day=25,
            priority=1,
        ),
    ]


@pytest.fixture
def sample_goal():
    return SavingsGoal(
        id=1,
        name="Emergency Fund",
        target_amount=Decimal("1000"),
        current_amount=Decimal("200"),
        target_date=date(2024, 7, 15),
        priority=1,
        goal_type=GoalType.EMERGENCY,
    )


@pytest.fixture
def snapshot_data():
    """Snapshot matching the sample fixtures above, in stored field names."""
    return {
        "current_balance": "1000.00",
        "income": [
            {
                "id": 1,
                "source": "Salary",
                "amount": "2000.00",
                "frequency": "monthly",
                "deposit_day": 20,
                "start_date": "2024-01-20",
            }
        ],
        "expenses": [
            {
                "id": 1,
                "name": "Rent",
                "amount": "1500.00",
                "frequency": "monthly",
                "payment_day": 16,
                "start_date": "2024-01-16",
                "category": "Housing",
            },
            {
                "id": 2,
                "name": "Gym",
                "amount": 50,
                "frequency": "monthly",
                "payment_day": 15,
                "start_date": "2024-01-15",
            },
        ],
        "accounts": [
            {"id": 1, "name": "Checking", "type": "checking", "balance": "1000.00"},
            {
                "id": 2,
                "name": "Visa",
                "type": "credit_card",
                "balance": "2000.00",
                "credit_limit": "5000.00",
                "apr": "24",
                "minimum_payment": "50",
                "due_day": 18,
                "priority": 2,
            },
            {
                "id": 3,
                "name": "Store Card",
                "type": "credit_card",
                "balance": "500.00",
                "apr": "10",
                "minimum_payment": "25",
                "due_day": 25,
                "priority": 1,
            },
        ],
        "savings_goals": [
            {
                "id": 1,
                "name": "Emergency Fund",
                "target_amount": "1000.00",
                "current_amount": "200.00",
                "target_date": "2024-07-15",
                "priority": 1,
                "goal_type": "emergency",
            }
        ],
        "budget_categories": [
            {"category": "Groceries", "budgeted_amount": "400.00"},
            {"category": "Fun", "budgeted_amount": "100.00"},
        ],
    }


@pytest.fixture
def snapshot_file(tmp_path, snapshot_data):
    """Write the sample snapshot to a temporary JSON file."""
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(snapshot_data), encoding="utf-8")
    return path


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def invoke(cli_runner, snapshot_file):
    """Invoke the CLI against the sample snapshot on 2024-01-15."""
    from flowcast.cli.main import cli

    def _invoke(*args):
        return cli_runner.invoke(
            cli,
            ["--data-path", str(snapshot_file), "--today", "2024-01-15", *args],
        )

    return _invoke
