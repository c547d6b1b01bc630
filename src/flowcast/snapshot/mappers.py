"""Mapper functions to convert snapshot records into domain entities.

Snapshot records are plain dictionaries as decoded from JSON. Field names
follow the stored schema (``source``/``deposit_day`` for income,
``name``/``payment_day`` for expenses). Every malformed field raises
ValidationError naming the record, so bad data never reaches the engine.
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, TypeVar

from flowcast.domain import entities as domain
from flowcast.domain.errors import (
    ValidationError,
    invalid_field,
    missing_field,
    unknown_choice,
)
from flowcast.utils.amount_parser import parse_amount
from flowcast.utils.date_parser import parse_date

E = TypeVar("E", bound=Enum)


def income_rule_from_dict(data: dict[str, Any]) -> domain.RecurrenceRule:
    """Convert an income record to a RecurrenceRule."""
    label = _label("income", data, "source")
    return domain.RecurrenceRule(
        id=_optional_int(data, "id", label),
        description=_text(data, ("source", "description"), label),
        amount=_amount(data, "amount", label, non_negative=True),
        frequency=_choice(domain.Frequency, data, "frequency", label),
        anchor_day=_day(data, ("deposit_day", "anchor_day"), label),
        specific_date=_optional_date(data, "specific_date", label),
        start_date=_required_date(data, "start_date", label),
        end_date=_optional_date(data, "end_date", label),
        is_active=_flag(data, "is_active", True),
        account_id=_optional_int(data, "account_id", label),
        kind=domain.RuleKind.INCOME,
    )


def expense_rule_from_dict(data: dict[str, Any]) -> domain.RecurrenceRule:
    """Convert an expense record to a RecurrenceRule."""
    label = _label("expense", data, "name")
    return domain.RecurrenceRule(
        id=_optional_int(data, "id", label),
        description=_text(data, ("name", "description"), label),
        amount=_amount(data, "amount", label, non_negative=True),
        frequency=_choice(domain.Frequency, data, "frequency", label),
        anchor_day=_day(data, ("payment_day", "anchor_day"), label),
        specific_date=_optional_date(data, "specific_date", label),
        start_date=_required_date(data, "start_date", label),
        end_date=_optional_date(data, "end_date", label),
        is_recurring=_flag(data, "is_recurring", True),
        is_active=_flag(data, "is_active", True),
        category=data.get("category") or None,
        account_id=_optional_int(data, "account_id", label),
        kind=domain.RuleKind.EXPENSE,
    )


def account_from_dict(data: dict[str, Any]) -> domain.Account:
    """Convert an account record to an Account entity."""
    label = _label("account", data, "name")
    return domain.Account(
        id=_required_int(data, "id", label),
        name=_text(data, ("name",), label),
        type=_choice(domain.AccountType, data, "type", label),
        balance=_amount(data, "balance", label),
        credit_limit=_optional_amount(data, "credit_limit", label),
        apr=_optional_amount(data, "apr", label),
        minimum_payment=_optional_amount(data, "minimum_payment", label),
        due_day=_day(data, ("due_day",), label),
        priority=_priority(data, label),
    )


def goal_from_dict(data: dict[str, Any]) -> domain.SavingsGoal:
    """Convert a savings goal record to a SavingsGoal entity."""
    label = _label("savings goal", data, "name")
    goal_type = domain.GoalType.FLEXIBLE
    if data.get("goal_type") is not None:
        goal_type = _choice(domain.GoalType, data, "goal_type", label)
    auto_contribution = _optional_amount(data, "auto_contribution", label)
    if auto_contribution is None:
        # Older records call this monthly_contribution
        auto_contribution = _optional_amount(data, "monthly_contribution", label)
    return domain.SavingsGoal(
        id=_required_int(data, "id", label),
        name=_text(data, ("name",), label),
        target_amount=_amount(data, "target_amount", label, non_negative=True),
        current_amount=_optional_amount(data, "current_amount", label) or Decimal("0"),
        target_date=_optional_date(data, "target_date", label),
        priority=_priority(data, label),
        goal_type=goal_type,
        auto_contribution=auto_contribution or Decimal("0"),
    )


def budget_category_from_dict(data: dict[str, Any]) -> domain.BudgetCategory:
    """Convert a budget category record to a BudgetCategory entity."""
    label = _label("budget category", data, "category")
    return domain.BudgetCategory(
        category=_text(data, ("category",), label),
        budgeted_amount=_amount(data, "budgeted_amount", label),
    )


def _label(kind: str, data: dict[str, Any], name_field: str) -> str:
    name = data.get(name_field) or data.get("description")
    if name:
        return f"{kind} '{name}'"
    if data.get("id") is not None:
        return f"{kind} #{data['id']}"
    return kind


def _text(data: dict[str, Any], fields: tuple[str, ...], label: str) -> str:
    for field in fields:
        value = data.get(field)
        if value is not None and str(value).strip():
            return str(value).strip()
    raise ValidationError(missing_field(label, fields[0]))


def _amount(
    data: dict[str, Any], field: str, label: str, non_negative: bool = False
) -> Decimal:
    value = _optional_amount(data, field, label)
    if value is None:
        raise ValidationError(missing_field(label, field))
    if non_negative and value < 0:
        raise ValidationError(invalid_field(label, field, data[field], "must not be negative"))
    return value


def _optional_amount(data: dict[str, Any], field: str, label: str) -> Optional[Decimal]:
    raw = data.get(field)
    if raw is None or raw == "":
        return None
    try:
        return parse_amount(raw)
    except ValueError as e:
        raise ValidationError(invalid_field(label, field, raw, str(e)))


def _required_date(data: dict[str, Any], field: str, label: str) -> date:
    value = _optional_date(data, field, label)
    if value is None:
        raise ValidationError(missing_field(label, field))
    return value


def _optional_date(data: dict[str, Any], field: str, label: str) -> Optional[date]:
    raw = data.get(field)
    if raw is None or raw == "":
        return None
    try:
        return parse_date(raw)
    except ValueError as e:
        raise ValidationError(invalid_field(label, field, raw, str(e)))


def _required_int(data: dict[str, Any], field: str, label: str) -> int:
    value = _optional_int(data, field, label)
    if value is None:
        raise ValidationError(missing_field(label, field))
    return value


def _optional_int(data: dict[str, Any], field: str, label: str) -> Optional[int]:
    raw = data.get(field)
    if raw is None or raw == "":
        return None
    if isinstance(raw, bool):
        raise ValidationError(invalid_field(label, field, raw, "expected an integer"))
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValidationError(invalid_field(label, field, raw, "expected an integer"))


def _day(data: dict[str, Any], fields: tuple[str, ...], label: str) -> Optional[int]:
    for field in fields:
        value = _optional_int(data, field, label)
        if value is None:
            continue
        if not 1 <= value <= 31:
            raise ValidationError(invalid_field(label, field, value, "must be between 1 and 31"))
        return value
    return None


def _priority(data: dict[str, Any], label: str) -> int:
    value = _optional_int(data, "priority", label)
    if value is None:
        return 5
    if not 1 <= value <= 10:
        raise ValidationError(invalid_field(label, "priority", value, "must be between 1 and 10"))
    return value


def _choice(enum_cls: type[E], data: dict[str, Any], field: str, label: str) -> E:
    raw = data.get(field)
    if raw is None:
        raise ValidationError(missing_field(label, field))
    try:
        return enum_cls(str(raw).strip().lower())
    except ValueError:
        raise ValidationError(
            unknown_choice(label, field, raw, [member.value for member in enum_cls])
        )


def _flag(data: dict[str, Any], field: str, default: bool) -> bool:
    raw = data.get(field)
    if raw is None:
        return default
    if isinstance(raw, str):
        return raw.strip().lower() not in ("0", "false", "no", "")
    return bool(raw)
