"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity or path does not exist."""


def invalid_field(record: str, field: str, value: object, reason: str) -> str:
    """Return message for a record field that failed validation."""
    return f"{record}: invalid {field} {value!r} ({reason})"


def missing_field(record: str, field: str) -> str:
    """Return message for a required record field that is absent."""
    return f"{record}: missing required field '{field}'"


def unknown_choice(record: str, field: str, value: object, choices) -> str:
    """Return message for a value outside a closed set of choices."""
    allowed = ", ".join(choices)
    return f"{record}: unknown {field} {value!r} (expected one of: {allowed})"


def snapshot_not_found(path: str) -> str:
    """Return message for a missing snapshot file."""
    return f"Snapshot file not found: {path}"
