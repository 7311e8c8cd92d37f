"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested record does not exist."""


class MalformedDateError(ValidationError):
    """A record date does not match the ``YYYY-MM-DD`` format."""

    def __init__(self, value: object, record_id: str | None = None):
        self.value = value
        self.record_id = record_id
        if record_id is None:
            message = f"Malformed date '{value}': expected YYYY-MM-DD"
        else:
            message = f"Record {record_id} has malformed date '{value}': expected YYYY-MM-DD"
        super().__init__(message)


def earning_not_found(earning_id: str) -> str:
    """Return message for missing earning."""
    return f"Earning {earning_id} not found"


def expense_not_found(expense_id: str) -> str:
    """Return message for missing expense."""
    return f"Expense {expense_id} not found"


def negative_amount(amount: object) -> str:
    """Return message for an amount below zero."""
    return f"Amount must not be negative (got {amount})"


def unknown_choice(kind: str, value: str, choices: list[str]) -> str:
    """Return message for a value outside an enumeration."""
    return f"Unknown {kind} '{value}'. Choose one of: {', '.join(choices)}"


def too_precise_amount(amount: object) -> str:
    """Return message for an amount with fractions of a cent."""
    return f"Amount must have at most two decimal places (got {amount})"
