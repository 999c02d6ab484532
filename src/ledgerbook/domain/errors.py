"""Shared domain error messages and error types."""

from ledgerbook.domain.entities import TransactionCategory


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class CorruptDataError(DomainError):
    """Stored data could not be decoded.

    Recoverable: readers treat it the same as an empty store.
    """


def transaction_not_found(transaction_id: str) -> str:
    """Return message for missing transaction."""
    return f"Transaction '{transaction_id}' not found"


def negative_amount(amount) -> str:
    """Return message for a negative transaction amount."""
    return f"Amount must not be negative, got {amount}"


def blank_account_name(side: str) -> str:
    """Return message for an empty debit or credit account name."""
    return f"{side.capitalize()} account name must not be empty"


def unknown_transaction_category(value: str) -> str:
    """Return message for an unrecognized transaction category."""
    choices = ", ".join(c.value for c in TransactionCategory)
    return f"Unknown category '{value}'. Expected one of: {choices}"
