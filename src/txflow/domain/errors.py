"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class ConfigurationError(ValidationError):
    """Engine limits or policies are invalid."""


class MalformedDateError(ValidationError):
    """A date string could not be parsed into a calendar day."""


def transaction_not_found(transaction_id: str) -> str:
    """Return message for missing transaction."""
    return f"Transaction '{transaction_id}' not found"


def duplicate_transaction_id(transaction_id: str) -> str:
    """Return message for duplicate transaction ID."""
    return f"Transaction with id '{transaction_id}' already exists"


def non_positive_amount(transaction_id: str, amount) -> str:
    """Return message for a transaction whose amount is not positive."""
    return f"Transaction '{transaction_id}' has non-positive amount {amount}"


def non_positive_limit(name: str, value) -> str:
    """Return message for a limit that must be a positive integer."""
    return f"{name} must be a positive integer, got {value!r}"


def account_not_found(account: str) -> str:
    """Return message for missing account."""
    return f"Account '{account}' not found"
