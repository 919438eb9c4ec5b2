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


def transaction_not_found(transaction_id: str) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def account_not_found(account_id: int) -> str:
    """Return message for missing custom account."""
    return f"Account {account_id} not found"


def duplicate_account_name(name: str) -> str:
    """Return message for duplicate custom account name."""
    return f"Account with name '{name}' already exists"


def invalid_choice(field: str, value: object, choices: list[str]) -> str:
    """Return message for a value outside an enumerated set."""
    return f"Invalid {field} '{value}'. Expected one of: {', '.join(choices)}"


def negative_amount(amount: object) -> str:
    """Return message for an amount below zero."""
    return f"Amount must not be negative (got {amount})"


def blank_field(field: str) -> str:
    """Return message for a required text field left empty."""
    return f"{field.capitalize()} must not be empty"


def amount_too_precise(amount: object) -> str:
    """Return message for an amount with fractions of a cent."""
    return f"Amount must have at most 2 decimal places (got {amount})"


def amount_too_large(amount: object, maximum: object) -> str:
    """Return message for an amount above what storage can hold."""
    return f"Amount must not exceed {maximum} (got {amount})"


def duplicate_transaction_id(transaction_id: str) -> str:
    """Return message for a transaction ID given more than once."""
    return f"Duplicate transaction id '{transaction_id}'"


def budget_not_found(budget_id: int) -> str:
    """Return message for missing budget."""
    return f"Budget {budget_id} not found"


def savings_goal_not_found(goal_id: int) -> str:
    """Return message for missing savings goal."""
    return f"Savings goal {goal_id} not found"


def inactive_savings_goal(goal_id: int) -> str:
    """Return message for a deposit or withdrawal on a closed goal."""
    return f"Savings goal {goal_id} is closed"
