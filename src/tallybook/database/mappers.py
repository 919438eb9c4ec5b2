"""Mapper functions to convert SQLAlchemy models into domain entities.

Stored type and category strings are converted to their enums when they
match a known value and passed through unchanged otherwise, so rows written
outside the service layer still reach the accounting engine.
"""

from enum import Enum
from typing import TypeVar

from tallybook.domain import entities as domain
from tallybook.database.models import (
    Budget as ORMBudget,
    CustomAccount as ORMCustomAccount,
    SavingsGoal as ORMSavingsGoal,
    SavingsTransaction as ORMSavingsTransaction,
    Transaction as ORMTransaction,
)

E = TypeVar("E", bound=Enum)


def _to_enum(enum_cls: type[E], value: str) -> E | str:
    try:
        return enum_cls(value)
    except ValueError:
        return value


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        date=orm_transaction.date,
        type=_to_enum(domain.TransactionType, orm_transaction.type),
        amount=orm_transaction.amount,
        description=orm_transaction.description or "",
        account=orm_transaction.account,
        category=_to_enum(domain.AccountCategory, orm_transaction.category),
    )


def custom_account_to_domain(orm_account: ORMCustomAccount) -> domain.CustomAccount:
    """Convert SQLAlchemy CustomAccount model to domain CustomAccount entity."""
    return domain.CustomAccount(
        id=orm_account.id,
        name=orm_account.name,
        category=_to_enum(domain.AccountCategory, orm_account.category),
        created_at=orm_account.created_at,
    )


def budget_to_domain(orm_budget: ORMBudget) -> domain.Budget:
    """Convert SQLAlchemy Budget model to domain Budget entity."""
    return domain.Budget(
        id=orm_budget.id,
        account=orm_budget.account,
        amount=orm_budget.amount,
        month=orm_budget.month,
        created_at=orm_budget.created_at,
    )


def savings_goal_to_domain(orm_goal: ORMSavingsGoal) -> domain.SavingsGoal:
    """Convert SQLAlchemy SavingsGoal model to domain SavingsGoal entity."""
    return domain.SavingsGoal(
        id=orm_goal.id,
        name=orm_goal.name,
        target_amount=orm_goal.target_amount,
        current_amount=orm_goal.current_amount,
        target_date=orm_goal.target_date,
        description=orm_goal.description,
        is_active=orm_goal.is_active,
        created_at=orm_goal.created_at,
    )


def savings_transaction_to_domain(
    orm_transaction: ORMSavingsTransaction,
) -> domain.SavingsTransaction:
    """Convert SQLAlchemy SavingsTransaction model to domain entity."""
    return domain.SavingsTransaction(
        id=orm_transaction.id,
        goal_id=orm_transaction.goal_id,
        date=orm_transaction.date,
        type=_to_enum(domain.SavingsTransactionType, orm_transaction.type),
        amount=orm_transaction.amount,
        description=orm_transaction.description or "",
    )
