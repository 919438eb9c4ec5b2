"""Savings goal domain service."""

from datetime import date
from decimal import Decimal
from typing import Optional

from tallybook.database.base import Database
from tallybook.domain.accounting import ZERO
from tallybook.domain.entities import (
    SavingsGoal as SavingsGoalEntity,
    SavingsSummary,
    SavingsTransaction as SavingsTransactionEntity,
    SavingsTransactionType,
)
from tallybook.domain.errors import (
    NotFoundError,
    ValidationError,
    blank_field,
    inactive_savings_goal,
    invalid_choice,
    savings_goal_not_found,
)
from tallybook.domain.planning import summarize_savings
from tallybook.domain.transaction import parse_money
from tallybook.logger import get_logger

logger = get_logger()


def parse_savings_type(value: str | SavingsTransactionType) -> SavingsTransactionType:
    """Parse a savings transaction type, raising ValidationError if unknown."""
    if isinstance(value, SavingsTransactionType):
        return value
    try:
        return SavingsTransactionType(str(value).strip().lower())
    except ValueError:
        raise ValidationError(
            invalid_choice("type", value, [t.value for t in SavingsTransactionType])
        )


class SavingsService:
    """Service for savings goals and the deposits and withdrawals against them."""

    def __init__(self, db: Database):
        """Initialize savings service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_goal(
        self,
        name: str,
        target_amount: Decimal | str,
        target_date: date,
        description: Optional[str] = None,
    ) -> int:
        """Create a savings goal.

        Raises:
            ValidationError: If name is blank or target amount is invalid
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError(blank_field("name"))
        target = parse_money(target_amount)
        description = (description or "").strip() or None

        goal_id = self.db.create_savings_goal(
            name=name,
            target_amount=target,
            target_date=target_date,
            description=description,
        )
        logger.debug("Created savings goal %s (%s)", goal_id, name)
        return goal_id

    def get_goal(self, goal_id: int) -> Optional[SavingsGoalEntity]:
        """Get savings goal by ID."""
        return self.db.get_savings_goal(goal_id)

    def require_goal(self, goal_id: int) -> SavingsGoalEntity:
        """Get savings goal by ID or raise NotFoundError."""
        goal = self.db.get_savings_goal(goal_id)
        if goal is None:
            raise NotFoundError(savings_goal_not_found(goal_id))
        return goal

    def list_goals(self, active_only: bool = False) -> list[SavingsGoalEntity]:
        """List savings goals ordered by target date."""
        return self.db.list_savings_goals(active_only=active_only)

    def close_goal(self, goal_id: int) -> None:
        """Mark a goal inactive. Its history is kept."""
        self.require_goal(goal_id)
        self.db.set_savings_goal_active(goal_id, False)

    def reopen_goal(self, goal_id: int) -> None:
        """Mark a closed goal active again."""
        self.require_goal(goal_id)
        self.db.set_savings_goal_active(goal_id, True)

    def delete_goal(self, goal_id: int) -> None:
        """Delete a goal together with its deposits and withdrawals.

        Raises:
            NotFoundError: If goal not found
        """
        self.require_goal(goal_id)
        self.db.delete_savings_goal(goal_id)

    def add_transaction(
        self,
        goal_id: int,
        type: str | SavingsTransactionType,
        amount: Decimal | str,
        transaction_date: date,
        description: str,
    ) -> int:
        """Record a deposit or withdrawal and update the goal's balance.

        A withdrawal larger than the balance empties the goal rather than
        taking it below zero.

        Returns:
            Savings transaction ID

        Raises:
            NotFoundError: If goal not found
            ValidationError: If the goal is closed or any field is invalid
        """
        goal = self.require_goal(goal_id)
        if not goal.is_active:
            raise ValidationError(inactive_savings_goal(goal_id))
        txn_type = parse_savings_type(type)
        txn_amount = parse_money(amount)
        description = (description or "").strip()
        if not description:
            raise ValidationError(blank_field("description"))

        if txn_type == SavingsTransactionType.DEPOSIT:
            current = goal.current_amount + txn_amount
        else:
            current = max(ZERO, goal.current_amount - txn_amount)

        transaction_id = self.db.record_savings_transaction(
            goal_id=goal_id,
            date=transaction_date,
            type=txn_type.value,
            amount=txn_amount,
            description=description,
            current_amount=current,
        )
        logger.debug(
            "Recorded %s of %s on savings goal %s", txn_type.value, txn_amount, goal_id
        )
        return transaction_id

    def deposit(
        self, goal_id: int, amount: Decimal | str, transaction_date: date, description: str
    ) -> int:
        """Record a deposit into a goal."""
        return self.add_transaction(
            goal_id, SavingsTransactionType.DEPOSIT, amount, transaction_date, description
        )

    def withdraw(
        self, goal_id: int, amount: Decimal | str, transaction_date: date, description: str
    ) -> int:
        """Record a withdrawal from a goal."""
        return self.add_transaction(
            goal_id, SavingsTransactionType.WITHDRAWAL, amount, transaction_date, description
        )

    def list_transactions(
        self, goal_id: Optional[int] = None
    ) -> list[SavingsTransactionEntity]:
        """List deposits and withdrawals, newest first."""
        if goal_id is not None:
            self.require_goal(goal_id)
        return self.db.list_savings_transactions(goal_id=goal_id)

    def summary(self, today: Optional[date] = None) -> SavingsSummary:
        """Total saved, monthly average and progress of each active goal."""
        return summarize_savings(
            self.db.list_savings_goals(),
            self.db.list_savings_transactions(),
            today or date.today(),
        )
