"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from tallybook.domain.entities import (
    Budget,
    CustomAccount,
    SavingsGoal,
    SavingsTransaction,
    Transaction,
)


class Database(ABC):
    """Abstract database interface for tallybook."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        date: date,
        type: str,
        amount: Decimal,
        description: str,
        account: str,
        category: str,
        transaction_id: Optional[str] = None,
    ) -> str:
        """Create a transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[Transaction]:
        """List transactions in a date range, newest first."""
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a transaction."""
        pass

    @abstractmethod
    def delete_all_transactions(self) -> int:
        """Delete every transaction. Returns the number removed."""
        pass

    @abstractmethod
    def replace_transactions(self, transactions: list[Transaction]) -> list[str]:
        """Atomically replace every transaction with the given ones.

        Transactions with an id keep it. Either the whole set is swapped in
        or the stored transactions are left as they were.

        Returns:
            IDs of the stored transactions, in input order
        """
        pass

    # Custom account operations
    @abstractmethod
    def create_custom_account(self, name: str, category: str) -> int:
        """Create a custom account. Returns account ID."""
        pass

    @abstractmethod
    def get_custom_account(self, account_id: int) -> Optional[CustomAccount]:
        """Get custom account by ID."""
        pass

    @abstractmethod
    def get_custom_account_by_name(self, name: str) -> Optional[CustomAccount]:
        """Get custom account by name."""
        pass

    @abstractmethod
    def list_custom_accounts(self) -> list[CustomAccount]:
        """List custom accounts ordered by name."""
        pass

    @abstractmethod
    def delete_custom_account(self, account_id: int) -> None:
        """Delete a custom account."""
        pass

    # Budget operations
    @abstractmethod
    def create_budget(self, account: str, amount: Decimal, month: str) -> int:
        """Create a budget. Returns budget ID."""
        pass

    @abstractmethod
    def update_budget_amount(self, budget_id: int, amount: Decimal) -> None:
        """Change the amount of an existing budget."""
        pass

    @abstractmethod
    def get_budget(self, budget_id: int) -> Optional[Budget]:
        """Get budget by ID."""
        pass

    @abstractmethod
    def get_budget_for(self, account: str, month: str) -> Optional[Budget]:
        """Get the budget for an account in a month."""
        pass

    @abstractmethod
    def list_budgets(self, month: Optional[str] = None) -> list[Budget]:
        """List budgets ordered by month then account."""
        pass

    @abstractmethod
    def delete_budget(self, budget_id: int) -> None:
        """Delete a budget."""
        pass

    # Savings operations
    @abstractmethod
    def create_savings_goal(
        self,
        name: str,
        target_amount: Decimal,
        target_date: date,
        description: Optional[str] = None,
    ) -> int:
        """Create a savings goal with nothing saved yet. Returns goal ID."""
        pass

    @abstractmethod
    def get_savings_goal(self, goal_id: int) -> Optional[SavingsGoal]:
        """Get savings goal by ID."""
        pass

    @abstractmethod
    def list_savings_goals(self, active_only: bool = False) -> list[SavingsGoal]:
        """List savings goals ordered by target date."""
        pass

    @abstractmethod
    def set_savings_goal_active(self, goal_id: int, is_active: bool) -> None:
        """Open or close a savings goal."""
        pass

    @abstractmethod
    def delete_savings_goal(self, goal_id: int) -> None:
        """Delete a savings goal and its transactions."""
        pass

    @abstractmethod
    def record_savings_transaction(
        self,
        goal_id: int,
        date: date,
        type: str,
        amount: Decimal,
        description: str,
        current_amount: Decimal,
    ) -> int:
        """Store a savings transaction and the goal's new current amount together.

        Returns:
            Savings transaction ID
        """
        pass

    @abstractmethod
    def list_savings_transactions(
        self, goal_id: Optional[int] = None
    ) -> list[SavingsTransaction]:
        """List savings transactions, newest first."""
        pass
