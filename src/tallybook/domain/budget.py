"""Monthly budget domain service."""

from decimal import Decimal
from typing import Optional

from tallybook.database.base import Database
from tallybook.domain.entities import Budget as BudgetEntity, BudgetAnalysis
from tallybook.domain.errors import (
    NotFoundError,
    ValidationError,
    blank_field,
    budget_not_found,
)
from tallybook.domain.planning import analyze_budgets
from tallybook.domain.transaction import parse_money
from tallybook.logger import get_logger
from tallybook.utils.date_parser import month_range, parse_month

logger = get_logger()


def normalize_month(month: str) -> str:
    """Return a month as YYYY-MM, raising ValidationError if malformed."""
    try:
        year, month_number = parse_month(month)
    except ValueError as e:
        raise ValidationError(str(e))
    return f"{year:04d}-{month_number:02d}"


class BudgetService:
    """Service for monthly spending limits per account."""

    def __init__(self, db: Database):
        """Initialize budget service.

        Args:
            db: Database instance
        """
        self.db = db

    def set_budget(self, account: str, amount: Decimal | str, month: str) -> int:
        """Create the budget for an account and month, or change its amount.

        Args:
            account: Account name the budget applies to
            amount: Budgeted amount
            month: Month as YYYY-MM

        Returns:
            Budget ID

        Raises:
            ValidationError: If any field is invalid
        """
        account = (account or "").strip()
        if not account:
            raise ValidationError(blank_field("account"))
        budget_amount = parse_money(amount)
        month = normalize_month(month)

        existing = self.db.get_budget_for(account, month)
        if existing is not None:
            self.db.update_budget_amount(existing.id, budget_amount)
            logger.debug("Updated budget %s for %s in %s", existing.id, account, month)
            return existing.id

        budget_id = self.db.create_budget(account=account, amount=budget_amount, month=month)
        logger.debug("Created budget %s for %s in %s", budget_id, account, month)
        return budget_id

    def get_budget(self, budget_id: int) -> Optional[BudgetEntity]:
        """Get budget by ID."""
        return self.db.get_budget(budget_id)

    def list_budgets(self, month: Optional[str] = None) -> list[BudgetEntity]:
        """List budgets, optionally for a single month."""
        if month is not None:
            month = normalize_month(month)
        return self.db.list_budgets(month=month)

    def delete_budget(self, budget_id: int) -> None:
        """Delete a budget.

        Raises:
            NotFoundError: If budget not found
        """
        if self.db.get_budget(budget_id) is None:
            raise NotFoundError(budget_not_found(budget_id))
        self.db.delete_budget(budget_id)

    def analyze(self, month: str) -> list[BudgetAnalysis]:
        """Budget versus actual for every budget set in a month."""
        month = normalize_month(month)
        budgets = self.db.list_budgets(month=month)
        if not budgets:
            return []
        start_date, end_date = month_range(month)
        transactions = self.db.list_transactions(start_date=start_date, end_date=end_date)
        return analyze_budgets(budgets, transactions)
