"""Custom account domain service."""

from typing import Optional

from tallybook.database.base import Database
from tallybook.domain.accounting import account_suggestions
from tallybook.domain.entities import AccountCategory, CustomAccount as AccountEntity
from tallybook.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    account_not_found,
    blank_field,
    duplicate_account_name,
)
from tallybook.domain.transaction import parse_account_category


class AccountService:
    """Service for managing user-defined account names."""

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_account(self, name: str, category: str | AccountCategory) -> int:
        """Create a new custom account.

        Args:
            name: Account name
            category: Accounting category

        Returns:
            Account ID

        Raises:
            ValidationError: If name is blank or category unknown
            ConflictError: If account name already exists
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError(blank_field("name"))
        account_category = parse_account_category(category)

        if self.db.get_custom_account_by_name(name) is not None:
            raise ConflictError(duplicate_account_name(name))

        return self.db.create_custom_account(name=name, category=account_category.value)

    def get_account(self, account_id: int) -> Optional[AccountEntity]:
        """Get custom account by ID."""
        return self.db.get_custom_account(account_id)

    def list_accounts(self) -> list[AccountEntity]:
        """List custom accounts ordered by name."""
        return self.db.list_custom_accounts()

    def delete_account(self, account_id: int) -> None:
        """Delete a custom account.

        Transactions already posted to the name are left untouched.

        Raises:
            NotFoundError: If account not found
        """
        if self.db.get_custom_account(account_id) is None:
            raise NotFoundError(account_not_found(account_id))
        self.db.delete_custom_account(account_id)

    def get_suggestions(self) -> dict[AccountCategory, list[str]]:
        """Account names to offer per category, built-in names first."""
        return account_suggestions(self.list_accounts())
