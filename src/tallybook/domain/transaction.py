"""Transaction domain service.

Validation of transactions happens here, before they are stored. The
accounting engine trusts whatever it is given.
"""

from typing import Iterable, Optional
from datetime import date
from decimal import Decimal, InvalidOperation

from tallybook.database.base import Database
from tallybook.domain.entities import (
    AccountCategory,
    Transaction as TransactionEntity,
    TransactionType,
)
from tallybook.domain.errors import (
    NotFoundError,
    ValidationError,
    amount_too_large,
    amount_too_precise,
    blank_field,
    duplicate_transaction_id,
    invalid_choice,
    negative_amount,
    transaction_not_found,
)
from tallybook.logger import get_logger

logger = get_logger()

# Amounts are stored as NUMERIC(12, 2).
CENT = Decimal("0.01")
MAX_AMOUNT = Decimal("9999999999.99")


def parse_money(amount: Decimal | str) -> Decimal:
    """Parse a non-negative amount that storage can hold without rounding.

    Raises:
        ValidationError: If the amount is not a finite number, is negative,
            has fractions of a cent or exceeds MAX_AMOUNT
    """
    try:
        value = Decimal(str(amount))
    except InvalidOperation:
        raise ValidationError(f"Invalid amount '{amount}'")
    if not value.is_finite():
        raise ValidationError(f"Invalid amount '{amount}'")
    if value < 0:
        raise ValidationError(negative_amount(value))
    if value > MAX_AMOUNT:
        raise ValidationError(amount_too_large(value, MAX_AMOUNT))
    if value != value.quantize(CENT):
        raise ValidationError(amount_too_precise(value))
    return value


def parse_transaction_type(value: str | TransactionType) -> TransactionType:
    """Parse a transaction type, raising ValidationError if unknown."""
    if isinstance(value, TransactionType):
        return value
    try:
        return TransactionType(str(value).strip().lower())
    except ValueError:
        raise ValidationError(
            invalid_choice("type", value, [t.value for t in TransactionType])
        )


def parse_account_category(value: str | AccountCategory) -> AccountCategory:
    """Parse an account category, raising ValidationError if unknown."""
    if isinstance(value, AccountCategory):
        return value
    try:
        return AccountCategory(str(value).strip().lower())
    except ValueError:
        raise ValidationError(
            invalid_choice("category", value, [c.value for c in AccountCategory])
        )


class TransactionService:
    """Service for managing transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def validate_fields(
        self,
        type: str | TransactionType,
        amount: Decimal | str,
        description: str,
        account: str,
        category: str | AccountCategory,
    ) -> tuple[TransactionType, AccountCategory, Decimal, str, str]:
        """Validate and normalize transaction fields.

        Returns:
            Tuple of (type, category, amount, account, description) with
            enums parsed, amount as Decimal and text fields trimmed

        Raises:
            ValidationError: If any field is invalid
        """
        txn_type = parse_transaction_type(type)
        txn_category = parse_account_category(category)

        txn_amount = parse_money(amount)

        account = (account or "").strip()
        if not account:
            raise ValidationError(blank_field("account"))

        description = (description or "").strip()
        if not description:
            raise ValidationError(blank_field("description"))

        return txn_type, txn_category, txn_amount, account, description

    def create_transaction(
        self,
        date: date,
        type: str | TransactionType,
        amount: Decimal,
        description: str,
        account: str,
        category: str | AccountCategory,
        transaction_id: Optional[str] = None,
    ) -> str:
        """Create a transaction.

        Args:
            date: Transaction date
            type: "debit" or "credit"
            amount: Non-negative amount
            description: Free-text description
            account: Account name the transaction posts to
            category: Accounting category of the account
            transaction_id: Optional ID to keep (used when restoring exports)

        Returns:
            Transaction ID

        Raises:
            ValidationError: If any field is invalid
        """
        txn_type, txn_category, amount, account, description = self.validate_fields(
            type=type,
            amount=amount,
            description=description,
            account=account,
            category=category,
        )

        transaction_id = self.db.create_transaction(
            date=date,
            type=txn_type.value,
            amount=amount,
            description=description,
            account=account,
            category=txn_category.value,
            transaction_id=transaction_id,
        )
        logger.debug(
            "Created %s transaction %s for %s (%s)",
            txn_type.value,
            transaction_id,
            account,
            amount,
        )
        return transaction_id

    def get_transaction(self, transaction_id: str) -> Optional[TransactionEntity]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.db.get_transaction(transaction_id)

    def require_transaction(self, transaction_id: str) -> TransactionEntity:
        """Get transaction by ID or raise NotFoundError."""
        txn = self.db.get_transaction(transaction_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        return txn

    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[TransactionEntity]:
        """List transactions, newest first.

        Args:
            start_date: Optional inclusive start date
            end_date: Optional inclusive end date

        Returns:
            List of transaction entities
        """
        return self.db.list_transactions(start_date=start_date, end_date=end_date)

    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a transaction.

        Raises:
            NotFoundError: If transaction doesn't exist
        """
        self.require_transaction(transaction_id)
        self.db.delete_transaction(transaction_id)
        logger.debug("Deleted transaction %s", transaction_id)

    def clear_transactions(self) -> int:
        """Delete all transactions. Returns the number removed."""
        count = self.db.delete_all_transactions()
        logger.debug("Cleared %d transaction(s)", count)
        return count

    def replace_transactions(
        self, transactions: Iterable[TransactionEntity]
    ) -> list[TransactionEntity]:
        """Replace every stored transaction with the given ones.

        Every transaction is validated as if entered by hand before anything
        is removed. The swap itself runs in a single database transaction,
        so any failure leaves the previous set in place.

        Returns:
            The saved transactions

        Raises:
            ValidationError: If any transaction is invalid or two share an ID
        """
        rows = []
        seen_ids = set()
        for txn in transactions:
            txn_type, txn_category, amount, account, description = self.validate_fields(
                type=txn.type,
                amount=txn.amount,
                description=txn.description,
                account=txn.account,
                category=txn.category,
            )
            if txn.id:
                if txn.id in seen_ids:
                    raise ValidationError(duplicate_transaction_id(txn.id))
                seen_ids.add(txn.id)
            rows.append(
                TransactionEntity(
                    id=txn.id or None,
                    date=txn.date,
                    type=txn_type.value,
                    amount=amount,
                    description=description,
                    account=account,
                    category=txn_category.value,
                )
            )

        transaction_ids = self.db.replace_transactions(rows)
        logger.debug("Replaced stored transactions with %d row(s)", len(rows))
        return [self.require_transaction(txn_id) for txn_id in transaction_ids]
