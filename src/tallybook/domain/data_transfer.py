"""JSON export and import of transactions."""

import json
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Any, Optional

from tallybook.database.base import Database
from tallybook.domain.entities import Transaction
from tallybook.domain.errors import ValidationError
from tallybook.domain.transaction import TransactionService
from tallybook.logger import get_logger
from tallybook.utils.date_parser import parse_iso_date

logger = get_logger()

EXPORT_FIELDS = ("id", "date", "type", "amount", "description", "account", "category")


def transaction_to_record(txn: Transaction) -> dict[str, str]:
    """Convert a transaction into a JSON-serializable record.

    Amounts are written as strings to keep their exact decimal value.
    """
    return {
        "id": txn.id,
        "date": txn.date.isoformat(),
        "type": getattr(txn.type, "value", txn.type),
        "amount": str(txn.amount),
        "description": txn.description,
        "account": txn.account,
        "category": getattr(txn.category, "value", txn.category),
    }


def record_to_transaction(record: Any, index: int) -> Transaction:
    """Convert an exported record back into a transaction.

    Args:
        record: Decoded JSON object
        index: Position in the file, used in error messages

    Raises:
        ValidationError: If the record is malformed
    """
    if not isinstance(record, dict):
        raise ValidationError(f"Record {index}: expected an object")

    missing = [field for field in EXPORT_FIELDS if field != "id" and field not in record]
    if missing:
        raise ValidationError(f"Record {index}: missing {', '.join(missing)}")

    try:
        txn_date = parse_iso_date(str(record["date"]))
    except ValueError as e:
        raise ValidationError(f"Record {index}: {e}")

    try:
        amount = Decimal(str(record["amount"]))
    except ArithmeticError:
        raise ValidationError(f"Record {index}: invalid amount '{record['amount']}'")

    return Transaction(
        id=str(record.get("id") or ""),
        date=txn_date,
        type=str(record["type"]),
        amount=amount,
        description=str(record["description"]),
        account=str(record["account"]),
        category=str(record["category"]),
    )


class DataTransferService:
    """Service for backing up and restoring transactions as JSON."""

    def __init__(self, db: Database):
        """Initialize data transfer service.

        Args:
            db: Database instance
        """
        self.db = db
        self.transaction_service = TransactionService(db)

    def export_transactions(
        self,
        file_path: str | Path,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> int:
        """Write transactions to a JSON file.

        Returns:
            Number of transactions written
        """
        transactions = self.transaction_service.list_transactions(
            start_date=start_date, end_date=end_date
        )
        records = [transaction_to_record(txn) for txn in transactions]
        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(records, f, indent=2)
        logger.debug("Exported %d transaction(s) to %s", len(records), file_path)
        return len(records)

    def load_transactions(self, file_path: str | Path) -> list[Transaction]:
        """Read transactions from an exported JSON file without storing them.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValidationError: If the file is not a valid export
        """
        with open(file_path, encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValidationError(f"Invalid JSON in {file_path}: {e}")

        if not isinstance(data, list):
            raise ValidationError("Expected a JSON array of transactions")

        transactions = [record_to_transaction(record, i) for i, record in enumerate(data)]

        seen_ids: set[str] = set()
        for i, txn in enumerate(transactions):
            if not txn.id:
                continue
            if txn.id in seen_ids:
                raise ValidationError(f"Record {i}: duplicate id '{txn.id}'")
            seen_ids.add(txn.id)

        return transactions

    def import_transactions(self, file_path: str | Path) -> list[Transaction]:
        """Replace all stored transactions with those in an exported file.

        Returns:
            The saved transactions
        """
        transactions = self.load_transactions(file_path)
        saved = self.transaction_service.replace_transactions(transactions)
        logger.debug("Imported %d transaction(s) from %s", len(saved), file_path)
        return saved
