"""Shared pytest fixtures for tallybook tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from tallybook.database.factories import create_sqlite_database
from tallybook.domain.account import AccountService
from tallybook.domain.budget import BudgetService
from tallybook.domain.data_transfer import DataTransferService
from tallybook.domain.entities import AccountCategory, Transaction, TransactionType
from tallybook.domain.reports import ReportService
from tallybook.domain.savings import SavingsService
from tallybook.domain.transaction import TransactionService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def account_service(temp_db):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db)


@pytest.fixture
def report_service(temp_db):
    """Create a ReportService with a temporary database."""
    return ReportService(temp_db)


@pytest.fixture
def data_transfer_service(temp_db):
    """Create a DataTransferService with a temporary database."""
    return DataTransferService(temp_db)


@pytest.fixture
def budget_service(temp_db):
    """Create a BudgetService with a temporary database."""
    return BudgetService(temp_db)


@pytest.fixture
def savings_service(temp_db):
    """Create a SavingsService with a temporary database."""
    return SavingsService(temp_db)


@pytest.fixture
def make_transaction():
    """Build in-memory Transaction entities with sensible defaults."""
    counter = {"n": 0}

    def _make(
        type=TransactionType.DEBIT,
        amount="0",
        account="Cash",
        category=AccountCategory.ASSET,
        description="",
        txn_date=date(2024, 3, 1),
        id=None,
    ):
        counter["n"] += 1
        return Transaction(
            id=id or f"t{counter['n']}",
            date=txn_date,
            type=type,
            amount=Decimal(amount),
            description=description or f"Transaction {counter['n']}",
            account=account,
            category=category,
        )

    return _make


@pytest.fixture
def sample_transactions(transaction_service):
    """Store paired debit and credit transactions for March 2024.

    Owner invests 5000 cash, pays 1500 rent, earns 2000 sales and buys 45
    of supplies on the credit card.
    """
    rows = [
        (date(2024, 3, 1), "debit", "5000.00", "Owner contribution", "Cash", "asset"),
        (date(2024, 3, 1), "credit", "5000.00", "Owner contribution", "Owner's Equity", "equity"),
        (date(2024, 3, 5), "debit", "1500.00", "March rent", "Rent Expense", "expense"),
        (date(2024, 3, 5), "credit", "1500.00", "March rent", "Cash", "asset"),
        (date(2024, 3, 10), "debit", "2000.00", "Invoice 17", "Cash", "asset"),
        (date(2024, 3, 10), "credit", "2000.00", "Invoice 17", "Sales Revenue", "revenue"),
        (date(2024, 3, 12), "debit", "45.00", "Paper", "Office Supplies", "expense"),
        (date(2024, 3, 12), "credit", "45.00", "Paper", "Credit Card", "liability"),
    ]
    ids = []
    for txn_date, txn_type, amount, description, account, category in rows:
        ids.append(
            transaction_service.create_transaction(
                date=txn_date,
                type=txn_type,
                amount=Decimal(amount),
                description=description,
                account=account,
                category=category,
            )
        )
    return ids


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
