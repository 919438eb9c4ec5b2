"""Accounting report domain service."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from tallybook.database.base import Database
from tallybook.domain import accounting
from tallybook.domain.entities import (
    CategoryValue,
    JournalEntry,
    LedgerAccount,
    ProfitLossStatement,
    Transaction,
    TrialBalanceItem,
    TrialBalanceTotals,
)
from tallybook.logger import get_logger

logger = get_logger()


@dataclass(frozen=True)
class TrialBalanceReport:
    """Trial balance rows with their column totals."""

    items: tuple[TrialBalanceItem, ...]
    totals: TrialBalanceTotals


class ReportService:
    """Service for deriving accounting reports from stored transactions.

    Every call loads a fresh snapshot and re-derives the report in full.
    """

    def __init__(self, db: Database):
        """Initialize report service.

        Args:
            db: Database instance
        """
        self.db = db

    def load_snapshot(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[Transaction]:
        """Load the transactions a report is derived from."""
        transactions = self.db.list_transactions(start_date=start_date, end_date=end_date)
        logger.debug(
            "Loaded %d transaction(s) for %s..%s",
            len(transactions),
            start_date or "beginning",
            end_date or "end",
        )
        return transactions

    def journal(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[JournalEntry]:
        """Journal entries, newest first."""
        return accounting.generate_journal(self.load_snapshot(start_date, end_date))

    def ledger(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> dict[str, LedgerAccount]:
        """Ledger accounts keyed by account name."""
        return accounting.generate_ledger_accounts(self.load_snapshot(start_date, end_date))

    def trial_balance(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> TrialBalanceReport:
        """Trial balance rows and totals."""
        items = accounting.generate_trial_balance(self.ledger(start_date, end_date))
        totals = accounting.trial_balance_totals(items)
        if not totals.is_balanced:
            logger.info(
                "Trial balance is off by %s (debits %s, credits %s)",
                totals.difference,
                totals.total_debits,
                totals.total_credits,
            )
        return TrialBalanceReport(items=tuple(items), totals=totals)

    def profit_loss(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> ProfitLossStatement:
        """Profit & loss statement with net income."""
        return accounting.generate_profit_loss(self.ledger(start_date, end_date))

    def category_conflicts(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> dict[str, set[CategoryValue]]:
        """Account names recorded under more than one category."""
        return accounting.find_category_conflicts(self.load_snapshot(start_date, end_date))
