"""Domain model entities for tallybook.

These are pure data classes representing bookkeeping concepts, independent of
database schema. Derived entities (journal entries, ledger accounts, trial
balance rows, profit & loss items) are never persisted; they are recomputed
from the current list of transactions on every report.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional, Union


class TransactionType(str, Enum):
    """Accounting direction of a transaction against its named account."""

    DEBIT = "debit"
    CREDIT = "credit"


class AccountCategory(str, Enum):
    """Accounting classification of an account."""

    ASSET = "asset"
    LIABILITY = "liability"
    EQUITY = "equity"
    REVENUE = "revenue"
    EXPENSE = "expense"


class NormalBalance(str, Enum):
    """Side on which an account category increases."""

    DEBIT = "debit"
    CREDIT = "credit"


# Stored rows may carry values outside the enums; the engine still accepts them.
CategoryValue = Union[AccountCategory, str]
TypeValue = Union[TransactionType, str]


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity."""

    id: str
    date: date
    type: TypeValue
    amount: Decimal
    description: str
    account: str
    category: CategoryValue


@dataclass(frozen=True)
class CustomAccount:
    """User-defined account name offered alongside the built-in suggestions."""

    id: int
    name: str
    category: CategoryValue
    created_at: datetime


@dataclass(frozen=True)
class JournalEntry:
    """Two-sided view of a single transaction."""

    id: str
    date: date
    description: str
    debit_account: str
    credit_account: str
    amount: Decimal


@dataclass(frozen=True)
class LedgerAccount:
    """All transactions sharing an account name, aggregated."""

    name: str
    category: CategoryValue
    debits_total: Decimal
    credits_total: Decimal
    balance: Decimal


@dataclass(frozen=True)
class TrialBalanceItem:
    """Trial balance row for a single ledger account."""

    account: str
    category: CategoryValue
    debit: Decimal
    credit: Decimal


@dataclass(frozen=True)
class TrialBalanceTotals:
    """Column totals of a trial balance."""

    total_debits: Decimal
    total_credits: Decimal

    @property
    def difference(self) -> Decimal:
        return self.total_debits - self.total_credits

    @property
    def is_balanced(self) -> bool:
        return abs(self.difference) < Decimal("0.01")


@dataclass(frozen=True)
class ProfitLossItem:
    """Profit & loss line for a revenue or expense account."""

    account: str
    category: AccountCategory
    amount: Decimal


@dataclass(frozen=True)
class ProfitLossStatement:
    """Profit & loss items with net income."""

    items: tuple[ProfitLossItem, ...]
    net_income: Decimal

    @property
    def revenue_items(self) -> tuple[ProfitLossItem, ...]:
        return tuple(
            item for item in self.items if item.category == AccountCategory.REVENUE
        )

    @property
    def expense_items(self) -> tuple[ProfitLossItem, ...]:
        return tuple(
            item for item in self.items if item.category == AccountCategory.EXPENSE
        )

    @property
    def total_revenue(self) -> Decimal:
        return sum((item.amount for item in self.revenue_items), Decimal("0"))

    @property
    def total_expenses(self) -> Decimal:
        return sum((item.amount for item in self.expense_items), Decimal("0"))

    @property
    def is_profit(self) -> bool:
        """True for net income, False for a net loss or an undefined result."""
        return not self.net_income.is_nan() and self.net_income >= 0


class BudgetStatus(str, Enum):
    """How much of a monthly budget has been used."""

    UNDER = "under"
    ON_TRACK = "on-track"
    OVER = "over"


class SavingsTransactionType(str, Enum):
    """Direction of money moving into or out of a savings goal."""

    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"


@dataclass(frozen=True)
class Budget:
    """Spending limit for one account in one calendar month."""

    id: int
    account: str
    amount: Decimal
    month: str  # YYYY-MM
    created_at: datetime


@dataclass(frozen=True)
class BudgetAnalysis:
    """Budgeted amount compared with what was actually posted."""

    account: str
    budgeted: Decimal
    spent: Decimal
    remaining: Decimal
    percentage: Decimal
    status: BudgetStatus


@dataclass(frozen=True)
class SavingsGoal:
    """Savings target with its running balance."""

    id: int
    name: str
    target_amount: Decimal
    current_amount: Decimal
    target_date: date
    description: Optional[str]
    is_active: bool
    created_at: datetime


@dataclass(frozen=True)
class SavingsTransaction:
    """Deposit into or withdrawal from a savings goal."""

    id: int
    goal_id: int
    date: date
    type: SavingsTransactionType
    amount: Decimal
    description: str


@dataclass(frozen=True)
class GoalProgress:
    """Progress of a savings goal towards its target."""

    goal: SavingsGoal
    progress: Decimal
    remaining: Decimal
    days_left: int
    on_track: bool


@dataclass(frozen=True)
class SavingsSummary:
    """Totals across savings goals plus per-goal progress."""

    total_saved: Decimal
    monthly_average: Decimal
    goals: tuple[GoalProgress, ...]
