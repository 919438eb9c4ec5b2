"""Accounting derivation engine.

Pure functions turning a flat list of transactions into journal entries,
ledger accounts, a trial balance and a profit & loss statement. Nothing here
performs I/O or validates input: malformed transactions (negative amounts,
blank account names, unknown categories) are derived like any other and
validation belongs to whatever creates the transactions.

Each transaction posts to exactly one named account. The "Cash/Bank"
counterpart only appears in the journal view; ledgers and the trial balance
never include it, so a trial balance here reflects named accounts only.
"""

from collections import defaultdict
from decimal import Decimal
from typing import Iterable, Mapping, Optional, Sequence, Union

from tallybook.domain.entities import (
    AccountCategory,
    CategoryValue,
    CustomAccount,
    JournalEntry,
    LedgerAccount,
    NormalBalance,
    ProfitLossItem,
    ProfitLossStatement,
    Transaction,
    TransactionType,
    TrialBalanceItem,
    TrialBalanceTotals,
)

CASH_COUNTERPART_ACCOUNT = "Cash/Bank"

ZERO = Decimal("0")

# Debit-normal categories increase with debits, credit-normal with credits.
NORMAL_BALANCE: Mapping[AccountCategory, NormalBalance] = {
    AccountCategory.ASSET: NormalBalance.DEBIT,
    AccountCategory.EXPENSE: NormalBalance.DEBIT,
    AccountCategory.LIABILITY: NormalBalance.CREDIT,
    AccountCategory.EQUITY: NormalBalance.CREDIT,
    AccountCategory.REVENUE: NormalBalance.CREDIT,
}

ACCOUNT_CATEGORY_DESCRIPTIONS: Mapping[AccountCategory, str] = {
    AccountCategory.ASSET: "Assets - Resources owned by the business (cash, inventory, equipment)",
    AccountCategory.LIABILITY: "Liabilities - Debts and obligations owed to others",
    AccountCategory.EQUITY: "Equity - Owner's stake in the business",
    AccountCategory.REVENUE: "Revenue - Income earned from business operations",
    AccountCategory.EXPENSE: "Expenses - Costs incurred in business operations",
}

DEFAULT_ACCOUNT_SUGGESTIONS: Mapping[AccountCategory, tuple[str, ...]] = {
    AccountCategory.REVENUE: (
        "Sales Revenue",
        "Service Revenue",
        "Interest Income",
        "Other Income",
    ),
    AccountCategory.EXPENSE: (
        "Office Supplies",
        "Rent Expense",
        "Utilities",
        "Marketing",
        "Travel",
        "Insurance",
        "Professional Services",
    ),
    AccountCategory.ASSET: (
        "Cash",
        "Personal Account",
        "Accounts Receivable",
        "Equipment",
        "Inventory",
    ),
    AccountCategory.LIABILITY: ("Accounts Payable", "Credit Card", "Loans Payable"),
    AccountCategory.EQUITY: ("Owner's Equity", "Retained Earnings"),
}

LedgerAccounts = Union[Mapping[str, LedgerAccount], Iterable[LedgerAccount]]


def coerce_category(category: CategoryValue) -> Optional[AccountCategory]:
    """Return the AccountCategory for a member or raw value, or None if unknown."""
    try:
        return AccountCategory(category)
    except (ValueError, TypeError):
        return None


def normal_balance(category: CategoryValue) -> NormalBalance:
    """Return the normal balance side for a category.

    Anything that is not a known debit-normal category is credit-normal.
    """
    known = coerce_category(category)
    if known is None:
        return NormalBalance.CREDIT
    return NORMAL_BALANCE[known]


def account_balance(
    category: CategoryValue, debits_total: Decimal, credits_total: Decimal
) -> Decimal:
    """Signed balance of an account under its category's sign convention."""
    if normal_balance(category) == NormalBalance.DEBIT:
        return debits_total - credits_total
    return credits_total - debits_total


def create_journal_entry(transaction: Transaction) -> JournalEntry:
    """Map a transaction to a journal entry against the cash counterpart."""
    if transaction.type == TransactionType.DEBIT:
        debit_account = transaction.account
        credit_account = CASH_COUNTERPART_ACCOUNT
    else:
        debit_account = CASH_COUNTERPART_ACCOUNT
        credit_account = transaction.account

    return JournalEntry(
        id=transaction.id,
        date=transaction.date,
        description=transaction.description,
        debit_account=debit_account,
        credit_account=credit_account,
        amount=transaction.amount,
    )


def generate_journal(transactions: Iterable[Transaction]) -> list[JournalEntry]:
    """Journal entries for transactions, in input order."""
    return [create_journal_entry(txn) for txn in transactions]


def generate_ledger_accounts(
    transactions: Iterable[Transaction],
) -> dict[str, LedgerAccount]:
    """Aggregate transactions into ledger accounts keyed by account name.

    The category of an account is taken from the first transaction seen for
    that name; see find_category_conflicts for detecting disagreements.
    """
    categories: dict[str, CategoryValue] = {}
    debits: dict[str, Decimal] = defaultdict(lambda: ZERO)
    credits: dict[str, Decimal] = defaultdict(lambda: ZERO)

    for txn in transactions:
        categories.setdefault(txn.account, txn.category)
        if txn.type == TransactionType.DEBIT:
            debits[txn.account] += txn.amount
        else:
            credits[txn.account] += txn.amount

    accounts: dict[str, LedgerAccount] = {}
    for name, category in categories.items():
        debits_total = debits[name]
        credits_total = credits[name]
        accounts[name] = LedgerAccount(
            name=name,
            category=category,
            debits_total=debits_total,
            credits_total=credits_total,
            balance=account_balance(category, debits_total, credits_total),
        )
    return accounts


def find_category_conflicts(
    transactions: Iterable[Transaction],
) -> dict[str, set[CategoryValue]]:
    """Return account names that appear with more than one category."""
    seen: dict[str, set[CategoryValue]] = defaultdict(set)
    for txn in transactions:
        known = coerce_category(txn.category)
        seen[txn.account].add(known if known is not None else txn.category)
    return {name: cats for name, cats in seen.items() if len(cats) > 1}


def _iter_ledger_accounts(ledger_accounts: LedgerAccounts) -> Iterable[LedgerAccount]:
    if isinstance(ledger_accounts, Mapping):
        return ledger_accounts.values()
    return ledger_accounts


def generate_trial_balance(ledger_accounts: LedgerAccounts) -> list[TrialBalanceItem]:
    """Split each ledger balance into a debit or credit column.

    A non-finite balance (NaN or infinity, only reachable from unvalidated
    amounts) cannot be placed in either column and is shown as zero in both.
    """
    items = []
    for account in _iter_ledger_accounts(ledger_accounts):
        balance = account.balance
        if not balance.is_finite():
            debit = credit = ZERO
        else:
            debit = balance if balance > 0 else ZERO
            credit = abs(balance) if balance < 0 else ZERO
        items.append(
            TrialBalanceItem(
                account=account.name,
                category=account.category,
                debit=debit,
                credit=credit,
            )
        )
    return items


def trial_balance_totals(items: Sequence[TrialBalanceItem]) -> TrialBalanceTotals:
    """Sum the debit and credit columns of a trial balance."""
    return TrialBalanceTotals(
        total_debits=sum((item.debit for item in items), ZERO),
        total_credits=sum((item.credit for item in items), ZERO),
    )


def generate_profit_loss(ledger_accounts: LedgerAccounts) -> ProfitLossStatement:
    """Build the profit & loss statement from revenue and expense accounts.

    Amounts are absolute balances, so a contra balance shows with the same
    sign as a normal one.
    """
    accounts = list(_iter_ledger_accounts(ledger_accounts))
    revenue = [acc for acc in accounts if acc.category == AccountCategory.REVENUE]
    expenses = [acc for acc in accounts if acc.category == AccountCategory.EXPENSE]

    items = tuple(
        ProfitLossItem(
            account=acc.name,
            category=AccountCategory.REVENUE,
            amount=abs(acc.balance),
        )
        for acc in revenue
    ) + tuple(
        ProfitLossItem(
            account=acc.name,
            category=AccountCategory.EXPENSE,
            amount=abs(acc.balance),
        )
        for acc in expenses
    )

    total_revenue = sum((abs(acc.balance) for acc in revenue), ZERO)
    total_expenses = sum((abs(acc.balance) for acc in expenses), ZERO)
    return ProfitLossStatement(items=items, net_income=total_revenue - total_expenses)


def account_suggestions(
    custom_accounts: Iterable[CustomAccount] = (),
) -> dict[AccountCategory, list[str]]:
    """Built-in account names per category, followed by custom account names."""
    suggestions = {
        category: list(names) for category, names in DEFAULT_ACCOUNT_SUGGESTIONS.items()
    }
    for account in custom_accounts:
        category = coerce_category(account.category)
        if category is None:
            continue
        names = suggestions[category]
        if account.name not in names:
            names.append(account.name)
    return suggestions
