"""Budget and savings calculations.

Pure functions, like the accounting engine: callers load budgets, goals and
transactions, these functions only compare and aggregate them.
"""

from datetime import date
from decimal import Decimal
from typing import Iterable

from dateutil.relativedelta import relativedelta

from tallybook.domain.accounting import ZERO
from tallybook.domain.entities import (
    Budget,
    BudgetAnalysis,
    BudgetStatus,
    GoalProgress,
    SavingsGoal,
    SavingsSummary,
    SavingsTransaction,
    SavingsTransactionType,
    Transaction,
    TransactionType,
)

HUNDRED = Decimal("100")

# Share of a budget at which spending counts as on track rather than under.
BUDGET_ON_TRACK_PERCENT = Decimal("80")

SAVINGS_AVERAGE_MONTHS = 6
DAYS_PER_MONTH = Decimal("30")


def budget_status(percentage: Decimal) -> BudgetStatus:
    """Classify how much of a budget has been used."""
    if percentage > HUNDRED:
        return BudgetStatus.OVER
    if percentage >= BUDGET_ON_TRACK_PERCENT:
        return BudgetStatus.ON_TRACK
    return BudgetStatus.UNDER


def budget_spent(budget: Budget, transactions: Iterable[Transaction]) -> Decimal:
    """Debits minus credits posted to the budget's account during its month."""
    spent = ZERO
    for txn in transactions:
        if txn.account != budget.account:
            continue
        if txn.date.strftime("%Y-%m") != budget.month:
            continue
        if txn.type == TransactionType.DEBIT:
            spent += txn.amount
        else:
            spent -= txn.amount
    return spent


def analyze_budget(budget: Budget, transactions: Iterable[Transaction]) -> BudgetAnalysis:
    """Compare a budget with the transactions posted against it."""
    spent = budget_spent(budget, transactions)
    if budget.amount > 0:
        percentage = spent / budget.amount * HUNDRED
    else:
        percentage = ZERO
    return BudgetAnalysis(
        account=budget.account,
        budgeted=budget.amount,
        spent=spent,
        remaining=budget.amount - spent,
        percentage=percentage,
        status=budget_status(percentage),
    )


def analyze_budgets(
    budgets: Iterable[Budget], transactions: Iterable[Transaction]
) -> list[BudgetAnalysis]:
    """Budget-versus-actual rows, in budget order."""
    transactions = list(transactions)
    return [analyze_budget(budget, transactions) for budget in budgets]


def savings_net(transactions: Iterable[SavingsTransaction]) -> Decimal:
    """Deposits minus withdrawals."""
    total = ZERO
    for txn in transactions:
        if txn.type == SavingsTransactionType.DEPOSIT:
            total += txn.amount
        else:
            total -= txn.amount
    return total


def savings_monthly_average(
    transactions: Iterable[SavingsTransaction], today: date
) -> Decimal:
    """Net savings over the last six months, spread evenly across them.

    The divisor is always six, so a short history reads as a low average.
    """
    cutoff = today - relativedelta(months=SAVINGS_AVERAGE_MONTHS)
    recent = [txn for txn in transactions if txn.date >= cutoff]
    if not recent:
        return ZERO
    return savings_net(recent) / SAVINGS_AVERAGE_MONTHS


def goal_progress(goal: SavingsGoal, monthly_average: Decimal, today: date) -> GoalProgress:
    """Progress of a goal and whether the savings pace reaches it in time.

    A goal is on track when the monthly average covers the remaining amount
    spread over the months left, or when it has already been reached. Past
    the target date nothing more is required, so an unfinished goal counts as
    on track only if the average is not negative.
    """
    if goal.target_amount > 0:
        progress = goal.current_amount / goal.target_amount * HUNDRED
    else:
        progress = ZERO
    remaining = goal.target_amount - goal.current_amount
    days_left = (goal.target_date - today).days

    months_left = Decimal(days_left) / DAYS_PER_MONTH
    required = remaining / months_left if months_left > 0 else ZERO

    return GoalProgress(
        goal=goal,
        progress=progress,
        remaining=remaining,
        days_left=days_left,
        on_track=monthly_average >= required or progress >= HUNDRED,
    )


def summarize_savings(
    goals: Iterable[SavingsGoal],
    transactions: Iterable[SavingsTransaction],
    today: date,
) -> SavingsSummary:
    """Total saved, monthly average and progress for each active goal."""
    transactions = list(transactions)
    monthly_average = savings_monthly_average(transactions, today)
    return SavingsSummary(
        total_saved=savings_net(transactions),
        monthly_average=monthly_average,
        goals=tuple(
            goal_progress(goal, monthly_average, today)
            for goal in goals
            if goal.is_active
        ),
    )
