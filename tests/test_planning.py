"""Tests for budget and savings calculations."""

from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest

from tallybook.domain.entities import (
    Budget,
    BudgetStatus,
    SavingsGoal,
    SavingsTransaction,
    SavingsTransactionType,
    TransactionType,
)
from tallybook.domain.planning import (
    analyze_budget,
    analyze_budgets,
    budget_status,
    goal_progress,
    savings_monthly_average,
    savings_net,
    summarize_savings,
)

TODAY = date(2024, 7, 15)


def _budget(account="Rent Expense", amount="1500", month="2024-03", id=1):
    return Budget(
        id=id,
        account=account,
        amount=Decimal(amount),
        month=month,
        created_at=datetime(2024, 3, 1),
    )


def _goal(target="1200", current="300", days_ahead=90, is_active=True, id=1):
    return SavingsGoal(
        id=id,
        name=f"Goal {id}",
        target_amount=Decimal(target),
        current_amount=Decimal(current),
        target_date=TODAY + timedelta(days=days_ahead),
        description=None,
        is_active=is_active,
        created_at=datetime(2024, 1, 1),
    )


def _saving(amount, txn_date, type=SavingsTransactionType.DEPOSIT, goal_id=1):
    return SavingsTransaction(
        id=0,
        goal_id=goal_id,
        date=txn_date,
        type=type,
        amount=Decimal(amount),
        description="",
    )


class TestBudgetStatus:
    """Tests for budget_status thresholds."""

    @pytest.mark.parametrize(
        "percentage,expected",
        [
            ("0", BudgetStatus.UNDER),
            ("79.99", BudgetStatus.UNDER),
            ("80", BudgetStatus.ON_TRACK),
            ("100", BudgetStatus.ON_TRACK),
            ("100.01", BudgetStatus.OVER),
        ],
    )
    def test_thresholds(self, percentage, expected):
        assert budget_status(Decimal(percentage)) == expected


class TestAnalyzeBudget:
    """Tests for budget-versus-actual rows."""

    def test_spent_counts_debits_in_month(self, make_transaction):
        txns = [
            make_transaction(amount="1200", account="Rent Expense", category="expense"),
            make_transaction(
                amount="300",
                account="Rent Expense",
                category="expense",
                txn_date=date(2024, 3, 31),
            ),
            make_transaction(
                amount="999",
                account="Rent Expense",
                category="expense",
                txn_date=date(2024, 4, 1),
            ),
            make_transaction(amount="50", account="Utilities", category="expense"),
        ]

        row = analyze_budget(_budget(), txns)

        assert row.account == "Rent Expense"
        assert row.budgeted == Decimal("1500")
        assert row.spent == Decimal("1500")
        assert row.remaining == Decimal("0")
        assert row.percentage == Decimal("100")
        assert row.status == BudgetStatus.ON_TRACK

    def test_credits_reduce_spending(self, make_transaction):
        txns = [
            make_transaction(amount="500", account="Rent Expense", category="expense"),
            make_transaction(
                type=TransactionType.CREDIT,
                amount="200",
                account="Rent Expense",
                category="expense",
            ),
        ]

        row = analyze_budget(_budget(amount="1000"), txns)

        assert row.spent == Decimal("300")
        assert row.percentage == Decimal("30")
        assert row.status == BudgetStatus.UNDER

    def test_overspent(self, make_transaction):
        txns = [make_transaction(amount="200", account="Travel", category="expense")]

        row = analyze_budget(_budget(account="Travel", amount="150"), txns)

        assert row.remaining == Decimal("-50")
        assert row.status == BudgetStatus.OVER

    def test_zero_budget_reports_zero_percent(self, make_transaction):
        txns = [make_transaction(amount="20", account="Travel", category="expense")]

        row = analyze_budget(_budget(account="Travel", amount="0"), txns)

        assert row.percentage == Decimal("0")
        assert row.status == BudgetStatus.UNDER

    def test_analyze_budgets_keeps_order_and_accepts_generator(self, make_transaction):
        budgets = [_budget(account="B", id=1), _budget(account="A", id=2)]
        txns = (make_transaction(amount="10", account=name) for name in ("A", "B"))

        rows = analyze_budgets(budgets, txns)

        assert [(r.account, r.spent) for r in rows] == [
            ("B", Decimal("10")),
            ("A", Decimal("10")),
        ]


class TestSavings:
    """Tests for savings averages and goal progress."""

    def test_net_and_monthly_average(self):
        txns = [
            _saving("600", date(2024, 3, 1)),
            _saving("60", date(2024, 5, 1), type=SavingsTransactionType.WITHDRAWAL),
            _saving("1000", date(2023, 12, 1)),
        ]

        assert savings_net(txns) == Decimal("1540")
        assert savings_monthly_average(txns, TODAY) == Decimal("90")

    def test_monthly_average_without_recent_activity(self):
        assert savings_monthly_average([], TODAY) == Decimal("0")
        assert savings_monthly_average([_saving("10", date(2020, 1, 1))], TODAY) == Decimal("0")

    def test_goal_progress_on_pace(self):
        item = goal_progress(_goal(), Decimal("300"), TODAY)

        assert item.progress == Decimal("25")
        assert item.remaining == Decimal("900")
        assert item.days_left == 90
        assert item.on_track

    def test_goal_progress_behind_pace(self):
        assert not goal_progress(_goal(), Decimal("299"), TODAY).on_track

    def test_reached_goal_is_on_track(self):
        item = goal_progress(_goal(current="1500"), Decimal("0"), TODAY)
        assert item.progress == Decimal("125")
        assert item.on_track

    def test_overdue_goal(self):
        item = goal_progress(_goal(days_ahead=-10), Decimal("0"), TODAY)
        assert item.days_left == -10
        assert item.on_track
        assert not goal_progress(_goal(days_ahead=-10), Decimal("-5"), TODAY).on_track

    def test_zero_target(self):
        item = goal_progress(_goal(target="0", current="0"), Decimal("0"), TODAY)
        assert item.progress == Decimal("0")
        assert item.remaining == Decimal("0")

    def test_summary_skips_inactive_goals(self):
        goals = [_goal(id=1), _goal(id=2, is_active=False)]
        txns = [_saving("120", date(2024, 6, 1))]

        summary = summarize_savings(goals, txns, TODAY)

        assert summary.total_saved == Decimal("120")
        assert summary.monthly_average == Decimal("20")
        assert [item.goal.id for item in summary.goals] == [1]
