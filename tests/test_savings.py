"""Tests for savings service."""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from tallybook.domain.entities import SavingsTransactionType
from tallybook.domain.errors import NotFoundError, ValidationError
from tallybook.domain.savings import parse_savings_type


@pytest.fixture
def goal_id(savings_service):
    """A savings goal with a 1000 target."""
    return savings_service.create_goal(
        name="Emergency Fund",
        target_amount="1000",
        target_date=date(2025, 12, 31),
        description="Three months of rent",
    )


def test_create_and_get_goal(savings_service, goal_id):
    goal = savings_service.get_goal(goal_id)

    assert goal.name == "Emergency Fund"
    assert goal.target_amount == Decimal("1000")
    assert goal.current_amount == Decimal("0")
    assert goal.target_date == date(2025, 12, 31)
    assert goal.description == "Three months of rent"
    assert goal.is_active


@pytest.mark.parametrize(
    "name,target,message",
    [
        (" ", "100", "Name must not be empty"),
        ("Car", "-5", "must not be negative"),
        ("Car", "0.001", "at most 2 decimal places"),
    ],
)
def test_create_goal_rejects_invalid_fields(savings_service, name, target, message):
    with pytest.raises(ValidationError) as excinfo:
        savings_service.create_goal(name=name, target_amount=target, target_date=date(2025, 1, 1))
    assert message in str(excinfo.value)
    assert savings_service.list_goals() == []


def test_deposit_and_withdraw_update_balance(savings_service, goal_id):
    savings_service.deposit(goal_id, "250", date(2024, 3, 1), "March")
    savings_service.deposit(goal_id, Decimal("100.50"), date(2024, 4, 1), "April")
    savings_service.withdraw(goal_id, "50.50", date(2024, 4, 15), "Car repair")

    assert savings_service.require_goal(goal_id).current_amount == Decimal("300")

    history = savings_service.list_transactions(goal_id)
    assert [(t.type, t.amount, t.description) for t in history] == [
        (SavingsTransactionType.WITHDRAWAL, Decimal("50.50"), "Car repair"),
        (SavingsTransactionType.DEPOSIT, Decimal("100.50"), "April"),
        (SavingsTransactionType.DEPOSIT, Decimal("250"), "March"),
    ]


def test_withdrawal_never_goes_below_zero(savings_service, goal_id):
    savings_service.deposit(goal_id, "40", date(2024, 3, 1), "Start")
    savings_service.withdraw(goal_id, "100", date(2024, 3, 2), "Too much")

    assert savings_service.require_goal(goal_id).current_amount == Decimal("0")
    assert len(savings_service.list_transactions(goal_id)) == 2


def test_add_transaction_validation(savings_service, goal_id):
    with pytest.raises(ValidationError, match="Invalid type"):
        savings_service.add_transaction(goal_id, "transfer", "10", date(2024, 3, 1), "x")
    with pytest.raises(ValidationError, match="Description must not be empty"):
        savings_service.deposit(goal_id, "10", date(2024, 3, 1), "  ")
    with pytest.raises(ValidationError, match="at most 2 decimal places"):
        savings_service.deposit(goal_id, "10.001", date(2024, 3, 1), "x")
    with pytest.raises(NotFoundError, match="Savings goal 99 not found"):
        savings_service.deposit(99, "10", date(2024, 3, 1), "x")

    assert savings_service.list_transactions() == []


def test_closed_goal_rejects_transactions(savings_service, goal_id):
    savings_service.close_goal(goal_id)

    with pytest.raises(ValidationError, match="is closed"):
        savings_service.deposit(goal_id, "10", date(2024, 3, 1), "Late")
    assert savings_service.list_goals(active_only=True) == []
    assert len(savings_service.list_goals()) == 1

    savings_service.reopen_goal(goal_id)
    savings_service.deposit(goal_id, "10", date(2024, 3, 1), "Back")
    assert savings_service.require_goal(goal_id).current_amount == Decimal("10")


def test_delete_goal(savings_service, goal_id):
    savings_service.deposit(goal_id, "10", date(2024, 3, 1), "x")
    savings_service.delete_goal(goal_id)

    assert savings_service.get_goal(goal_id) is None
    assert savings_service.list_transactions() == []
    with pytest.raises(NotFoundError):
        savings_service.delete_goal(goal_id)


def test_summary(savings_service, goal_id):
    today = date(2024, 6, 30)
    other = savings_service.create_goal("Old", "100", date(2024, 1, 1))
    savings_service.deposit(goal_id, "600", today - timedelta(days=10), "June")
    savings_service.deposit(other, "60", today - timedelta(days=400), "Long ago")
    savings_service.close_goal(other)

    summary = savings_service.summary(today=today)

    assert summary.total_saved == Decimal("660")
    assert summary.monthly_average == Decimal("100")
    assert [item.goal.id for item in summary.goals] == [goal_id]
    assert summary.goals[0].progress == Decimal("60")


def test_parse_savings_type():
    assert parse_savings_type(" Deposit ") is SavingsTransactionType.DEPOSIT
    assert parse_savings_type(SavingsTransactionType.WITHDRAWAL) is SavingsTransactionType.WITHDRAWAL
