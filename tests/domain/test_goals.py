"""Tests for pennywise.domain.goals."""

from pennywise.domain.goals import Goal, GoalTracker, calculate_goal_progress, create_goal, total_saved
from pennywise.domain.ledger import Transaction
from pennywise.domain.models import Amount, Category, DisplayDate, Rejection, TransactionType


class TestGoalTrackerAdd:
    """Tests for GoalTracker.add."""

    def test_accepts_valid_goal(self) -> None:
        """Should append a goal with zero progress."""
        tracker = GoalTracker()

        result = tracker.add("Holiday", "1500", "2025-08-01")

        assert result.accepted
        assert tracker.goals == [Goal(text="Holiday", amount=1500.0, deadline="2025-08-01", progress=0)]

    def test_rejects_empty_text(self) -> None:
        """Should reject blank labels."""
        tracker = GoalTracker()

        result = tracker.add("  ", "100", "2025-08-01")

        assert result.rejection == Rejection.EMPTY_TEXT
        assert len(tracker) == 0

    def test_rejects_missing_amount_or_deadline(self) -> None:
        """Should reject empty, zero or unparseable amounts and empty deadlines."""
        tracker = GoalTracker()

        assert tracker.add("Car", "", "2025-08-01").rejection == Rejection.MISSING_FIELD
        assert tracker.add("Car", 0, "2025-08-01").rejection == Rejection.MISSING_FIELD
        assert tracker.add("Car", "abc", "2025-08-01").rejection == Rejection.MISSING_FIELD
        assert tracker.add("Car", "100", "").rejection == Rejection.MISSING_FIELD
        assert tracker.goals == []

    def test_negative_amount_is_accepted(self) -> None:
        """Should not check the sign of the target."""
        result = create_goal("Odd", "-50", "2025-01-01")

        assert result.entity is not None
        assert result.entity.amount == -50.0


class TestGoalProgress:
    """Tests for total_saved and calculate_goal_progress."""

    def test_total_saved_counts_savings_expenses_only(self) -> None:
        """Should only count expenses filed under Savings."""

        def txn(category: Category, amount: float, type_: TransactionType) -> Transaction:
            return Transaction("t", Amount(amount), category, type_, DisplayDate("01/01/2025"))

        transactions = [
            txn(Category.SAVINGS, 100, TransactionType.EXPENSE),
            txn(Category.SAVINGS, 40, TransactionType.INCOME),
            txn(Category.FOOD, 30, TransactionType.EXPENSE),
        ]

        assert total_saved(transactions) == 100

    def test_progress_percentage(self) -> None:
        """Should compare saved amount to target."""
        goal = Goal(text="Bike", amount=400.0, deadline="2025-05-01")

        assert calculate_goal_progress(goal, 100) == 25.0

    def test_progress_is_capped(self) -> None:
        """Should not exceed 100%."""
        goal = Goal(text="Bike", amount=400.0, deadline="2025-05-01")

        assert calculate_goal_progress(goal, 1000) == 100.0

    def test_progress_field_is_untouched(self) -> None:
        """Should leave the stored progress at zero."""
        goal = Goal(text="Bike", amount=400.0, deadline="2025-05-01")
        calculate_goal_progress(goal, 100)

        assert goal.progress == 0

    def test_non_positive_target(self) -> None:
        """Should report 0% for non-positive targets."""
        goal = Goal(text="Odd", amount=-5.0, deadline="2025-05-01")

        assert calculate_goal_progress(goal, 100) == 0.0
