"""Savings goals and their tracker.

Goals are append-only: there is no completion, deletion or progress update.
"""

from dataclasses import dataclass, field
from typing import Any

from pennywise.domain.ledger import Transaction
from pennywise.domain.models import AddResult, Category, Rejection, TransactionType, parse_amount


@dataclass(frozen=True)
class Goal:
    """Immutable savings goal."""

    text: str
    amount: float
    deadline: str
    progress: float = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "amount": self.amount,
            "deadline": self.deadline,
            "progress": self.progress,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Goal":
        amount = parse_amount(data["amount"])
        if amount is None:
            raise ValueError(f"Invalid amount: {data['amount']!r}")
        return cls(
            text=str(data["text"]),
            amount=amount,
            deadline=str(data["deadline"]),
            progress=parse_amount(data.get("progress", 0)) or 0,
        )


def create_goal(text: str, amount: str | float | None, deadline: str | None) -> AddResult[Goal]:
    """Create a goal from raw input.

    The amount is only required to be present and non-zero; its sign is not checked.

    Args:
        text: Goal label.
        amount: Raw target amount.
        deadline: Deadline date string.

    Returns:
        AddResult with the new goal or the rejection reason.
    """
    if not text.strip():
        return AddResult(rejection=Rejection.EMPTY_TEXT)

    parsed = parse_amount(amount)
    if not parsed or not deadline:
        return AddResult(rejection=Rejection.MISSING_FIELD)

    return AddResult(entity=Goal(text=text, amount=parsed, deadline=deadline, progress=0))


def total_saved(transactions: list[Transaction]) -> float:
    """Sum of expense transactions filed under Savings.

    Args:
        transactions: Ledger transactions.

    Returns:
        Total amount moved into savings.
    """
    return sum(
        t.amount for t in transactions if t.category == Category.SAVINGS and t.type == TransactionType.EXPENSE
    )


def calculate_goal_progress(goal: Goal, saved: float) -> float:
    """Calculate display progress of a goal against the amount saved.

    The stored progress field is left untouched; this is a derived view.

    Args:
        goal: Goal to measure.
        saved: Total saved so far.

    Returns:
        Percentage reached, capped at 100. 0.0 for non-positive targets.
    """
    if goal.amount <= 0:
        return 0.0
    return min(100.0, (max(saved, 0.0) / goal.amount) * 100)


@dataclass
class GoalTracker:
    """Ordered, append-only collection of goals."""

    goals: list[Goal] = field(default_factory=list)

    def add(self, text: str, amount: str | float | None, deadline: str | None) -> AddResult[Goal]:
        result = create_goal(text, amount, deadline)
        if result.entity is not None:
            self.goals.append(result.entity)
        return result

    def __len__(self) -> int:
        return len(self.goals)
