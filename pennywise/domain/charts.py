"""Pure functions for chart datasets.

This module contains the functional core for spending charts:
- No I/O operations (no database, no console, no files)
- No side effects
- Pure data transformations
- Easy to test

Charts show spending only: income transactions never contribute.
"""

from dataclasses import dataclass
from enum import Enum

from pennywise.domain.ledger import Transaction
from pennywise.domain.models import CATEGORIES, Category, TransactionType

CHART_COLORS: tuple[str, ...] = (
    "#0088FE",
    "#00C49F",
    "#FFBB28",
    "#FF8042",
    "#AF19FF",
    "#FF1919",
    "#19FFAF",
)


class ChartKind(str, Enum):
    """Ways of drawing the per-category spending."""

    BAR = "bar"
    PIE = "pie"


@dataclass(frozen=True)
class CategoryTotal:
    """Immutable expense total for a category."""

    category: Category
    total: float


@dataclass(frozen=True)
class PieSlice:
    """Immutable pie chart slice."""

    category: Category
    total: float
    color: str
    share: float  # Percentage of all spending (0-100)


def aggregate_by_category(transactions: list[Transaction]) -> list[CategoryTotal]:
    """Sum expense amounts per category.

    Args:
        transactions: Transactions to aggregate.

    Returns:
        One CategoryTotal per category, in fixed category order.
        Categories without expenses have a zero total.
    """
    totals = {category: 0.0 for category in CATEGORIES}
    for transaction in transactions:
        if transaction.type == TransactionType.EXPENSE:
            totals[transaction.category] += transaction.amount

    return [CategoryTotal(category=category, total=totals[category]) for category in CATEGORIES]


def build_bar_data(totals: list[CategoryTotal]) -> list[tuple[str, float]]:
    """Build bar chart points from category totals.

    Args:
        totals: Output of aggregate_by_category.

    Returns:
        List of (category name, total) tuples in category order.
    """
    return [(t.category.value, t.total) for t in totals]


def calculate_share_percentage(value: float, total: float) -> float:
    """Calculate the percentage a value represents of a total.

    Args:
        value: Part value.
        total: Whole value.

    Returns:
        Percentage (0-100), 0.0 when the total is not positive.
    """
    if total <= 0:
        return 0.0
    return (value / total) * 100


def build_pie_data(totals: list[CategoryTotal]) -> list[PieSlice]:
    """Build pie chart slices from category totals.

    Colours cycle through CHART_COLORS by category position.

    Args:
        totals: Output of aggregate_by_category.

    Returns:
        List of PieSlice in category order.
    """
    grand_total = sum(t.total for t in totals)
    return [
        PieSlice(
            category=t.category,
            total=t.total,
            color=CHART_COLORS[index % len(CHART_COLORS)],
            share=calculate_share_percentage(t.total, grand_total),
        )
        for index, t in enumerate(totals)
    ]


def calculate_histogram_bar_length(
    amount: float,
    max_amount: float,
    bar_width: int,
) -> int:
    """Calculate histogram bar length.

    Args:
        amount: Amount to display.
        max_amount: Maximum amount in dataset.
        bar_width: Maximum bar width in characters.

    Returns:
        Bar length in characters.
    """
    if max_amount <= 0:
        return 0
    return int((abs(amount) / max_amount) * bar_width)
