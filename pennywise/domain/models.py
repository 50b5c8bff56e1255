"""Domain type definitions for pennywise.

These types are shared by the ledger, goals and tasks:
- Amount: Currency-agnostic decimal amount
- DisplayDate: Date string in dd/mm/yyyy form, fixed at creation
- Category: One of the seven fixed categories
- TransactionType: Income or expense
- Rejection: Why an append was refused
"""

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Generic, NewType, TypeVar

# Amounts are plain floats; direction lives in TransactionType, never in the sign
Amount = NewType("Amount", float)

# Always dd/mm/yyyy (e.g., "05/01/2025")
DisplayDate = NewType("DisplayDate", str)

T = TypeVar("T")

_LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class Category(str, Enum):
    """Fixed transaction categories, in display order."""

    HOUSING = "Housing"
    FOOD = "Food"
    TRANSPORT = "Transport"
    LEISURE = "Leisure"
    HEALTH = "Health"
    SAVINGS = "Savings"
    OTHER = "Other"


class TransactionType(str, Enum):
    """Direction of a transaction."""

    INCOME = "income"
    EXPENSE = "expense"


class Rejection(str, Enum):
    """Reason an append operation did not proceed."""

    EMPTY_TEXT = "empty_text"
    NON_POSITIVE_AMOUNT = "non_positive_amount"
    MISSING_FIELD = "missing_field"


@dataclass(frozen=True)
class AddResult(Generic[T]):
    """Immutable outcome of an append: the new entity or a rejection."""

    entity: T | None = None
    rejection: Rejection | None = None

    @property
    def accepted(self) -> bool:
        return self.rejection is None


CATEGORIES: tuple[Category, ...] = tuple(Category)


def parse_category(value: str | Category) -> Category | None:
    """Resolve a category from its enum or its name.

    Args:
        value: Category enum or name (case-insensitive).

    Returns:
        Matching Category or None if unknown.
    """
    if isinstance(value, Category):
        return value

    wanted = value.strip().lower()
    for category in Category:
        if category.value.lower() == wanted:
            return category
    return None


def parse_amount(raw: str | float | int | None) -> float | None:
    """Parse an amount leniently, reading the leading number of a string.

    "12.5" -> 12.5, "12abc" -> 12.0, "abc" -> None, "" -> None.

    Args:
        raw: Raw amount from user input or storage.

    Returns:
        Parsed float or None if no number could be read.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
        return None if math.isnan(value) else value

    match = _LEADING_NUMBER.match(raw.strip())
    if not match:
        return None
    return float(match.group(0))


def format_amount(amount: float) -> str:
    """Format an amount in its shortest number form.

    Whole numbers drop the decimal part (1.0 -> "1"), others keep it (3.5 -> "3.5").

    Args:
        amount: Amount to format.

    Returns:
        String form of the number.
    """
    if float(amount).is_integer():
        return str(int(amount))
    return repr(float(amount))


REJECTION_MESSAGES: dict[Rejection, str] = {
    Rejection.EMPTY_TEXT: "Text must not be empty",
    Rejection.NON_POSITIVE_AMOUNT: "Amount must be a positive number",
    Rejection.MISSING_FIELD: "A required field is missing or invalid",
}


def describe_rejection(rejection: Rejection) -> str:
    """Human-readable message for a rejection reason."""
    return REJECTION_MESSAGES[rejection]
