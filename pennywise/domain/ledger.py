"""Pure functions and the Ledger collection for transactions.

This module contains the functional core for transaction operations:
- No I/O operations (no database, no console, no files)
- Transactions are immutable; the ledger only appends
- Filtering never mutates the ledger
- Easy to test
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from pennywise.dates import format_display_date
from pennywise.domain.models import (
    AddResult,
    Amount,
    Category,
    DisplayDate,
    Rejection,
    TransactionType,
    parse_amount,
    parse_category,
)


@dataclass(frozen=True)
class Transaction:
    """Immutable transaction data."""

    description: str
    amount: Amount
    category: Category
    type: TransactionType
    date: DisplayDate

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "amount": self.amount,
            "category": self.category.value,
            "type": self.type.value,
            "date": self.date,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Transaction":
        """Build a transaction from its stored form.

        Raises:
            KeyError: If a field is missing.
            ValueError: If the category, type or amount is invalid.
        """
        category = parse_category(str(data["category"]))
        if category is None:
            raise ValueError(f"Unknown category: {data['category']!r}")

        amount = parse_amount(data["amount"])
        if amount is None:
            raise ValueError(f"Invalid amount: {data['amount']!r}")

        return cls(
            description=str(data["description"]),
            amount=Amount(amount),
            category=category,
            type=TransactionType(data["type"]),
            date=DisplayDate(str(data["date"])),
        )


@dataclass(frozen=True)
class TransactionFilter:
    """Immutable filter criteria. Unset fields match everything."""

    category: Category | None = None
    type: TransactionType | None = None
    period: str | None = None


def validate_transaction_input(
    description: str,
    amount: str | float | None,
    category: str | Category,
) -> tuple[float | None, Category | None, Rejection | None]:
    """Validate raw transaction input.

    Args:
        description: Transaction description.
        amount: Raw amount (string or number).
        category: Category enum or name.

    Returns:
        Tuple of (parsed_amount, category, rejection). Rejection is None when valid.
    """
    if not description.strip():
        return None, None, Rejection.EMPTY_TEXT

    parsed = parse_amount(amount)
    if parsed is None or not parsed > 0:
        return None, None, Rejection.NON_POSITIVE_AMOUNT

    resolved = parse_category(category)
    if resolved is None:
        return None, None, Rejection.MISSING_FIELD

    return parsed, resolved, None


def create_transaction(
    description: str,
    amount: str | float | None,
    category: str | Category,
    is_income: bool,
    today: date,
) -> AddResult[Transaction]:
    """Create a transaction from raw input.

    Args:
        description: Transaction description.
        amount: Raw amount (string or number), must be strictly positive.
        category: Category enum or name.
        is_income: True for income, False for expense.
        today: Creation date, stored in display form.

    Returns:
        AddResult with the new transaction or the rejection reason.
    """
    parsed, resolved, rejection = validate_transaction_input(description, amount, category)
    if rejection is not None or parsed is None or resolved is None:
        return AddResult(rejection=rejection)

    transaction = Transaction(
        description=description,
        amount=Amount(parsed),
        category=resolved,
        type=TransactionType.INCOME if is_income else TransactionType.EXPENSE,
        date=format_display_date(today),
    )
    return AddResult(entity=transaction)


def matches_filter(
    transaction: Transaction,
    criteria: TransactionFilter,
    search_query: str = "",
) -> bool:
    """Check whether a transaction satisfies every set criterion.

    Args:
        transaction: Transaction to check.
        criteria: Category, type and period criteria.
        search_query: Free-text search, case-insensitive on the description.

    Returns:
        True if all set criteria hold.
    """
    if criteria.category is not None and transaction.category != criteria.category:
        return False

    if criteria.type is not None and transaction.type != criteria.type:
        return False

    # Period matching is a plain case-sensitive substring test
    if criteria.period and criteria.period not in transaction.date:
        return False

    if search_query and search_query.lower() not in transaction.description.lower():
        return False

    return True


def filter_transactions(
    transactions: list[Transaction],
    criteria: TransactionFilter,
    search_query: str = "",
) -> list[Transaction]:
    """Filter transactions, preserving their order.

    Args:
        transactions: Transactions in insertion order.
        criteria: Category, type and period criteria.
        search_query: Free-text search term.

    Returns:
        Subsequence of transactions matching all criteria.
    """
    return [t for t in transactions if matches_filter(t, criteria, search_query)]


@dataclass
class Ledger:
    """Ordered, append-only collection of transactions."""

    transactions: list[Transaction] = field(default_factory=list)

    def add(
        self,
        description: str,
        amount: str | float | None,
        category: str | Category,
        is_income: bool = False,
        today: date | None = None,
    ) -> AddResult[Transaction]:
        """Append a transaction if the input is valid.

        Args:
            description: Transaction description.
            amount: Raw amount, must be strictly positive.
            category: Category enum or name.
            is_income: True for income, False for expense.
            today: Creation date. Defaults to the current date.

        Returns:
            AddResult with the appended transaction or the rejection reason.
        """
        result = create_transaction(description, amount, category, is_income, today or date.today())
        if result.entity is not None:
            self.transactions.append(result.entity)
        return result

    def filter(self, criteria: TransactionFilter, search_query: str = "") -> list[Transaction]:
        return filter_transactions(self.transactions, criteria, search_query)

    def __len__(self) -> int:
        return len(self.transactions)
