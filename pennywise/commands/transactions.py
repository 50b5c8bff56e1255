"""Transaction commands (add, list)."""

import sys

from rich.console import Console
from rich.table import Table

from pennywise.commands.admin import commit_state, open_state, report_rejection, resolve_db_path
from pennywise.dates import month_to_period
from pennywise.domain.ledger import Transaction, TransactionFilter
from pennywise.domain.models import Category, TransactionType, format_amount

console = Console()


def format_transaction_amount(transaction: Transaction) -> str:
    """Format amount with colour and sign for display.

    Args:
        transaction: Transaction to display.

    Returns:
        Rich markup string (e.g., "[red]-12.5[/red]").
    """
    amount = format_amount(transaction.amount)
    if transaction.type == TransactionType.INCOME:
        return f"[green]+{amount}[/green]"
    return f"[red]-{amount}[/red]"


def add_command(
    description: str,
    amount: str,
    category: Category = Category.HOUSING,
    income: bool = False,
) -> None:
    """Add a transaction to the ledger.

    Args:
        description: Transaction description.
        amount: Raw amount, must be strictly positive.
        category: Transaction category.
        income: Record as income instead of expense.
    """
    db_path = resolve_db_path()
    state = open_state(db_path)

    result = state.ledger.add(description, amount, category, is_income=income)
    if result.entity is None:
        report_rejection(result.rejection)
        return

    commit_state(state, db_path)

    txn = result.entity
    console.print("[green]✓[/green] Transaction added:")
    console.print(f"  Date: {txn.date}")
    console.print(f"  Description: {txn.description}")
    console.print(f"  Amount: {format_amount(txn.amount)}")
    console.print(f"  Category: {txn.category.value}")
    console.print(f"  Type: {txn.type.value}")


def list_command(
    category: Category | None = None,
    type_: TransactionType | None = None,
    period: str | None = None,
    month: str | None = None,
    search: str | None = None,
) -> None:
    """List transactions matching the given filters."""
    db_path = resolve_db_path()

    if month:
        try:
            period = month_to_period(month)
        except ValueError:
            console.print(f"[red]Invalid month '{month}'. Expected YYYY-MM.[/red]")
            sys.exit(1)

    state = open_state(db_path)
    criteria = TransactionFilter(category=category, type=type_, period=period)
    transactions = state.ledger.filter(criteria, search or "")

    if not transactions:
        console.print("[yellow]No transactions found[/yellow]")
        return

    table = Table(title=f"Transactions (showing {len(transactions)} of {len(state.ledger)})")
    table.add_column("Date", style="cyan")
    table.add_column("Description", style="white")
    table.add_column("Amount", justify="right")
    table.add_column("Category", style="magenta")
    table.add_column("Type", style="dim")

    for txn in transactions:
        table.add_row(txn.date, txn.description, format_transaction_amount(txn), txn.category.value, txn.type.value)

    console.print(table)
