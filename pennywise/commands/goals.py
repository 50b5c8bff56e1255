"""Goal commands (add, list)."""

import pandas as pd
from rich.console import Console
from rich.table import Table

from pennywise.commands.admin import commit_state, open_state, report_rejection, resolve_db_path
from pennywise.domain.goals import calculate_goal_progress, total_saved
from pennywise.domain.models import format_amount

console = Console()


def normalize_deadline(raw_deadline: str) -> str:
    """Normalize a deadline to ISO format (YYYY-MM-DD) when possible.

    Uses pandas.to_datetime so that both ISO and day-first inputs
    ("2025-06-30", "30/06/2025") are accepted. Unparseable input is kept
    as given since deadlines are stored as plain strings.

    Args:
        raw_deadline: Deadline as typed by the user.

    Returns:
        Normalized deadline, or the stripped input if it cannot be parsed.
    """
    stripped = raw_deadline.strip()
    if not stripped:
        return stripped
    try:
        return pd.to_datetime(stripped, dayfirst=True).strftime("%Y-%m-%d")
    except (ValueError, pd.errors.ParserError):
        return stripped


def add_goal_command(text: str, amount: str, deadline: str) -> None:
    """Add a savings goal."""
    db_path = resolve_db_path()
    state = open_state(db_path)

    result = state.goals.add(text, amount, normalize_deadline(deadline))
    if result.entity is None:
        report_rejection(result.rejection)
        return

    commit_state(state, db_path)

    goal = result.entity
    console.print(f"[green]✓[/green] Goal added: {goal.text} - {format_amount(goal.amount)} (deadline: {goal.deadline})")


def list_goals_command() -> None:
    """List savings goals with progress from Savings transactions."""
    db_path = resolve_db_path()
    state = open_state(db_path)

    if not state.goals.goals:
        console.print("[yellow]No goals yet[/yellow]")
        return

    saved = total_saved(state.ledger.transactions)

    table = Table(title=f"Goals (saved so far: {format_amount(round(saved, 2))})")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Goal", style="white")
    table.add_column("Target", justify="right")
    table.add_column("Deadline", style="cyan")
    table.add_column("Progress", justify="right")

    for idx, goal in enumerate(state.goals.goals, 1):
        progress = calculate_goal_progress(goal, saved)
        colour = "green" if progress >= 100 else "yellow"
        table.add_row(
            str(idx),
            goal.text,
            format_amount(goal.amount),
            goal.deadline,
            f"[{colour}]{progress:.0f}%[/{colour}]",
        )

    console.print(table)
