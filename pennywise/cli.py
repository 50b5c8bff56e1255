"""CLI entry point for pennywise."""

import logging

import typer
from rich.logging import RichHandler

from pennywise.commands.admin import init_command
from pennywise.commands.charts import chart_command
from pennywise.commands.export import export_command
from pennywise.commands.goals import add_goal_command, list_goals_command
from pennywise.commands.tasks import add_task_command, delete_task_command, list_tasks_command, toggle_task_command
from pennywise.commands.transactions import add_command, list_command
from pennywise.domain.charts import ChartKind
from pennywise.domain.models import Category, TransactionType

app = typer.Typer(
    name="pennywise",
    help="Pennywise - A personal finance tracker for transactions, goals and tasks",
    add_completion=False,
)
goal_app = typer.Typer(help="Manage your savings goals.")
task_app = typer.Typer(help="Manage your task list.")
app.add_typer(goal_app, name="goal")
app.add_typer(task_app, name="task")


def configure_logging(verbose: bool) -> None:
    """Route log records through rich; debug level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Pennywise - A personal finance tracker for transactions, goals and tasks."""
    configure_logging(verbose)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing database and config"),
) -> None:
    """Initialize pennywise database and configuration."""
    init_command(force)


@app.command()
def add(
    description: str,
    amount: str,
    category: Category = typer.Option(Category.HOUSING, "--category", "-c", case_sensitive=False),
    income: bool = typer.Option(False, "--income", help="Record as income (default: expense)"),
) -> None:
    """Add an income or expense transaction.

    Put -- before the arguments when the amount starts with a minus sign:
    pennywise add -- coffee -5
    """
    add_command(description, amount, category, income)


@app.command(name="list")
def list_transactions(
    category: Category = typer.Option(None, "--category", "-c", case_sensitive=False, help="Only this category"),
    type_: TransactionType = typer.Option(None, "--type", "-t", case_sensitive=False, help="Only income or expense"),
    period: str = typer.Option(None, "--period", help="Only dates containing this text (e.g. '/2025')"),
    month: str = typer.Option(None, "--month", help="Only this month (YYYY-MM)"),
    search: str = typer.Option(None, "--search", "-s", help="Search descriptions (case-insensitive)"),
) -> None:
    """List your transactions, optionally filtered."""
    list_command(category, type_, period, month, search)


@app.command()
def chart(
    kind: ChartKind = typer.Option(ChartKind.BAR, "--kind", "-k", case_sensitive=False, help="Chart kind"),
) -> None:
    """Show your spending per category."""
    chart_command(kind)


@app.command()
def export(
    output_dir: str = typer.Option(None, "--output", "-o", help="Directory for transactions.csv (default from config)"),
    quote: bool = typer.Option(False, "--quote", help="Quote fields containing commas (default from config)"),
) -> None:
    """Export your transactions to transactions.csv."""
    export_command(output_dir, quote)


@goal_app.command(name="add")
def goal_add(
    text: str,
    amount: str,
    deadline: str,
) -> None:
    """Add a savings goal with a target amount and deadline."""
    add_goal_command(text, amount, deadline)


@goal_app.command(name="list")
def goal_list() -> None:
    """List your savings goals."""
    list_goals_command()


@task_app.command(name="add")
def task_add(text: str) -> None:
    """Add a task."""
    add_task_command(text)


@task_app.command(name="list")
def task_list() -> None:
    """List your tasks."""
    list_tasks_command()


@task_app.command(name="toggle")
def task_toggle(number: int) -> None:
    """Mark a task as done, or undo it."""
    toggle_task_command(number)


@task_app.command(name="delete")
def task_delete(number: int) -> None:
    """Delete a task."""
    delete_task_command(number)


if __name__ == "__main__":
    app()
