"""Task commands (add, list, toggle, delete).

Task numbers shown to the user are 1-based; the task list is 0-based.
"""

from rich.console import Console
from rich.table import Table

from pennywise.commands.admin import commit_state, open_state, report_rejection, resolve_db_path

console = Console()


def add_task_command(text: str) -> None:
    """Add a task."""
    db_path = resolve_db_path()
    state = open_state(db_path)

    result = state.tasks.add(text)
    if result.entity is None:
        report_rejection(result.rejection)
        return

    commit_state(state, db_path)
    console.print(f"[green]✓[/green] Task added: {result.entity.text}")


def list_tasks_command() -> None:
    """List tasks with their status."""
    db_path = resolve_db_path()
    state = open_state(db_path)

    if not state.tasks.tasks:
        console.print("[yellow]No tasks yet[/yellow]")
        return

    table = Table(title=f"Tasks ({len(state.tasks)})")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Task", style="white")
    table.add_column("Status", justify="center")

    for idx, task in enumerate(state.tasks.tasks, 1):
        text = f"[strike dim]{task.text}[/strike dim]" if task.completed else task.text
        table.add_row(str(idx), text, "✓" if task.completed else "○")

    console.print(table)


def toggle_task_command(number: int) -> None:
    """Mark a task done, or not done again."""
    db_path = resolve_db_path()
    state = open_state(db_path)

    if not state.tasks.toggle(number - 1):
        console.print(f"[yellow]No task #{number}[/yellow]")
        return

    commit_state(state, db_path)
    task = state.tasks.tasks[number - 1]
    status = "done" if task.completed else "not done"
    console.print(f"[green]✓[/green] Task #{number} marked {status}: {task.text}")


def delete_task_command(number: int) -> None:
    """Delete a task."""
    db_path = resolve_db_path()
    state = open_state(db_path)

    if not 1 <= number <= len(state.tasks):
        console.print(f"[yellow]No task #{number}[/yellow]")
        return

    text = state.tasks.tasks[number - 1].text
    state.tasks.delete(number - 1)
    commit_state(state, db_path)
    console.print(f"[green]✓[/green] Task #{number} deleted: {text}")
