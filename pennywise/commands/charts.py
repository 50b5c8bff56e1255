"""Chart command for viewing spending by category."""

from rich.console import Console

from pennywise.commands.admin import open_state, resolve_db_path
from pennywise.domain.charts import (
    CategoryTotal,
    ChartKind,
    aggregate_by_category,
    build_bar_data,
    build_pie_data,
    calculate_histogram_bar_length,
)
from pennywise.domain.models import format_amount

console = Console()

BAR_WIDTH = 30


def render_bar_chart(points: list[tuple[str, float]]) -> None:
    """Render category totals as horizontal bars."""
    console.print("[bold red]Spending by category:[/bold red]\n")
    max_amount = max((value for _, value in points), default=0.0)

    for name, value in points:
        bar = "█" * calculate_histogram_bar_length(value, max_amount, BAR_WIDTH)
        console.print(f"  {name:12} {format_amount(round(value, 2)):>12} [green]{bar}[/green]")


def render_pie_chart(totals: list[CategoryTotal]) -> None:
    """Render category shares with their slice colours."""
    console.print("[bold red]Spending breakdown:[/bold red]\n")

    for pie_slice in build_pie_data(totals):
        swatch = f"[{pie_slice.color}]●[/]"
        console.print(
            f"  {swatch} {pie_slice.category.value:12} "
            f"{format_amount(round(pie_slice.total, 2)):>12} {pie_slice.share:5.1f}%"
        )


def chart_command(kind: ChartKind = ChartKind.BAR) -> None:
    """Show spending per category as a bar or pie chart."""
    db_path = resolve_db_path()
    state = open_state(db_path)

    totals = aggregate_by_category(state.ledger.transactions)
    grand_total = sum(t.total for t in totals)

    if kind == ChartKind.PIE:
        render_pie_chart(totals)
    else:
        render_bar_chart(build_bar_data(totals))

    console.print(f"\n  [bold]Total expenses:[/bold] {format_amount(round(grand_total, 2))}")
