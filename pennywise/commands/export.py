"""Export command for writing transactions to a CSV file."""

import logging
import sys
from pathlib import Path

from rich.console import Console

from pennywise.commands.admin import open_state, read_setting, resolve_db_path
from pennywise.domain.export import CSV_MIME_TYPE, EXPORT_FILENAME, export_csv

console = Console()
logger = logging.getLogger(__name__)


def deliver(data: bytes, mime_type: str, filename: str, output_dir: Path) -> Path:
    """Save exported bytes as a named file.

    Args:
        data: File content.
        mime_type: MIME type of the content, for logging.
        filename: Target file name.
        output_dir: Directory to write into (created if missing).

    Returns:
        Path of the written file.

    Raises:
        OSError: If the file cannot be written.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    target = output_dir / filename
    target.write_bytes(data)
    logger.info("Delivered %s (%s, %d bytes)", target, mime_type, len(data))
    return target


def export_command(output_dir: str | None = None, quote: bool = False) -> None:
    """Export all transactions to transactions.csv."""
    db_path = resolve_db_path()
    state = open_state(db_path)

    if output_dir is None:
        output_dir = read_setting("export_dir")
    quote = quote or bool(read_setting("csv_quoting"))

    data = export_csv(state.ledger.transactions, quote=quote)

    try:
        target = deliver(data, CSV_MIME_TYPE, EXPORT_FILENAME, Path(output_dir).expanduser())
    except OSError as e:
        console.print(f"[red]Export failed: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] Exported {len(state.ledger)} transaction(s) to: {target}")
    if not quote and any("," in t.description for t in state.ledger.transactions):
        console.print("[yellow]Some descriptions contain commas; use --quote to keep columns aligned[/yellow]")
