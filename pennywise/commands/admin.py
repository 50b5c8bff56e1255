"""Admin commands for initialization and shared command helpers."""

import sqlite3
import sys
import tomllib
from pathlib import Path
from typing import Any, NoReturn

from rich.console import Console

from pennywise.config import create_default_config, get_config_path, get_setting
from pennywise.domain.models import Rejection, describe_rejection
from pennywise.state import AppState, load_state, save_state
from pennywise.store.schema import database_exists, get_db_path, init_database

console = Console()


def report_config_error(error: tomllib.TOMLDecodeError) -> NoReturn:
    """Print a malformed config error and exit."""
    console.print(f"[red]Config error: {error}[/red]", style="bold")
    console.print(f"[dim]Fix or remove {get_config_path()}[/dim]")
    sys.exit(1)


def resolve_db_path() -> Path:
    """Get the database path, exiting if the config file is malformed."""
    try:
        return get_db_path()
    except tomllib.TOMLDecodeError as e:
        report_config_error(e)


def read_setting(key: str) -> Any:
    """Get a config setting, exiting if the config file is malformed."""
    try:
        return get_setting(key)
    except tomllib.TOMLDecodeError as e:
        report_config_error(e)


def require_database(db_path: Path) -> None:
    """Exit with an error unless the database has been initialized."""
    if not database_exists(db_path):
        console.print("[red]Database not found. Run 'pennywise init' first.[/red]", style="bold")
        console.print(f"[dim]Expected location: {db_path}[/dim]")
        sys.exit(1)


def open_state(db_path: Path) -> AppState:
    """Load application state, exiting on database errors."""
    require_database(db_path)
    try:
        return load_state(db_path)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)


def commit_state(state: AppState, db_path: Path) -> None:
    """Persist application state, exiting on database errors."""
    try:
        save_state(state, db_path)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)


def report_rejection(rejection: Rejection | None) -> None:
    """Tell the user why an input was not accepted."""
    if rejection is not None:
        console.print(f"[yellow]Not added: {describe_rejection(rejection)}[/yellow]")


def run_full_init(db_path: Path, config_path: Path) -> None:
    """Initialize new database and config."""
    console.print(f"[cyan]Initializing database at {db_path}...[/cyan]")
    init_database(db_path)
    console.print("[green]✓[/green] Database initialized")

    console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
    create_default_config(config_path, db_path)
    console.print("[green]✓[/green] Config file created (permissions: 600)")

    console.print("\n[green]Initialization complete![/green]", style="bold")
    console.print(f"[dim]Database: {db_path}[/dim]")
    console.print(f"[dim]Config: {config_path}[/dim]")


def init_command(force: bool = False) -> None:
    """Initialize pennywise database and configuration."""
    db_path = resolve_db_path()
    config_path = get_config_path()

    db_exists = db_path.exists()
    config_exists = config_path.exists()

    try:
        # Guard: refuse to overwrite without force flag
        if not force and (db_exists or config_exists):
            console.print("[red]Initialization failed:[/red]", style="bold")
            if db_exists:
                console.print(f"  Database already exists: {db_path}")
            if config_exists:
                console.print(f"  Config already exists: {config_path}")
            console.print("\n[yellow]Use 'pennywise init --force' to overwrite[/yellow]")
            sys.exit(1)

        if force and db_exists:
            db_path.unlink()

        run_full_init(db_path, config_path)

    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)
