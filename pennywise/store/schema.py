"""Database initialization and schema management."""

import sqlite3
from pathlib import Path

from pennywise.config import get_setting

DEFAULT_DB_PATH = Path.home() / ".pennywise" / "pennywise.db"


def get_db_path() -> Path:
    """Get the database path, honouring the 'db_path' config setting."""
    configured = get_setting("db_path")
    if configured:
        return Path(configured).expanduser()
    return DEFAULT_DB_PATH


def database_exists(db_path: Path | None = None) -> bool:
    """Check whether the database file has been created."""
    if db_path is None:
        db_path = get_db_path()
    return db_path.exists()


def init_database(db_path: Path | None = None) -> None:
    """Initialize the database with the required schema.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Raises:
        sqlite3.Error: If database initialization fails.
    """
    if db_path is None:
        db_path = get_db_path()

    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(db_path)
    cursor = conn.cursor()

    try:
        # One row per named slot, each holding a JSON document
        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS slots (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            )
        """
        )

        conn.commit()

    except sqlite3.Error:
        conn.rollback()
        raise
    finally:
        conn.close()
