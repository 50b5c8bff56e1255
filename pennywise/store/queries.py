"""Slot queries: named JSON values stored in SQLite."""

import json
import logging
import sqlite3
from pathlib import Path
from typing import Any

from pennywise.store.schema import get_db_path

logger = logging.getLogger(__name__)


def _connect(db_path: Path | None = None) -> sqlite3.Connection:
    """Create a database connection with row factory.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Database connection with row_factory configured.
    """
    if db_path is None:
        db_path = get_db_path()
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def get_slot(key: str, db_path: Path | None = None) -> str | None:
    """Get the raw JSON text stored under a key.

    Args:
        key: Slot name.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Stored JSON text, or None if the slot is empty.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    conn = _connect(db_path)
    try:
        row = conn.execute("SELECT value FROM slots WHERE key = ?", (key,)).fetchone()
        return row["value"] if row else None
    finally:
        conn.close()


def set_slots(values: dict[str, str], db_path: Path | None = None) -> None:
    """Write raw JSON text to several slots in one transaction.

    Args:
        values: Dictionary of slot name to JSON text.
        db_path: Path to the database file. If None, uses default location.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    conn = _connect(db_path)
    try:
        # Commits on success, rolls back on error
        with conn:
            conn.executemany(
                "INSERT INTO slots (key, value) VALUES (?, ?) ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                list(values.items()),
            )
    finally:
        conn.close()


def load_slot(key: str, default: Any, db_path: Path | None = None) -> Any:
    """Load and decode a slot, falling back to a default.

    The default is returned when the slot is empty, holds malformed JSON,
    or holds a JSON value of a different type than the default.

    Args:
        key: Slot name.
        default: Value returned when nothing usable is stored (e.g., [] or {}).
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Decoded value or the default.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    raw = get_slot(key, db_path)
    if raw is None:
        return default

    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning("Slot '%s' holds malformed JSON, using default: %s", key, e)
        return default

    if not isinstance(value, type(default)):
        logger.warning(
            "Slot '%s' holds %s, expected %s; using default",
            key,
            type(value).__name__,
            type(default).__name__,
        )
        return default

    return value


def save_slot(key: str, value: Any, db_path: Path | None = None) -> None:
    """Encode a value as JSON and store it under a key.

    Args:
        key: Slot name.
        value: JSON-serializable value.
        db_path: Path to the database file. If None, uses default location.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    save_slots({key: value}, db_path)


def save_slots(values: dict[str, Any], db_path: Path | None = None) -> None:
    """Encode several values as JSON and store them together.

    Args:
        values: Dictionary of slot name to JSON-serializable value.
        db_path: Path to the database file. If None, uses default location.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    encoded = {key: json.dumps(value, ensure_ascii=False) for key, value in values.items()}
    set_slots(encoded, db_path)
    logger.debug("Saved slots: %s", ", ".join(encoded))
