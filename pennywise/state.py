"""Application state: the collections and their persistence.

Loads the ledger, goals, tasks and budgets from their slots at startup and
writes all four back after every accepted mutation.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TypeVar

from pennywise.domain.goals import Goal, GoalTracker
from pennywise.domain.ledger import Ledger, Transaction
from pennywise.domain.tasks import Task, TaskList
from pennywise.store.queries import load_slot, save_slots

logger = logging.getLogger(__name__)

TRANSACTIONS_KEY = "transactions"
GOALS_KEY = "goals"
TASKS_KEY = "tasks"
BUDGETS_KEY = "budgets"

T = TypeVar("T")


@dataclass
class AppState:
    """All persisted collections of one session."""

    ledger: Ledger = field(default_factory=Ledger)
    goals: GoalTracker = field(default_factory=GoalTracker)
    tasks: TaskList = field(default_factory=TaskList)
    # Loaded and saved as-is; nothing reads or writes it yet
    budgets: dict[str, Any] = field(default_factory=dict)
    # Stored records that could not be decoded, per slot; written back unchanged
    undecoded: dict[str, list[Any]] = field(default_factory=dict)


def decode_records(
    key: str,
    records: list[Any],
    decode: Callable[[dict[str, Any]], T],
) -> tuple[list[T], list[Any]]:
    """Decode stored records, setting aside the ones that cannot be decoded.

    Args:
        key: Slot name, for log messages.
        records: Raw records from the slot.
        decode: Function building an entity from a record dictionary.

    Returns:
        Tuple of (decoded entities, raw records that failed), both in stored order.
    """
    decoded: list[T] = []
    skipped: list[Any] = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            logger.warning("Skipping %s record %d: not an object", key, index)
            skipped.append(record)
            continue
        try:
            decoded.append(decode(record))
        except (KeyError, ValueError, TypeError) as e:
            logger.warning("Skipping %s record %d: %s", key, index, e)
            skipped.append(record)
    return decoded, skipped


def load_state(db_path: Path | None = None) -> AppState:
    """Restore application state from the store.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Returns:
        AppState with empty collections for absent or malformed slots.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    undecoded: dict[str, list[Any]] = {}

    def decode_slot(key: str, decode: Callable[[dict[str, Any]], T]) -> list[T]:
        decoded, skipped = decode_records(key, load_slot(key, [], db_path), decode)
        if skipped:
            undecoded[key] = skipped
        return decoded

    transactions = decode_slot(TRANSACTIONS_KEY, Transaction.from_dict)
    goals = decode_slot(GOALS_KEY, Goal.from_dict)
    tasks = decode_slot(TASKS_KEY, Task.from_dict)
    budgets = load_slot(BUDGETS_KEY, {}, db_path)

    return AppState(
        ledger=Ledger(transactions),
        goals=GoalTracker(goals),
        tasks=TaskList(tasks),
        budgets=budgets,
        undecoded=undecoded,
    )


def save_state(state: AppState, db_path: Path | None = None) -> None:
    """Write all four collections back to the store.

    Records that could not be decoded at load time are appended after the
    decoded ones of their slot, so they survive unrelated changes.

    Args:
        state: Application state to persist.
        db_path: Path to the database file. If None, uses default location.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    extra = state.undecoded
    save_slots(
        {
            TRANSACTIONS_KEY: [t.to_dict() for t in state.ledger.transactions] + extra.get(TRANSACTIONS_KEY, []),
            GOALS_KEY: [g.to_dict() for g in state.goals.goals] + extra.get(GOALS_KEY, []),
            TASKS_KEY: [t.to_dict() for t in state.tasks.tasks] + extra.get(TASKS_KEY, []),
            BUDGETS_KEY: state.budgets,
        },
        db_path,
    )
