"""Database store layer - provides persistence for the application.

This module re-exports all public database functions for easy importing.
"""

from pennywise.store.queries import get_slot, load_slot, save_slot, save_slots, set_slots
from pennywise.store.schema import database_exists, get_db_path, init_database

__all__ = [
    # Schema
    "database_exists",
    "get_db_path",
    "init_database",
    # Queries
    "get_slot",
    "load_slot",
    "save_slot",
    "save_slots",
    "set_slots",
]
