"""Domain models and types for pennywise.

This package contains the functional core:
- Pure functions and in-memory collections
- No I/O operations
- Easy to test
- Business logic separated from infrastructure
"""

from pennywise.domain.models import AddResult, Amount, Category, DisplayDate, Rejection, TransactionType

__all__ = ["AddResult", "Amount", "Category", "DisplayDate", "Rejection", "TransactionType"]
