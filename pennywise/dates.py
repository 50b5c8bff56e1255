"""Date utilities for pennywise.

Pure functions for display dates and period matching.
"""

from datetime import date, datetime

from pennywise.domain.models import DisplayDate

DISPLAY_DATE_FORMAT = "%d/%m/%Y"


def format_display_date(day: date) -> DisplayDate:
    """Format a date the way transactions store it.

    Args:
        day: Calendar date.

    Returns:
        Zero-padded day/month/year string (e.g., "05/01/2025").
    """
    return DisplayDate(day.strftime(DISPLAY_DATE_FORMAT))


def month_to_period(month: str) -> str:
    """Convert a YYYY-MM month into the period substring used by filters.

    Display dates are dd/mm/yyyy, so a month picker value never matches
    them directly; "2025-01" becomes "01/2025".

    Args:
        month: Month in YYYY-MM format.

    Returns:
        Period substring in mm/yyyy form.

    Raises:
        ValueError: If month is not a valid YYYY-MM value.
    """
    dt = datetime.strptime(month, "%Y-%m")
    return dt.strftime("%m/%Y")
