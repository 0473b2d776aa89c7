"""Timestamp formatting utilities."""

from datetime import date, datetime
from typing import Optional


def now() -> str:
    """Compact timestamp for directory names (e.g., "20260101_120000")."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def to_iso_date(value: Optional[date]) -> Optional[str]:
    """
    Format a date (or datetime) as an ISO 8601 calendar date.

    Args:
        value: date, datetime, or None

    Returns:
        "YYYY-MM-DD" string, or None when value is None

    Examples:
        to_iso_date(date(2022, 1, 1))
        # "2022-01-01"

        to_iso_date(datetime(2022, 1, 1, 15, 30))
        # "2022-01-01"
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()
