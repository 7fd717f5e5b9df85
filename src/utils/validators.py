"""
Date validation utilities for entry input.
"""
from typing import Optional, Union
from datetime import date, datetime

DateInput = Union[str, date, None]

def is_missing(value: DateInput) -> bool:
    """Check whether a date input was left empty."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()

def validate_date(value: DateInput) -> Optional[date]:
    """
    Validate and parse a date input.

    Args:
        value: Date string in YYYY-MM-DD format, or a date/datetime object

    Returns:
        Date object if valid, None otherwise
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError:
        return None
