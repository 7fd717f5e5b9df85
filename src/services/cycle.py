"""
Service module for cycle length derivation.

Cycle lengths are never patched incrementally: after any change to the
collection, every entry's length is re-derived from its chronological
neighbour.

Typical usage:
    entries = recompute(store.load() + [new_entry])
    store.save(entries)
"""
import math
from typing import Iterable, List, Union
from datetime import date, datetime

from src.models.entry import Entry
from src.services.constants import SECONDS_PER_DAY

def _as_seconds(value: date) -> float:
    """Express a date or datetime on a common seconds axis."""
    if isinstance(value, datetime):
        return value.toordinal() * SECONDS_PER_DAY + (
            value - value.replace(hour=0, minute=0, second=0, microsecond=0)
        ).total_seconds()
    return float(value.toordinal() * SECONDS_PER_DAY)

def day_span(start: Union[date, datetime], end: Union[date, datetime]) -> int:
    """
    Count whole days between two dates.

    The absolute difference is rounded up, so any time-of-day skew between
    the two values counts as a full day and argument order does not matter.

    Args:
        start: First date or datetime
        end: Second date or datetime

    Returns:
        Non-negative number of days

    Example:
        >>> day_span(date(2024, 1, 29), date(2024, 1, 1))
        28
    """
    seconds = abs(_as_seconds(end) - _as_seconds(start))
    return math.ceil(seconds / SECONDS_PER_DAY)

def sort_entries(entries: Iterable[Entry]) -> List[Entry]:
    """Sort entries by period date, keeping insertion order for ties."""
    return sorted(entries, key=lambda e: e.period_date)

def recompute(entries: Iterable[Entry]) -> List[Entry]:
    """
    Sort entries and derive each entry's cycle length.

    The earliest entry has no cycle length; every later entry gets the day
    span to the entry before it. Entries sharing a period date get a cycle
    length of 0. Running this on its own output returns an equal list.

    Args:
        entries: Entries in any order

    Returns:
        New list of entries sorted by period date with cycle lengths set
    """
    ordered = sort_entries(entries)
    result = []
    for i, entry in enumerate(ordered):
        if i == 0:
            cycle_length = None
        else:
            cycle_length = day_span(ordered[i - 1].period_date, entry.period_date)
        result.append(entry.with_cycle_length(cycle_length))
    return result
