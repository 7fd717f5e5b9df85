"""
Entry repository service.

This module provides the public surface of the tracker: adding, removing,
listing and clearing recorded entries, and projecting future cycles from
them. Every mutation reads the whole collection from the store, recomputes
cycle lengths over it, and writes the whole collection back.

Typical usage:
    repository = EntryRepository(InMemoryStore())
    repository.add("2024-01-01", "2024-01-15")
    for entry in repository.list():
        print(entry.period_date, entry.cycle_length)
    result = repository.predict()
"""
import threading
import time
from typing import List, Optional
from datetime import date
from aws_lambda_powertools import Logger

from src.models.entry import Entry
from src.models.prediction import PredictionResult
from src.services.cycle import recompute, sort_entries
from src.services.exceptions import InvalidDateError, InvalidOrderingError, MissingFieldError
from src.services.prediction import predict
from src.utils.storage import ObservationStore
from src.utils.validators import DateInput, is_missing, validate_date

logger = Logger()

class EntryRepository:
    """Service for managing one collection of recorded entries."""

    def __init__(self, store: ObservationStore):
        """
        Initialize repository.

        Args:
            store: Store holding the entry collection
        """
        self.store = store
        self._lock = threading.RLock()

    def _parse_date(self, value: DateInput, field: str) -> date:
        if is_missing(value):
            raise MissingFieldError(f"Missing required date: {field}", field=field)
        parsed = validate_date(value)
        if parsed is None:
            raise InvalidDateError(f"Invalid date for {field}: {value!r}. Use YYYY-MM-DD", field=field)
        return parsed

    def _next_id(self, entries: List[Entry]) -> int:
        """
        Derive an entry ID from the current time in milliseconds.

        IDs stay strictly increasing within the collection even when two
        entries are added within the same millisecond.
        """
        candidate = int(time.time() * 1000)
        if entries:
            candidate = max(candidate, max(e.id for e in entries) + 1)
        return candidate

    def add(self, period_date: DateInput, ovulation_date: DateInput) -> Entry:
        """
        Record a new entry.

        Args:
            period_date: Period start as YYYY-MM-DD string or date
            ovulation_date: Ovulation date as YYYY-MM-DD string or date

        Returns:
            The stored entry with its cycle length derived

        Raises:
            MissingFieldError: If either date is absent
            InvalidDateError: If either date cannot be parsed
            InvalidOrderingError: If ovulation is not after the period start
            StorageError: If the collection could not be read or written
        """
        period = self._parse_date(period_date, "period_date")
        ovulation = self._parse_date(ovulation_date, "ovulation_date")

        if ovulation <= period:
            logger.warning("Rejected entry with ovulation not after period", extra={
                "period_date": period.isoformat(),
                "ovulation_date": ovulation.isoformat()
            })
            raise InvalidOrderingError(
                "Ovulation date should be after period start date",
                field="ovulation_date"
            )

        with self._lock:
            entries = self.store.read()
            entry = Entry(
                id=self._next_id(entries),
                period_date=period,
                ovulation_date=ovulation
            )
            entries = recompute(entries + [entry])
            self.store.save(entries)

        logger.info("Added entry", extra={
            "entry_id": entry.id,
            "period_date": period.isoformat(),
            "count": len(entries)
        })
        return next(e for e in entries if e.id == entry.id)

    def remove(self, entry_id: int) -> None:
        """
        Remove an entry by ID.

        Removing an ID that is not in the collection leaves it unchanged.

        Args:
            entry_id: ID of the entry to remove

        Raises:
            StorageError: If the collection could not be read or written
        """
        with self._lock:
            entries = self.store.read()
            remaining = [e for e in entries if e.id != entry_id]
            self.store.save(recompute(remaining))

        if len(remaining) == len(entries):
            logger.info("Entry to remove not found", extra={"entry_id": entry_id})
        else:
            logger.info("Removed entry", extra={
                "entry_id": entry_id,
                "count": len(remaining)
            })

    def clear(self) -> None:
        """
        Remove every entry from the collection.

        Raises:
            StorageError: If the stored collection could not be removed
        """
        with self._lock:
            self.store.clear()
        logger.info("Cleared all entries")

    def get(self, entry_id: int) -> Optional[Entry]:
        """Get an entry by ID, or None if it is not recorded."""
        return next((e for e in self.store.load() if e.id == entry_id), None)

    def list(self) -> List[Entry]:
        """List entries sorted by period date."""
        return sort_entries(self.store.load())

    def predict(self) -> PredictionResult:
        """Project the next twelve cycles from the recorded entries."""
        return predict(self.store.load())
