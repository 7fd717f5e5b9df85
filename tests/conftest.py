"""
Pytest configuration and shared fixtures.
"""
import pytest
from datetime import date
from typing import List

from src.models.entry import Entry
from src.services.repository import EntryRepository
from src.utils.storage import InMemoryStore

SCENARIO_A = [
    ("2024-01-01", "2024-01-15"),
    ("2024-01-29", "2024-02-12"),
    ("2024-02-26", "2024-03-12"),
]

@pytest.fixture
def store() -> InMemoryStore:
    """Create an empty in-memory store."""
    return InMemoryStore()

@pytest.fixture
def repository(store) -> EntryRepository:
    """Create a repository over an empty in-memory store."""
    return EntryRepository(store)

@pytest.fixture
def scenario_a_repository(repository) -> EntryRepository:
    """Create a repository holding three entries 28 days apart."""
    for period_date, ovulation_date in SCENARIO_A:
        repository.add(period_date, ovulation_date)
    return repository

@pytest.fixture
def unordered_entries() -> List[Entry]:
    """Create entries recorded out of chronological order."""
    return [
        Entry(id=1, period_date=date(2024, 2, 26), ovulation_date=date(2024, 3, 12)),
        Entry(id=2, period_date=date(2024, 1, 1), ovulation_date=date(2024, 1, 15)),
        Entry(id=3, period_date=date(2024, 1, 29), ovulation_date=date(2024, 2, 12)),
    ]

@pytest.fixture
def sample_records() -> list:
    """Create persisted records in their stored camelCase shape."""
    return [
        {"id": 1, "periodDate": "2024-01-01", "ovulationDate": "2024-01-15", "cycleLength": None},
        {"id": 2, "periodDate": "2024-01-29", "ovulationDate": "2024-02-12", "cycleLength": 28},
    ]
