"""
Tests for date validation utilities.
"""
from datetime import date, datetime

from src.utils.validators import is_missing, validate_date

def test_validate_date_string():
    """Test parsing ISO date strings."""
    assert validate_date("2024-01-15") == date(2024, 1, 15)
    assert validate_date(" 2024-02-29 ") == date(2024, 2, 29)

def test_validate_date_objects():
    """Test date and datetime inputs."""
    assert validate_date(date(2024, 1, 15)) == date(2024, 1, 15)
    assert validate_date(datetime(2024, 1, 15, 13, 30)) == date(2024, 1, 15)

def test_validate_date_invalid():
    """Test invalid inputs return None."""
    assert validate_date("2023-02-29") is None
    assert validate_date("15/01/2024") is None
    assert validate_date(20240115) is None
    assert validate_date(None) is None

def test_is_missing():
    """Test detection of empty inputs."""
    assert is_missing(None)
    assert is_missing("")
    assert is_missing("  ")
    assert not is_missing("2024-01-15")
    assert not is_missing(date(2024, 1, 15))
