"""
Service-level exceptions.

This module contains exceptions that can be raised by the entry repository
and the observation stores.
"""

class EntryValidationError(Exception):
    """Base exception for rejected entries. No state is changed when raised."""

    def __init__(self, message: str, field: str = None):
        super().__init__(message)
        self.field = field

class MissingFieldError(EntryValidationError):
    """Raised when a required date is absent."""
    pass

class InvalidDateError(EntryValidationError):
    """Raised when a date is not a valid ISO-8601 calendar date."""
    pass

class InvalidOrderingError(EntryValidationError):
    """Raised when the ovulation date is not strictly after the period date."""
    pass

class StorageError(Exception):
    """Raised when the entry collection could not be persisted."""
    pass
