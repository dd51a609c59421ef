# errors.py
"""
Exceptions shared by the store, the daily aggregator and the weight log.

Calendar outcomes such as "not started" or "completed" are not errors; they
are returned as `program_calendar.Status` values.
"""


class StorageError(Exception):
    """The storage backend could not complete a read or write."""


class ValidationError(ValueError):
    """User input was rejected before it reached the store."""
