"""Errors raised by the greeting record store."""


class StorageError(Exception):
    """Base class for record store failures."""


class StorageUnavailable(StorageError):
    """Raised when the database cannot be reached."""


class ConstraintViolation(StorageError):
    """Raised when a row is rejected by a column or check constraint."""
