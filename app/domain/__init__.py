"""Domain models and errors."""

from .exceptions import ConstraintViolation, StorageError, StorageUnavailable
from .models import GreetingRecord, HelloResult

__all__ = [
    "GreetingRecord",
    "HelloResult",
    "StorageError",
    "StorageUnavailable",
    "ConstraintViolation",
]
