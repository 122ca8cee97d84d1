"""SQLAlchemy models for the MVC architecture."""

from .base import Base
from .hello import HelloRecord  # noqa: F401

__all__ = [
    "Base",
    "HelloRecord",
]
