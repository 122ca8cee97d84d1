"""Pydantic schemas used as views in the MVC architecture."""

from .common import ErrorResponse
from .hello import HelloResponse

__all__ = [
    "ErrorResponse",
    "HelloResponse",
]
