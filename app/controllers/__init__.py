"""FastAPI routers acting as controllers in the MVC architecture."""

from . import hello

__all__ = ["hello"]
