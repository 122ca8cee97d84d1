from abc import ABC, abstractmethod
from typing import Optional

from app.domain.models import GreetingRecord


class HelloRepositoryInterface(ABC):
    """Persistence contract for greeting records"""

    @abstractmethod
    async def create(self, name: Optional[str], message: str) -> GreetingRecord:
        ...

    @abstractmethod
    async def get_by_id(self, record_id: int) -> Optional[GreetingRecord]:
        ...
