import logging
from typing import Optional

from app.application.interfaces import HelloRepositoryInterface
from app.domain.models import HelloResult
from app.domain.services import GreetingDomainService

logger = logging.getLogger(__name__)


class SayHelloUseCase:
    """Use case to greet a caller and persist the greeting"""

    def __init__(self, repository: HelloRepositoryInterface):
        self.repository = repository

    async def execute(self, name: Optional[str] = None) -> HelloResult:
        message = GreetingDomainService.build_message(name)
        saved = await self.repository.create(name, message)
        logger.debug("Stored greeting %s", saved.id)
        return HelloResult(id=saved.id, name=saved.name, message=saved.message)
