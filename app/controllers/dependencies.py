"""Common FastAPI dependencies reused across controllers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import HelloRepositoryInterface
from app.application.use_cases.hello_use_cases import SayHelloUseCase
from app.database import get_session
from app.infrastructure.persistence.repositories_sqlalchemy import (
    SQLAlchemyHelloRepository,
)

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_hello_repository(session: SessionDep) -> HelloRepositoryInterface:
    """Build the greeting record store for the current request session."""

    return SQLAlchemyHelloRepository(session)


def get_say_hello_use_case(
    repository: Annotated[HelloRepositoryInterface, Depends(get_hello_repository)],
) -> SayHelloUseCase:
    return SayHelloUseCase(repository)


SayHelloDep = Annotated[SayHelloUseCase, Depends(get_say_hello_use_case)]


__all__ = [
    "get_hello_repository",
    "get_say_hello_use_case",
    "SessionDep",
    "SayHelloDep",
]
