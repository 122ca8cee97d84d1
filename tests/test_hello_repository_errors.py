"""Unit tests for how the greeting store classifies PostgreSQL driver errors."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import asyncpg
import pytest
from sqlalchemy.exc import DBAPIError

from app.domain.exceptions import ConstraintViolation, StorageUnavailable
from app.infrastructure.persistence.repositories_sqlalchemy import (
    SQLAlchemyHelloRepository,
)


class AdaptedDriverError(Exception):
    """Stands in for the error SQLAlchemy's asyncpg adapter raises."""


def _wrapped(driver_error: Exception, *, copy_sqlstate: bool = True, **kwargs) -> DBAPIError:
    """Wrap an asyncpg error the way the asyncpg dialect hands it to callers."""

    adapted = AdaptedDriverError(f"{type(driver_error).__name__}: {driver_error}")
    if copy_sqlstate:
        adapted.sqlstate = getattr(driver_error, "sqlstate", None)
    adapted.__cause__ = driver_error
    return DBAPIError("INSERT INTO hellos ...", {}, adapted, **kwargs)


def _failing_session(error: Exception, *, on: str = "commit") -> AsyncMock:
    session = AsyncMock()
    session.add = MagicMock()
    getattr(session, on).side_effect = error
    return session


@pytest.mark.asyncio
async def test_truncated_name_is_a_constraint_violation():
    error = _wrapped(
        asyncpg.exceptions.StringDataRightTruncationError(
            "value too long for type character varying(100)"
        )
    )
    session = _failing_session(error)

    with pytest.raises(ConstraintViolation) as exc_info:
        await SQLAlchemyHelloRepository(session).create("x" * 101, "Hello " + "x" * 101 + "!")

    assert exc_info.value.__cause__ is error
    session.rollback.assert_awaited_once()


@pytest.mark.asyncio
async def test_sqlstate_is_read_from_the_original_asyncpg_error():
    error = _wrapped(
        asyncpg.exceptions.StringDataRightTruncationError("value too long"),
        copy_sqlstate=False,
    )
    session = _failing_session(error)

    with pytest.raises(ConstraintViolation):
        await SQLAlchemyHelloRepository(session).create("x" * 101, "Hello!")

    session.rollback.assert_awaited_once()


@pytest.mark.asyncio
async def test_null_message_is_a_constraint_violation():
    error = _wrapped(
        asyncpg.exceptions.NotNullViolationError(
            'null value in column "message" violates not-null constraint'
        )
    )
    session = _failing_session(error)

    with pytest.raises(ConstraintViolation):
        await SQLAlchemyHelloRepository(session).create("Alice", None)

    session.rollback.assert_awaited_once()


@pytest.mark.asyncio
async def test_lost_connection_is_storage_unavailable():
    error = _wrapped(
        asyncpg.exceptions.ConnectionDoesNotExistError(
            "connection was closed in the middle of operation"
        ),
        connection_invalidated=True,
    )
    session = _failing_session(error)

    with pytest.raises(StorageUnavailable):
        await SQLAlchemyHelloRepository(session).create("Alice", "Hello Alice!")

    session.rollback.assert_awaited_once()


@pytest.mark.asyncio
async def test_refused_connection_is_storage_unavailable():
    session = _failing_session(ConnectionRefusedError(111, "Connection refused"))

    with pytest.raises(StorageUnavailable):
        await SQLAlchemyHelloRepository(session).create("Alice", "Hello Alice!")

    session.rollback.assert_awaited_once()


@pytest.mark.asyncio
async def test_get_by_id_rolls_back_when_storage_is_unavailable():
    error = _wrapped(
        asyncpg.exceptions.ConnectionDoesNotExistError("connection was closed"),
        connection_invalidated=True,
    )
    session = _failing_session(error, on="execute")

    with pytest.raises(StorageUnavailable):
        await SQLAlchemyHelloRepository(session).get_by_id(1)

    session.rollback.assert_awaited_once()
