import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import (
    DataError,
    DBAPIError,
    IntegrityError,
    InterfaceError,
    OperationalError,
)
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import HelloRepositoryInterface
from app.domain.exceptions import (
    ConstraintViolation,
    StorageError,
    StorageUnavailable,
)
from app.domain.models import GreetingRecord
from app.models.hello import HelloRecord

logger = logging.getLogger(__name__)

# SQLSTATE classes 22 (data exception) and 23 (integrity constraint violation).
CONSTRAINT_SQLSTATE_CLASSES = frozenset({"22", "23"})


def _sqlstate(exc: DBAPIError) -> Optional[str]:
    """Return the SQLSTATE carried by the driver error, if any.

    asyncpg errors reach SQLAlchemy through an adapter, so the code may sit on
    the adapted error or on the original asyncpg exception it was raised from.
    """

    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None)
    if sqlstate is None:
        sqlstate = getattr(getattr(orig, "__cause__", None), "sqlstate", None)
    return sqlstate


def translate_storage_error(exc: DBAPIError) -> StorageError:
    """Map a SQLAlchemy DBAPI error onto the greeting store's error taxonomy."""

    if isinstance(exc, (IntegrityError, DataError)):
        return ConstraintViolation(str(exc.orig))

    if exc.connection_invalidated or isinstance(exc, (OperationalError, InterfaceError)):
        return StorageUnavailable(str(exc.orig))

    sqlstate = _sqlstate(exc)
    if sqlstate and sqlstate[:2] in CONSTRAINT_SQLSTATE_CLASSES:
        return ConstraintViolation(str(exc.orig))

    return StorageUnavailable(str(exc.orig))


class SQLAlchemyHelloRepository(HelloRepositoryInterface):
    """SQLAlchemy implementation for greeting records"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, name: Optional[str], message: str) -> GreetingRecord:
        db_record = HelloRecord(name=name, message=message)
        try:
            self.session.add(db_record)
            await self.session.commit()
            await self.session.refresh(db_record)
        except DBAPIError as exc:
            await self.session.rollback()
            raise self._storage_error("create", exc) from exc
        except OSError as exc:
            await self.session.rollback()
            logger.error("Greeting store unavailable during create: %s", exc)
            raise StorageUnavailable(str(exc)) from exc
        return GreetingRecord.model_validate(db_record)

    async def get_by_id(self, record_id: int) -> Optional[GreetingRecord]:
        try:
            result = await self.session.execute(
                select(HelloRecord).where(HelloRecord.id == record_id)
            )
        except DBAPIError as exc:
            await self.session.rollback()
            raise self._storage_error("get_by_id", exc) from exc
        except OSError as exc:
            await self.session.rollback()
            logger.error("Greeting store unavailable during get_by_id: %s", exc)
            raise StorageUnavailable(str(exc)) from exc
        db_record = result.scalar_one_or_none()
        return GreetingRecord.model_validate(db_record) if db_record else None

    @staticmethod
    def _storage_error(operation: str, exc: DBAPIError) -> StorageError:
        error = translate_storage_error(exc)
        if isinstance(error, ConstraintViolation):
            logger.warning("Greeting rejected by the database during %s: %s", operation, exc.orig)
        else:
            logger.error("Greeting store unavailable during %s: %s", operation, exc.orig)
        return error
