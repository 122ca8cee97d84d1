"""Insert sample greetings for local development.

Usage::

    python -m scripts.seed
"""

from __future__ import annotations

import asyncio
import logging
import sys

from app.config.settings import settings
from app.database import Database
from app.domain.models import GreetingRecord
from app.domain.services import GreetingDomainService
from app.infrastructure.persistence.repositories_sqlalchemy import (
    SQLAlchemyHelloRepository,
)

logger = logging.getLogger("scripts.seed")

SEED_NAMES = ("Alice", "Bob")


async def seed(database: Database) -> list[GreetingRecord]:
    """Persist one greeting per seed name and return the stored records."""

    records: list[GreetingRecord] = []
    async with database.session_scope() as session:
        repository = SQLAlchemyHelloRepository(session)
        for name in SEED_NAMES:
            message = GreetingDomainService.build_message(name)
            records.append(await repository.create(name, message))
    return records


async def _run() -> None:
    database = Database(settings.database, debug=settings.debug)
    try:
        if settings.database.create_tables:
            await database.init_models()
        records = await seed(database)
        logger.info("Seed complete (%d records)", len(records))
    finally:
        await database.dispose()


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    try:
        asyncio.run(_run())
    except Exception:
        logger.exception("Seed failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
