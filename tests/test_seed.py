"""Tests for the development seed script."""

from __future__ import annotations

import pytest

from app.infrastructure.persistence.repositories_sqlalchemy import (
    SQLAlchemyHelloRepository,
)
from scripts.seed import seed


@pytest.mark.asyncio
async def test_seed_inserts_alice_and_bob(database):
    records = await seed(database)

    assert [(r.name, r.message) for r in records] == [
        ("Alice", "Hello Alice!"),
        ("Bob", "Hello Bob!"),
    ]

    async with database.session_scope() as session:
        repository = SQLAlchemyHelloRepository(session)
        for record in records:
            stored = await repository.get_by_id(record.id)
            assert stored is not None
            assert stored.message == record.message
