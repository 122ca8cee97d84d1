"""Shared fixtures: every test gets its own SQLite database file."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path
from typing import AsyncIterator, Iterator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

# app.main builds a module-level app on import; keep it off PostgreSQL.
_IMPORT_DIR = Path(tempfile.mkdtemp(prefix="hello-api-tests-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_IMPORT_DIR / 'import.db'}"
os.environ["LOG_FILE"] = str(_IMPORT_DIR / "app.log")

from app.config.settings import DatabaseConfig, Settings  # noqa: E402
from app.database import Database  # noqa: E402
from app.main import create_app  # noqa: E402


def _sqlite_config(path: Path) -> DatabaseConfig:
    return DatabaseConfig(url_override=f"sqlite+aiosqlite:///{path}")


@pytest_asyncio.fixture
async def database(tmp_path: Path) -> AsyncIterator[Database]:
    """A freshly created, empty greeting store."""

    db = Database(_sqlite_config(tmp_path / "store.db"))
    await db.init_models()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def session(database: Database) -> AsyncIterator[AsyncSession]:
    async with database.session_scope() as db_session:
        yield db_session


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    return Settings(
        database=_sqlite_config(tmp_path / "api.db"),
        log_file=str(tmp_path / "logs" / "app.log"),
    )


@pytest.fixture
def test_app(test_settings: Settings):
    return create_app(test_settings)


@pytest.fixture
def client(test_app) -> Iterator[TestClient]:
    """Test client with the application lifespan (table creation) running."""

    with TestClient(test_app) as test_client:
        yield test_client
    test_app.dependency_overrides.clear()
