"""Shared pytest fixtures configured to use SQLite in-memory for tests."""

import logging
import os

# keep tests off the real database and out of the logs directory
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_DIR", "")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from simplenotes.api.deps import get_note_store
from simplenotes.config import Settings
from simplenotes.core.repositories import NoteRepository
from simplenotes.core.stores import InMemoryNoteStore, SQLAlchemyNoteStore
from simplenotes.database import Database, get_db_session
from simplenotes.main import app

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)


@pytest.fixture(scope="session")
def test_settings():
    """Settings for testing using SQLite in-memory DB."""
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        debug=True,
        log_dir="",
    )


@pytest.fixture
async def test_database(test_settings):
    """Fresh in-memory database with the notes table, disposed afterwards."""
    engine = create_async_engine(
        test_settings.database_url,
        echo=False,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )
    database = Database(test_settings.database_url, engine=engine)
    await database.create_tables()
    try:
        yield database
    finally:
        await database.dispose()


@pytest.fixture
async def db_session(test_database):
    """Database session per test."""
    async with test_database.session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture(params=["sqlalchemy", "memory"])
def note_store(request, db_session):
    """Note store, once per adapter."""
    if request.param == "memory":
        return InMemoryNoteStore()
    return SQLAlchemyNoteStore(db_session)


@pytest.fixture
def note_repository(note_store):
    """Repository over the parametrized store."""
    return NoteRepository(note_store)


@pytest.fixture
def test_app(note_store, db_session):
    """App with the store and session dependencies pointed at the test database."""

    async def _override_get_db():
        yield db_session

    app.dependency_overrides[get_note_store] = lambda: note_store
    app.dependency_overrides[get_db_session] = _override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app):
    """Create async test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
