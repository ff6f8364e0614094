"""
Notes API — Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Reusable test infrastructure: isolated stores, mock service, API client.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Overview:
    ├── note_factory: Builds fully-formed Note entities
    ├── memory_repository: Fresh InMemoryNoteRepository per test
    ├── mock_note_service: NoteService double with an AsyncMock create_note
    ├── sqlite_session: AsyncSession on a throwaway in-memory SQLite database
    ├── test_client: HTTPX AsyncClient against the real app + fresh memory store
    └── mocked_client: HTTPX AsyncClient whose NoteService is mock_note_service
"""

import os
import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Override settings for testing BEFORE any app imports
os.environ["ENVIRONMENT"] = "development"
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["LOG_LEVEL"] = "WARNING"

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from notes_api.database import Base  # noqa: E402
from notes_api.models.note import Note  # noqa: E402
from notes_api.repositories import InMemoryNoteRepository  # noqa: E402
from notes_api.services.note_service import NoteService  # noqa: E402


def make_note(title: str = "Groceries", content: str = "Milk, eggs, bread") -> Note:
    """Build a fully-formed Note the way the creation service does."""
    return Note(
        id=uuid.uuid4(),
        title=title,
        content=content,
        created_at=datetime.now(timezone.utc),
    )


@pytest.fixture
def note_factory():
    """Returns make_note, for tests that need ready-made Note entities."""
    return make_note


@pytest.fixture
def memory_repository():
    """A fresh, empty in-memory store for each test."""
    return InMemoryNoteRepository()


@pytest.fixture
def mock_note_service():
    """
    A NoteService double.

    create_note echoes its arguments back as a Note, like the real service
    does, so route tests can assert on the response body.
    """
    service = MagicMock(spec=NoteService)

    async def _create(title: str, content: str) -> Note:
        return make_note(title=title, content=content)

    service.create_note = AsyncMock(side_effect=_create)
    return service


@pytest_asyncio.fixture
async def sqlite_session():
    """
    An AsyncSession on a private in-memory SQLite database with the notes
    table created. StaticPool keeps the single connection (and so the
    database) alive for the whole test.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session

    await engine.dispose()


@pytest_asyncio.fixture
async def test_client(memory_repository):
    """
    HTTPX AsyncClient talking to the real app, backed by this test's own
    in-memory store.

    Usage:
        async def test_create(test_client):
            response = await test_client.post("/api/notes", json={...})
            assert response.status_code == 201
    """
    from notes_api.dependencies import get_note_repository
    from notes_api.main import app

    async def _repository():
        yield memory_repository

    app.dependency_overrides[get_note_repository] = _repository
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def mocked_client(mock_note_service):
    """HTTPX AsyncClient whose route receives mock_note_service."""
    from notes_api.dependencies import get_note_service
    from notes_api.main import app

    app.dependency_overrides[get_note_service] = lambda: mock_note_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
