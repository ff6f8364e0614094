"""
Notes API — Dependency Wiring Tests
=====================================

What:  get_note_repository picks the store for the configured backend.
"""

from contextlib import asynccontextmanager

import pytest

from notes_api import dependencies
from notes_api.config import settings
from notes_api.repositories import SqlAlchemyNoteRepository
from notes_api.services.note_service import NoteService


@pytest.mark.asyncio
async def test_memory_backend_yields_shared_repository(monkeypatch):
    monkeypatch.setattr(settings, "storage_backend", "memory")

    first = dependencies.get_note_repository()
    second = dependencies.get_note_repository()

    assert await first.__anext__() is dependencies.memory_repository
    assert await second.__anext__() is dependencies.memory_repository
    await first.aclose()
    await second.aclose()


@pytest.mark.asyncio
async def test_database_backend_yields_session_repository(monkeypatch, sqlite_session):
    @asynccontextmanager
    async def fake_scope():
        yield sqlite_session

    monkeypatch.setattr(settings, "storage_backend", "database")
    monkeypatch.setattr(dependencies, "session_scope", fake_scope)

    gen = dependencies.get_note_repository()
    repository = await gen.__anext__()

    assert isinstance(repository, SqlAlchemyNoteRepository)
    assert repository.session is sqlite_session
    await gen.aclose()


def test_get_note_service_wraps_repository(memory_repository):
    service = dependencies.get_note_service(memory_repository)

    assert isinstance(service, NoteService)
    assert service.repository is memory_repository
