"""
Notes API — FastAPI Dependencies
==================================

What:  Wires the repository and service for each request.
Why:   Routes declare what they need (`Depends(get_note_service)`) and stay
       ignorant of which storage backend is configured.
How:   get_note_repository() yields the process-wide in-memory repository, or a
       SQLAlchemy repository bound to a fresh request session.

Tests replace either provider through `app.dependency_overrides`.
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends

from notes_api.config import settings
from notes_api.database import session_scope
from notes_api.repositories import (
    InMemoryNoteRepository,
    NoteRepository,
    SqlAlchemyNoteRepository,
)
from notes_api.services.note_service import NoteService

# Shared by every request in this process
memory_repository = InMemoryNoteRepository()


async def get_note_repository() -> AsyncGenerator[NoteRepository, None]:
    """Yield the repository for the configured storage backend."""
    if settings.storage_backend == "memory":
        yield memory_repository
        return

    async with session_scope() as session:
        yield SqlAlchemyNoteRepository(session)


def get_note_service(
    repository: Annotated[NoteRepository, Depends(get_note_repository)],
) -> NoteService:
    return NoteService(repository)
