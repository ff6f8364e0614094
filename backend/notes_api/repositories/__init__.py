# Repositories package init
"""
Notes API — Persistence Gateway Layer
=======================================

What:  Storage abstraction for notes, exposing a single write operation.
Why:   The creation service should not know which storage technology holds
       its notes; swapping memory for a database is a configuration change.

Repository Inventory:
    - NoteRepository (abstract): the add() contract
    - InMemoryNoteRepository: process-scoped dictionary (default backend)
    - SqlAlchemyNoteRepository: async SQLAlchemy session (database backend)

Repositories never catch storage errors. A failed write propagates to the
caller as-is, with no retries.
"""

from notes_api.repositories.base import NoteRepository
from notes_api.repositories.memory import InMemoryNoteRepository
from notes_api.repositories.database import SqlAlchemyNoteRepository

__all__ = ["NoteRepository", "InMemoryNoteRepository", "SqlAlchemyNoteRepository"]
