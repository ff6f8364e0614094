"""
Notes API — In-Memory Note Repository
=======================================

What:  Process-scoped note store backed by a dictionary keyed by note id.
Why:   The default backend: no database, no driver, nothing to configure.
       Notes vanish when the process exits.
How:   One dict write per add(). The event loop is single-threaded and add()
       never awaits mid-write, so no lock is needed.
"""

import logging
import uuid
from typing import Dict

from notes_api.models.note import Note
from notes_api.repositories.base import NoteRepository

logger = logging.getLogger(__name__)


class InMemoryNoteRepository(NoteRepository):
    """
    Volatile note storage for a single process.

    One instance is shared by every request (see dependencies.py); tests
    create their own instances for isolation.
    """

    def __init__(self) -> None:
        self._notes: Dict[uuid.UUID, Note] = {}

    async def add(self, note: Note) -> Note:
        """
        Store the note under its id and return the same instance.

        Raises:
            ValueError: a note with the same id is already stored.
        """
        if note.id in self._notes:
            raise ValueError(f"A note with id '{note.id}' already exists")
        self._notes[note.id] = note
        logger.debug("Stored note %s in memory (%d total)", note.id, len(self._notes))
        return note

    def count(self) -> int:
        return len(self._notes)
