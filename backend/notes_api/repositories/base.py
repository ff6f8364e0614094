"""
Notes API — Abstract Note Repository
======================================

What:  Abstract base class defining the persistence contract for notes.
Why:   Lets NoteService stay ignorant of the storage technology, and lets
       tests hand it a double.
How:   Concrete repositories inherit from NoteRepository and implement add().
Who:   Called by NoteService.create_note().
"""

from abc import ABC, abstractmethod

from notes_api.models.note import Note


class NoteRepository(ABC):
    """
    Abstract interface over note storage.

    Contract:
        - add() receives a fully-formed Note (id, title, content, created_at set)
        - add() returns the stored representation, which may be the same object
        - Storage faults propagate unmodified; no retries, single-shot semantics
    """

    @abstractmethod
    async def add(self, note: Note) -> Note:
        """
        Persist a note and return the stored representation.

        Raises:
            Whatever the underlying storage raises. Callers above the route
            boundary must not catch it.
        """
        ...
