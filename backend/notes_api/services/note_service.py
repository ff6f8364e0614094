"""
Notes API — Note Service (Creation Service)
=============================================

What:  Builds new notes: assigns identity and timestamp, then stores them.
Why:   Keeps identity/time assignment out of the route and out of storage.
How:   Constructs a Note with uuid4() and the current UTC time, hands it to the
       injected NoteRepository, and returns whatever the repository returns.
Who:   Called by the POST /api/notes route handler.

Contract:
    The service trusts its caller: title and content arrive already validated
    and are stored exactly as given. It has no error conditions of its own;
    repository errors propagate unchanged.
"""

import logging
import uuid
from datetime import datetime, timezone

from notes_api.models.note import Note
from notes_api.repositories.base import NoteRepository

logger = logging.getLogger(__name__)


class NoteService:
    """
    Stateless creation service around a single repository.

    A new instance is built per request by dependencies.get_note_service().
    """

    def __init__(self, repository: NoteRepository) -> None:
        self.repository = repository

    async def create_note(self, title: str, content: str) -> Note:
        """
        Create and persist a new note.

        Args:
            title: Validated title, stored untrimmed
            content: Validated content, stored untrimmed

        Returns:
            The Note returned by the repository (not a second copy).

        Raises:
            Anything the repository raises.
        """
        note = Note(
            id=uuid.uuid4(),
            title=title,
            content=content,
            created_at=datetime.now(timezone.utc),
        )
        stored = await self.repository.add(note)
        logger.info("Note created: %s", stored.id)
        return stored
