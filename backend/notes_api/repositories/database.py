"""
Notes API — SQLAlchemy Note Repository
========================================

What:  Stores notes through an async SQLAlchemy session.
Why:   Database backend for deployments that need notes to outlive the process.
How:   add() + commit() inside the request's session, so the write is atomic
       and any database fault surfaces inside the creation step, where the
       route turns it into a 500 response. The session dependency
       (database.get_db_session) still rolls back and closes on error.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from notes_api.models.note import Note
from notes_api.repositories.base import NoteRepository

logger = logging.getLogger(__name__)


class SqlAlchemyNoteRepository(NoteRepository):
    """Session-bound note storage; one instance per request."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add(self, note: Note) -> Note:
        """Add the note to the session and commit it in one transaction."""
        self.session.add(note)
        await self.session.commit()
        logger.debug("Committed note %s to database", note.id)
        return note
