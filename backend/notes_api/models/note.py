"""
Notes API — Note SQLAlchemy Model
===================================

What:  The Note entity: identifier, title, content, creation time.
Why:   One entity type flows through the whole pipeline. The creation service
       builds it, either repository stores it, and the response schema reads it.
How:   SQLAlchemy declarative model. Instances are plain Python objects until a
       session adds them, so the in-memory repository can hold them too.
Who:   Built by NoteService; stored by the repositories; read by NoteResponse.

Field constraints:
    - id:         UUID, generated server-side, never supplied by the caller
    - title:      required, non-blank, at most TITLE_MAX_LENGTH characters
    - content:    required, non-blank, at most CONTENT_MAX_LENGTH characters
    - created_at: timezone-aware UTC, set once at creation

Column types are dialect-neutral (Uuid, DateTime(timezone=True)) so the same
model works against SQLite and PostgreSQL.
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from notes_api.database import Base

TITLE_MAX_LENGTH = 100
CONTENT_MAX_LENGTH = 5000


class Note(Base):
    """
    A user note. Immutable after construction; never deleted.

    Lifecycle:
        1. Constructed by NoteService.create_note() with a fresh uuid4 and UTC now
        2. Handed to a NoteRepository, which owns it from then on
    """

    __tablename__ = "notes"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        comment="Server-generated unique identifier",
    )

    title: Mapped[str] = mapped_column(
        String(TITLE_MAX_LENGTH),
        nullable=False,
        comment="Note title (max 100 characters)",
    )

    content: Mapped[str] = mapped_column(
        String(CONTENT_MAX_LENGTH),
        nullable=False,
        comment="Note body (max 5000 characters)",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="When this note was created (UTC)",
    )

    def __repr__(self) -> str:
        """Developer-friendly string representation for debugging."""
        return f"<Note(id={self.id}, created_at='{self.created_at}')>"
