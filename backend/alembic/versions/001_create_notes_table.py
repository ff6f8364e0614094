"""Create notes table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `notes` table for the database storage backend.
How:   Dialect-neutral column types, matching notes_api/models/note.py.

Rollback: downgrade() drops the table entirely (all notes are lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "notes",
        sa.Column(
            "id",
            sa.Uuid(),
            nullable=False,
            comment="Server-generated unique identifier",
        ),
        sa.Column(
            "title",
            sa.String(100),
            nullable=False,
            comment="Note title (max 100 characters)",
        ),
        sa.Column(
            "content",
            sa.String(5000),
            nullable=False,
            comment="Note body (max 5000 characters)",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="When this note was created (UTC)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    """Drop the notes table. Destructive: every stored note is lost."""
    op.drop_table("notes")
