"""
QuirkNotes Backend — Note SQLAlchemy Model
============================================

What:  ORM model representing the `notes` table.
Who:   Used by NoteService for CRUD operations and by Alembic for schema management.

Table Design:
    - UUID primary key: generated in Python (uuid4) so every backend,
      including SQLite in tests, assigns ids the same way; never reused
    - title / content: unbounded TEXT
    - color: optional CSS hex color; NULL means "no color chosen"
    - created_at: UTC, used to list notes in insertion order
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from quirknotes.database import Base


class Note(Base):
    """
    A short text note.

    Lifecycle:
        1. Created by POST /postNote (id assigned on flush)
        2. Mutated by PATCH /patchNote/{id} and PATCH /updateNoteColor/{id}
        3. Removed by DELETE /deleteNote/{id} or DELETE /deleteAllNotes
    """

    __tablename__ = "notes"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique identifier",
    )

    title: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Note title",
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Note body",
    )

    # Longest accepted form is #RRGGBBAA; 32 leaves room for other notations
    color: Mapped[Optional[str]] = mapped_column(
        String(32),
        nullable=True,
        default=None,
        comment="Optional CSS hex color, e.g. #FF0000",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        comment="When this note was created (UTC)",
    )

    __table_args__ = (
        Index("idx_notes_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r}, color={self.color!r})>"
