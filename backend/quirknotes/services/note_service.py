"""
QuirkNotes Backend — Note Service (Business Logic)
===================================================

What:  All note operations: create, list, patch, recolor, delete one, delete all.
Why:   Keeps business rules (partial updates, color format, idempotent delete)
       independent of HTTP concerns.
Who:   Called by route handlers in routes/notes.py.

Design Decision:
    NoteService is stateless. It receives the request's AsyncSession on every
    call. Mutations commit before returning, so a write is durable before its
    response is sent; get_db_session rolls back whatever a failing request
    left pending.

Error Handling Strategy:
    Application errors (ValidationError, NotFoundError) propagate unchanged.
    Anything else raised by the store is logged and wrapped in DatabaseError,
    which the global handler turns into a generic 500.
"""

import logging
import re
from typing import Optional
from uuid import UUID

from sqlalchemy import asc, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from quirknotes.exceptions import DatabaseError, NotFoundError, QuirkNotesError, ValidationError
from quirknotes.models.note import Note
from quirknotes.schemas.note import (
    MessageResponse,
    NoteColorUpdate,
    NoteCreate,
    NoteCreatedResponse,
    NoteListResponse,
    NotePatch,
    NoteResponse,
)

logger = logging.getLogger(__name__)

# #RGB, #RGBA, #RRGGBB, #RRGGBBAA
HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def validate_color(color: str) -> str:
    """Return `color` unchanged if it is a CSS hex color, else raise ValidationError."""
    if not HEX_COLOR_RE.match(color):
        raise ValidationError(
            message=f"Color '{color}' is not a hex color like #FF0000",
            field="color",
            context={"value": color},
        )
    return color


class NoteService:
    """
    Business logic layer for note operations.

    Responsibilities:
        - create_note(): insert a note and report its generated id
        - list_notes(): every note in insertion order
        - patch_note(): partial title/content update
        - update_note_color(): validated color update
        - delete_note(): idempotent single delete
        - delete_all_notes(): empty the store
    """

    async def create_note(self, db: AsyncSession, payload: NoteCreate) -> NoteCreatedResponse:
        """
        Insert a new note.

        A color that is not supplied is stored as NULL, so it is absent
        from list output rather than serialized as an empty value.

        Raises:
            ValidationError: color supplied but not a hex color (→ 400)
            DatabaseError: insert failed (→ 500)
        """
        if payload.color is not None:
            validate_color(payload.color)

        try:
            note = Note(
                title=payload.title,
                content=payload.content,
                color=payload.color,
            )
            db.add(note)
            await db.flush()  # Assigns the id
            await db.commit()
            logger.info("Note created: %s", note.id)
            return NoteCreatedResponse(inserted_id=note.id)

        except Exception as e:
            logger.error("Database error creating note: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the note. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def list_notes(self, db: AsyncSession) -> NoteListResponse:
        """Return every stored note, oldest first."""
        try:
            result = await db.execute(select(Note).order_by(asc(Note.created_at)))
            notes = list(result.scalars().all())
        except Exception as e:
            logger.error("Database error listing notes: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve notes. Please try again.",
                context={"error_type": type(e).__name__},
            )

        return NoteListResponse(
            response=[
                NoteResponse(
                    id=note.id,
                    title=note.title,
                    content=note.content,
                    color=note.color,
                )
                for note in notes
            ]
        )

    async def delete_note(self, db: AsyncSession, note_id: UUID) -> MessageResponse:
        """
        Delete one note by id.

        Idempotent: an unknown id is not an error, the call simply
        removes nothing.
        """
        try:
            result = await db.execute(delete(Note).where(Note.id == note_id))
            await db.commit()
        except Exception as e:
            logger.error("Database error deleting note %s: %s", note_id, str(e))
            raise DatabaseError(
                message="Could not delete the note. Please try again.",
                context={"note_id": str(note_id)},
            )

        logger.info("Delete note %s: %d row(s) removed", note_id, result.rowcount)
        return MessageResponse(response=f"Note with id {note_id} deleted.")

    async def delete_all_notes(self, db: AsyncSession) -> MessageResponse:
        try:
            result = await db.execute(delete(Note))
            await db.commit()
        except Exception as e:
            logger.error("Database error deleting all notes: %s", str(e))
            raise DatabaseError(
                message="Could not delete notes. Please try again.",
                context={"error_type": type(e).__name__},
            )

        logger.info("Deleted all notes: %d row(s) removed", result.rowcount)
        return MessageResponse(response=f"{result.rowcount} note(s) deleted.")

    async def patch_note(
        self, db: AsyncSession, note_id: UUID, payload: NotePatch
    ) -> MessageResponse:
        """
        Apply a partial title/content update.

        Only fields present in the request body change; an explicit null
        is treated the same as an omitted field.

        Raises:
            NotFoundError: no note with this id (→ 404)
            DatabaseError: query or flush failed (→ 500)
        """
        changes = {
            field: value
            for field, value in payload.model_dump(exclude_unset=True).items()
            if value is not None
        }
        await self._update(db, note_id, changes)
        return MessageResponse(response=f"Document with id {note_id} patched.")

    async def update_note_color(
        self, db: AsyncSession, note_id: UUID, payload: NoteColorUpdate
    ) -> MessageResponse:
        """
        Set a note's color, leaving title and content untouched.

        Raises:
            ValidationError: color is not a hex color (→ 400)
            NotFoundError: no note with this id (→ 404)
        """
        color = validate_color(payload.color)
        await self._update(db, note_id, {"color": color})
        return MessageResponse(response=f"Note color updated for id {note_id}.")

    async def _update(self, db: AsyncSession, note_id: UUID, changes: dict) -> Note:
        """Load a note, apply `changes` to it and commit."""
        try:
            result = await db.execute(select(Note).where(Note.id == note_id))
            note: Optional[Note] = result.scalar_one_or_none()

            if note is None:
                raise NotFoundError(resource="note", resource_id=str(note_id))

            for field, value in changes.items():
                setattr(note, field, value)
            await db.flush()
            await db.commit()

            logger.info("Note %s updated: %s", note_id, sorted(changes) or "no changes")
            return note

        except QuirkNotesError:
            raise
        except Exception as e:
            logger.error("Database error updating note %s: %s", note_id, str(e))
            raise DatabaseError(
                message="Could not update the note. Please try again.",
                context={"note_id": str(note_id)},
            )


# Stateless; one shared instance
note_service = NoteService()
