"""
QuirkNotes Backend — Notes Route Handlers
===========================================

What:  The six note endpoints used by the QuirkNotes frontend.
How:   Each handler extracts path/body data, delegates to NoteService and
       returns its Pydantic result. Every success answers 200.

Route Inventory:
    POST   /postNote               create a note
    GET    /getAllNotes            list every note
    DELETE /deleteNote/{id}        delete one note (idempotent)
    DELETE /deleteAllNotes         delete every note
    PATCH  /patchNote/{id}         partial title/content update
    PATCH  /updateNoteColor/{id}   set a note's color

Invalid UUIDs in the path are rejected by FastAPI with 422.
"""

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from quirknotes.database import get_db_session
from quirknotes.schemas.note import (
    ErrorResponse,
    MessageResponse,
    NoteColorUpdate,
    NoteCreate,
    NoteCreatedResponse,
    NoteListResponse,
    NotePatch,
)
from quirknotes.services.note_service import note_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Notes"])


@router.post(
    "/postNote",
    response_model=NoteCreatedResponse,
    responses={
        400: {"description": "Invalid color", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a note",
)
async def post_note(
    payload: NoteCreate,
    db: AsyncSession = Depends(get_db_session),
) -> NoteCreatedResponse:
    """Create a note and return its generated id as `insertedId`."""
    return await note_service.create_note(db=db, payload=payload)


@router.get(
    "/getAllNotes",
    response_model=NoteListResponse,
    # Notes without a color omit the key entirely
    response_model_exclude_none=True,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List every note",
)
async def get_all_notes(
    db: AsyncSession = Depends(get_db_session),
) -> NoteListResponse:
    return await note_service.list_notes(db=db)


@router.delete(
    "/deleteNote/{note_id}",
    response_model=MessageResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Delete a note by id",
    description="Succeeds whether or not a note with this id exists.",
)
async def delete_note(
    note_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await note_service.delete_note(db=db, note_id=note_id)


@router.delete(
    "/deleteAllNotes",
    response_model=MessageResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Delete every note",
)
async def delete_all_notes(
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await note_service.delete_all_notes(db=db)


@router.patch(
    "/patchNote/{note_id}",
    response_model=MessageResponse,
    responses={
        404: {"description": "Note not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Update a note's title and/or content",
    description="Only the fields present in the body are changed.",
)
async def patch_note(
    note_id: UUID,
    payload: Optional[NotePatch] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    """A request without a body patches nothing, the same as `{}`."""
    return await note_service.patch_note(
        db=db, note_id=note_id, payload=payload or NotePatch()
    )


@router.patch(
    "/updateNoteColor/{note_id}",
    response_model=MessageResponse,
    responses={
        400: {"description": "Invalid color", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Set a note's color",
)
async def update_note_color(
    note_id: UUID,
    payload: NoteColorUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    """Set `color` to the given hex string; title and content are unchanged."""
    return await note_service.update_note_color(db=db, note_id=note_id, payload=payload)
