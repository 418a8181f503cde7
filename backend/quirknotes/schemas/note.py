"""
QuirkNotes Backend — Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the API contract between frontend and backend.
How:   FastAPI uses these models to validate request bodies, serialize responses,
       and generate OpenAPI documentation.

Wire names:
    The frontend expects `_id` on notes and `insertedId` after creation.
    Fields keep Python names with the wire name as alias; populate_by_name
    lets services build them by field name while FastAPI dumps by alias.
"""

import uuid
from typing import List, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What the client sends
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """Body of POST /postNote. Title and content must be present."""
    title: str = Field(description="Note title")
    content: str = Field(description="Note body")
    color: Optional[str] = Field(
        default=None,
        description="Optional hex color (#RGB, #RGBA, #RRGGBB or #RRGGBBAA)",
    )


class NotePatch(BaseModel):
    """
    Body of PATCH /patchNote/{id}.

    Only the fields present in the request are applied; an empty body
    is a valid no-op. Unknown keys are ignored.
    """
    title: Optional[str] = Field(default=None, description="New title")
    content: Optional[str] = Field(default=None, description="New content")


class NoteColorUpdate(BaseModel):
    """Body of PATCH /updateNoteColor/{id}."""
    color: str = Field(description="New hex color, e.g. #FF0000")


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """A stored note. `color` is null (and dropped from list output) when unset."""
    id: uuid.UUID = Field(alias="_id", description="Note identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note body")
    color: Optional[str] = Field(default=None, description="Hex color, if any")

    model_config = {"from_attributes": True, "populate_by_name": True}


class NoteListResponse(BaseModel):
    """Returned by GET /getAllNotes."""
    response: List[NoteResponse] = Field(description="Every stored note")


class NoteCreatedResponse(BaseModel):
    """Returned by POST /postNote."""
    inserted_id: uuid.UUID = Field(
        alias="insertedId",
        description="Identifier generated for the new note",
    )

    model_config = {"populate_by_name": True}


class MessageResponse(BaseModel):
    """Acknowledgement returned by the delete and update endpoints."""
    response: str = Field(description="Human-readable outcome")


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Standardized error body for application errors.

    Example:
        {
            "error": "not_found",
            "message": "note with ID '...' was not found",
            "request_id": "1a2b3c4d"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    notes: Optional[int] = Field(default=None, description="Stored notes; absent when disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
