"""
QuirkNotes Backend — Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions for the error scenarios the API exposes.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the right HTTP status.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    QuirkNotesError (base)
    ├── ValidationError   → 400 Bad Request (client can fix)
    ├── NotFoundError     → 404 Not Found
    └── DatabaseError     → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class QuirkNotesError(Exception):
    """
    Base exception for all QuirkNotes application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned for server errors)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(QuirkNotesError):
    """
    Raised when client input breaks a business rule.

    HTTP: 400 Bad Request. Schema-level problems (missing fields, wrong
    types, malformed UUIDs) are left to FastAPI, which answers 422.

    Example response:
        {
            "error": "validation_error",
            "message": "Color 'red' is not a hex color like #FF0000",
            "details": {"field": "color"}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(QuirkNotesError):
    """
    Raised when a requested resource does not exist.

    When: PATCH /patchNote/{id} or /updateNoteColor/{id} with an unknown id.
    HTTP: 404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(QuirkNotesError):
    """
    Raised when database operations fail unexpectedly.

    HTTP: 500 Internal Server Error. The message returned to the client is
    always generic; details stay in the server log.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
