"""
Notes API — Custom Exception Hierarchy
========================================

What:  Application-specific exceptions for the create pipeline.
Why:   Each exception maps to one HTTP status and one response body, so the
       route stays free of JSONResponse plumbing and nothing internal leaks.
How:   Each exception carries a client-safe message and an optional context
       dict. Global exception handlers (registered in main.py) turn them into
       JSON error responses.
Who:   Raised by the notes route; caught by global handlers.

Exception Hierarchy:
    NotesApiError (base)
    ├── ValidationError      → 400 Bad Request (client can fix)
    └── NoteCreationError    → 500 Internal Server Error (generic message only)

Service and repository code never raises these; they let storage errors
propagate and the route translates them at the boundary.
"""

from typing import Any, Dict, Optional


class NotesApiError(Exception):
    """
    Base exception for all Notes API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NotesApiError):
    """
    Raised when a create request fails a business-rule check.

    When:    Blank title/content, or title/content over the length limit.
    HTTP:    400 Bad Request

    Schema-level problems (missing or non-string fields) are reported by
    FastAPI's RequestValidationError instead; see main.py.

    Example response:
        {"error": "Title cannot exceed 100 characters"}
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


class NoteCreationError(NotesApiError):
    """
    Raised by the route when the creation step fails for any reason.

    HTTP:    500 Internal Server Error

    The message is fixed. The underlying exception is chained (`raise ... from`)
    and only its type name goes into context, so handlers can log it without
    putting it in the response body.
    """

    MESSAGE = "An error occurred while creating the note"

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message=self.MESSAGE, context=context)
