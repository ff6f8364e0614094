"""
Notes API — Pydantic Request/Response Schemas
===============================================

What:  Pydantic models defining the API contract between frontend and backend.
Why:   Request parsing, response serialization, and OpenAPI doc generation.
How:   FastAPI validates request bodies against these models and serializes
       responses through them (by alias, so the wire format is camelCase).

Design Decision:
    CreateNoteRequest declares presence and type only. Blank and length checks
    live in the notes route so they run in a fixed order and produce the
    single-message error body; a schema-level max_length would turn them
    into per-field validation maps instead.
"""

import uuid
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class CreateNoteRequest(BaseModel):
    """
    What:  Body of POST /api/notes.
    Both fields are required strings; null counts as missing.
    """
    title: str = Field(description="Note title (required, max 100 characters)")
    content: str = Field(description="Note content (required, max 5000 characters)")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    What:  Full representation of a created note.
    Who:   Returned by POST /api/notes with HTTP 201.

    Serialized as {"id", "title", "content", "createdAt"}.
    """
    id: uuid.UUID = Field(description="Unique note identifier (UUID)")
    title: str = Field(description="Note title")
    content: str = Field(description="Note content")
    created_at: datetime = Field(description="When the note was created (UTC ISO 8601)")

    model_config = {
        "from_attributes": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Error body for business-rule failures (400) and server errors (500).

    Example:
        {"error": "Content cannot exceed 5000 characters"}
    """
    error: str = Field(description="Human-readable error description")


class ValidationErrorResponse(BaseModel):
    """
    What:  Error body for schema-level failures (missing/null/wrongly typed fields).

    Example:
        {
            "error": "One or more validation errors occurred.",
            "errors": {"title": ["Title is required"]}
        }
    """
    error: str = Field(description="Summary message")
    errors: Dict[str, List[str]] = Field(description="Messages keyed by field name")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and storage status.
    Who:   Returned by GET /health for monitoring and load balancer probes.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    storage: str = Field(description="Storage status: memory, connected, disconnected")
    notes_in_memory: Optional[int] = Field(
        default=None,
        description="Number of notes held by the in-memory store (memory backend only)",
    )
    uptime_seconds: float = Field(description="Seconds since service started")
