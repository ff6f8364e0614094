"""
Notes API — Notes Route Handler
=================================

What:  Handles POST /api/notes (create a note).
Why:   The request-handler boundary: everything the client can get wrong is
       caught here, and nothing the server gets wrong leaks out of here.
How:   Validates the payload, delegates to NoteService, returns 201 with a
       Location header.
Who:   Called by the frontend note editor.

Validation Order:
    1. Missing/null title or content   → 400 per-field map (RequestValidationError, main.py)
    2. Blank title                     → 400 "Title cannot be empty or whitespace"
    3. Blank content                   → 400 "Content cannot be empty or whitespace"
    4. Title over 100 characters       → 400 "Title cannot exceed 100 characters"
    5. Content over 5000 characters    → 400 "Content cannot exceed 5000 characters"

    The service is never called when any check fails. Lengths are measured on
    the untrimmed values, which are also what gets stored.

Failure Handling:
    Any exception from the creation step is logged with its traceback and
    re-raised as NoteCreationError, which main.py renders as a generic 500.
"""

import logging

from fastapi import APIRouter, Depends, Response

from notes_api.dependencies import get_note_service
from notes_api.exceptions import NoteCreationError, ValidationError
from notes_api.middleware.request_id import request_id_var
from notes_api.models.note import CONTENT_MAX_LENGTH, TITLE_MAX_LENGTH
from notes_api.schemas.note import (
    CreateNoteRequest,
    ErrorResponse,
    NoteResponse,
)
from notes_api.services.note_service import NoteService

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/api", tags=["Notes"])


def validate_create_request(payload: CreateNoteRequest) -> None:
    """
    Apply the business-rule checks, in order, to a schema-valid payload.

    Raises:
        ValidationError: on the first failing check, naming the field.
    """
    if not payload.title.strip():
        raise ValidationError("Title cannot be empty or whitespace", field="title")

    if not payload.content.strip():
        raise ValidationError("Content cannot be empty or whitespace", field="content")

    if len(payload.title) > TITLE_MAX_LENGTH:
        raise ValidationError(
            f"Title cannot exceed {TITLE_MAX_LENGTH} characters",
            field="title",
            context={"max_length": TITLE_MAX_LENGTH, "length": len(payload.title)},
        )

    if len(payload.content) > CONTENT_MAX_LENGTH:
        raise ValidationError(
            f"Content cannot exceed {CONTENT_MAX_LENGTH} characters",
            field="content",
            context={"max_length": CONTENT_MAX_LENGTH, "length": len(payload.content)},
        )


@router.post(
    "/notes",
    status_code=201,
    response_model=NoteResponse,
    responses={
        201: {"description": "Note created", "model": NoteResponse},
        400: {"description": "Missing, blank, or too-long title/content", "model": ErrorResponse},
        500: {"description": "The note could not be stored", "model": ErrorResponse},
    },
    summary="Create a note",
    description=(
        "Creates a note from a title (max 100 characters) and content "
        "(max 5000 characters). The server assigns the id and the UTC creation "
        "time. The Location header points at the new note."
    ),
)
async def create_note(
    payload: CreateNoteRequest,
    response: Response,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    """
    Create a new note.

    Returns:
        NoteResponse (HTTP 201) with `Location: /api/notes/{id}`.

    Error responses (rendered by global exception handlers):
        HTTP 400: ValidationError or RequestValidationError
        HTTP 500: NoteCreationError
    """
    validate_create_request(payload)

    try:
        note = await service.create_note(title=payload.title, content=payload.content)
    except Exception as e:
        rid = request_id_var.get("")
        logger.error("[%s] Failed to create note: %s", rid, str(e), exc_info=True)
        raise NoteCreationError(context={"error_type": type(e).__name__}) from e

    response.headers["Location"] = f"/api/notes/{note.id}"
    return NoteResponse.model_validate(note)
