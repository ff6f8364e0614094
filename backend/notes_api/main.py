"""
Notes API — FastAPI Application Factory
=========================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes app configuration, middleware registration, route mounting,
       and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn notes_api.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌──────────┐ ┌──────┐ ┌────────────┐  │
    │  │  Req ID  │→│ Logging  │→│ GZip │→│ CORS (dev) │  │
    │  └──────────┘ └──────────┘ └──────┘ └────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌────────────────┐ ┌─────────────┐                 │
    │  │ POST /api/notes│ │ GET /health │                 │
    │  └────────────────┘ └─────────────┘                 │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Schema→400 │ Validation→400 │ Creation→500   │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Validate configuration (logged, not fatal)
    3. Create tables when the database backend uses SQLite

    Shutdown:
    1. Dispose database engine (close all connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from notes_api import __version__
from notes_api.config import settings
from notes_api.database import create_tables, dispose_engine
from notes_api.exceptions import NoteCreationError, ValidationError
from notes_api.middleware.logging import RequestLoggingMiddleware
from notes_api.middleware.request_id import RequestIDMiddleware, request_id_var
from notes_api.routes import health, notes
from notes_api.schemas.note import ErrorResponse, ValidationErrorResponse

logger = logging.getLogger(__name__)

SCHEMA_ERROR_SUMMARY = "One or more validation errors occurred."


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Level:  settings.log_level
    Output: stdout (Docker captures it)
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # uvicorn's own access log duplicates notes_api.access
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Manage application lifecycle: startup and shutdown procedures.

    Code before yield runs on startup, code after yield runs on shutdown.
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("Notes API starting up (environment=%s)...", settings.environment)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        logger.error("Configuration error: %s", str(e))

    logger.info("Storage backend: %s", settings.storage_backend)
    if settings.storage_backend == "database" and settings.is_sqlite:
        await create_tables()
        logger.info("SQLite tables ensured")

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    if settings.is_development:
        logger.info("API docs: http://%s:%d/docs", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Notes API shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _schema_error_map(exc: RequestValidationError) -> Dict[str, List[str]]:
    """
    Turn FastAPI's request validation errors into {field: [messages]}.

    Missing and null fields read "<Field> is required"; other errors keep
    Pydantic's message. Errors about the body as a whole go under "body".
    """
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        loc = error.get("loc", ())
        if error.get("type") == "json_invalid":
            field, message = "body", "Request body is not valid JSON"
        elif len(loc) >= 2 and loc[0] == "body":
            field = str(loc[1])
            if error.get("type") == "missing" or error.get("input", "") is None:
                message = f"{field.capitalize()} is required"
            else:
                message = error.get("msg", "Invalid value")
        elif tuple(loc) == ("body",):
            field = "body"
            if error.get("type") == "missing":
                message = "Request body is required"
            else:
                message = error.get("msg", "Invalid request body")
        else:
            field = ".".join(str(part) for part in loc) or "request"
            message = error.get("msg", "Invalid value")
        errors.setdefault(field, []).append(message)
    return errors


def _request_id(request: Request) -> str:
    """
    Request id for log lines.

    The Exception fallback runs in Starlette's ServerErrorMiddleware, after
    RequestIDMiddleware has reset the ContextVar, so fall back to the id it
    left on request.state (shared through the ASGI scope).
    """
    return request_id_var.get("") or getattr(request.state, "request_id", "")


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        RequestValidationError  → 400 {"error": summary, "errors": {field: [...]}}
        ValidationError         → 400 {"error": message}
        NoteCreationError       → 500 {"error": "An error occurred while creating the note"}
        Exception (fallback)    → 500 generic message

    Security: handlers never put exception text, stack traces or storage
    details into the response. Details are logged server-side.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_schema_error(request: Request, exc: RequestValidationError):
        """Body missing fields or wrongly typed — reported per field, as 400."""
        rid = _request_id(request)
        errors = _schema_error_map(exc)
        logger.warning("[%s] Request validation failed for fields: %s", rid, sorted(errors))
        return JSONResponse(
            status_code=400,
            content=ValidationErrorResponse(error=SCHEMA_ERROR_SUMMARY, errors=errors).model_dump(),
        )

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        """Client sent a blank or too-long field — tell them which one."""
        rid = _request_id(request)
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error=exc.message).model_dump(),
        )

    @app.exception_handler(NoteCreationError)
    async def handle_note_creation_error(request: Request, exc: NoteCreationError):
        """Creation step failed — the route already logged the traceback."""
        rid = _request_id(request)
        logger.error("[%s] Note creation failed | Context: %s", rid, exc.context)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=NoteCreationError.MESSAGE).model_dump(),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Catch-all for truly unexpected errors.

        Stack trace is logged server-side ONLY (never in response).
        """
        rid = _request_id(request)
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="An unexpected error occurred.").model_dump(),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    OpenAPI docs and CORS are only enabled in the development environment.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    docs_enabled = settings.is_development
    app = FastAPI(
        title="Notes API",
        description="Create notes with a title and content.",
        version=__version__,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition (last added = first to run)

    # CORS — only the local frontend origin, only in development
    if settings.is_development:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins_list,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=["Location", "X-Request-ID"],
        )

    # Only large note bodies are worth compressing
    app.add_middleware(GZipMiddleware, minimum_size=500)

    app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(notes.router)
    app.include_router(health.router)

    return app


app = create_app()
