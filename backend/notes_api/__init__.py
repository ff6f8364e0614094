"""
Notes API — Application Package Initializer
=============================================

What: Marks the `notes_api` directory as a Python package.
Why:  Enables module imports like `from notes_api.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend is a single create pipeline split into layers:

    ┌─────────────────────────────────────┐
    │       Routes (Request Handler)      │  ← validation, status codes, headers
    ├─────────────────────────────────────┤
    │      Services (Creation Service)    │  ← identity + timestamp assignment
    ├─────────────────────────────────────┤
    │   Repositories (Persistence Gateway)│  ← in-memory or SQLAlchemy storage
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← ORM entity + Pydantic contracts
    └─────────────────────────────────────┘

    Routes never touch storage directly, and lower layers never shape HTTP
    responses. Errors flow upward untouched until the route boundary.
"""

__version__ = "1.0.0"
