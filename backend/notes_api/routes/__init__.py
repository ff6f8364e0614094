# Routes package init
"""
Notes API — API Routes Package
================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - notes.py:   POST /api/notes   (validate and create a note)
    - health.py:  GET  /health      (service health check)

Design Principle:
    Routes handle HTTP concerns: parse the body, check it, call the service,
    set status code and headers. Identity, timestamps and storage belong to
    the service and repository layers.
"""
