"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Error responses use the structured JSON envelope; not-found uses empty bodies

Design Decisions:
    - Thin routes delegate to services
"""
