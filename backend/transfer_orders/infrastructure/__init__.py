"""Infrastructure Layer — process-local storage and cross-cutting concerns.

Invariants:
    - Infrastructure holds state and IO, never business rules
    - Shared state is guarded by the component that owns it (no external locking)

Design Decisions:
    - Singletons created in the FastAPI lifespan, not at import time
"""
