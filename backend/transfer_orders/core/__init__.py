"""Core Layer — pure domain logic, no IO, no async, no framework imports.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - Domain values are immutable; every change produces a new value

Design Decisions:
    - Functional core separated from imperative shell (ADR: store and routes stay thin)
"""
