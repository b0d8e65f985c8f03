"""Schemas — Pydantic models for API boundaries.

Invariants:
    - Wire models never leak into core/ or services/ (converted at the route edge)
"""
