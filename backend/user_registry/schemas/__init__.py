"""Pydantic Schemas — request validation for API endpoints.

Invariants:
    - Schemas validate JSON shape at the system boundary (types only)
    - Business rules (script, email, grace period) live in core/, not here

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
