"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON with `success` and `message`

Design Decisions:
    - Thin routes delegate to services (parameter extraction only)
"""
