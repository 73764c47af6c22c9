"""Infrastructure Layer — store implementation, clock and cross-cutting concerns.

Invariants:
    - Infrastructure implements core protocols; it never holds business rules
    - All SQLAlchemy failures mapped to StoreError (core/errors.py)
"""
