"""Services Layer — request handlers and the name resolver.

Invariants:
    - Handlers split by operation family (max 4 methods each)
    - Every handler performs at most one store mutation
    - Handlers never call each other

Design Decisions:
    - One handler file per operation family for locality (create, read, update, delete)
"""
