"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps the store-assigned identifier — never client-supplied
    - UserRecord keys use the wire names (name, email, createdAt, updatedAt)
    - QUERYABLE_FIELDS is the single list of fields the store may be queried by

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import Any, NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)

# Store-side document: {"name", "email", "createdAt", "updatedAt"}
UserRecord = dict[str, Any]


# ─── Enums ───────────────────────────────────────────────────────

class UserField(str, Enum):
    """Record fields as they appear on the wire and in store documents."""
    NAME = "name"
    EMAIL = "email"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"


class MatchStatus(str, Enum):
    """Outcome of a name lookup that must resolve to a single record."""
    NOT_FOUND = "not_found"
    FOUND = "found"
    AMBIGUOUS = "ambiguous"


QUERYABLE_FIELDS: frozenset[str] = frozenset({UserField.NAME.value, UserField.EMAIL.value})
