"""User Formatting — converts store records to the public JSON shape.

Invariants:
    - Output always has exactly id, name, email, createdAt, updatedAt
    - Timestamps pass through normalize_timestamp (ISO-8601 string or None)
"""

from user_registry.core.domain_types import UserField, UserId, UserRecord
from user_registry.core.timestamps import format_timestamp


def format_user(user_id: UserId, record: UserRecord) -> dict:
    """Public view of a single record."""
    return {
        "id": user_id,
        "name": record.get(UserField.NAME.value),
        "email": record.get(UserField.EMAIL.value),
        "createdAt": format_timestamp(record.get(UserField.CREATED_AT.value)),
        "updatedAt": format_timestamp(record.get(UserField.UPDATED_AT.value)),
    }


def format_users(matches: list[tuple[UserId, UserRecord]]) -> list[dict]:
    return [format_user(user_id, record) for user_id, record in matches]
