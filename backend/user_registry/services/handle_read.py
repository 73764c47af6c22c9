"""Read Handlers — get_users_by_name, list_users.

Invariants:
    - get_users_by_name returns EVERY match (no ambiguity check on reads)
    - An empty result is a not-found outcome for both reads, never an empty list
    - Timestamps normalized through core.format_users
"""

from user_registry.core.domain_types import UserField
from user_registry.core.errors import FieldValidationError, ResourceNotFoundError
from user_registry.core.format_users import format_users
from user_registry.core.repository_protocols import UserStore
from user_registry.services.messages import USER_NAME_NOT_FOUND


class ReadHandlers:
    """Read-only handlers."""

    def __init__(self, store: UserStore):
        self.store = store

    async def get_users_by_name(self, name: str | None) -> dict:
        if not name:
            raise FieldValidationError("name parameter is required.", "name")
        matches = await self.store.query_by_field(UserField.NAME.value, name)
        if not matches:
            raise ResourceNotFoundError(USER_NAME_NOT_FOUND)
        return {
            "success": True,
            "message": f"Found {len(matches)} user(s).",
            "users": format_users(matches),
        }

    async def list_users(self) -> dict:
        matches = await self.store.get_all()
        if not matches:
            raise ResourceNotFoundError("No users found.")
        return {
            "success": True,
            "message": f"Found {len(matches)} user(s).",
            "users": format_users(matches),
        }
