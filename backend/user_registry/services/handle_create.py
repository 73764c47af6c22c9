"""Create Handler — validates and persists a new user.

Invariants:
    - Validation order: required fields → disallowed script in name → email format
    - A record failing any check is never passed to the store
    - createdAt == updatedAt == now at insert; id is assigned by the store
    - No uniqueness check on name or email (duplicates resolved later by the resolver)
"""

import logging

from user_registry.core.domain_types import UserField, UserRecord
from user_registry.core.errors import FieldValidationError
from user_registry.core.format_users import format_user
from user_registry.core.repository_protocols import UserStore
from user_registry.core.validators import (
    contains_disallowed_script, is_acceptable_email_format,
)
from user_registry.infrastructure.clock import Clock
from user_registry.services.messages import INVALID_EMAIL

logger = logging.getLogger(__name__)


class CreateHandlers:
    """User creation handler."""

    def __init__(self, store: UserStore, clock: Clock):
        self.store = store
        self.clock = clock

    async def create_user(self, name: str | None, email: str | None) -> dict:
        """Create a user and return the generated id with the stored record."""
        if not name or not email:
            raise FieldValidationError(
                "Name and email are required fields.",
                "name" if not name else "email",
            )
        if contains_disallowed_script(name):
            raise FieldValidationError(
                "Name contains Korean (Hangul) characters, which are not allowed.",
                "name",
            )
        if not is_acceptable_email_format(email):
            raise FieldValidationError(INVALID_EMAIL, "email")

        now = self.clock()
        record: UserRecord = {
            UserField.NAME.value: name,
            UserField.EMAIL.value: email,
            UserField.CREATED_AT.value: now,
            UserField.UPDATED_AT.value: now,
        }
        user_id = await self.store.insert(record)
        logger.info(
            "User created", extra={"user_id": user_id, "operation": "create_user"},
        )
        return {
            "success": True,
            "message": "User created successfully.",
            "userId": user_id,
            "user": format_user(user_id, record),
        }
