"""Update-Email Handlers — update_email_by_id, update_email_by_name.

Invariants:
    - Email format checked BEFORE any store read: a bad email never touches the store
    - Only `email` and `updatedAt` are written; createdAt is never modified
    - Ambiguous name → 409 pointing at the id-based variant; never picks a record
    - By-name success returns the resolved userId
"""

import logging

from user_registry.core.domain_types import UserField, UserId
from user_registry.core.errors import (
    AmbiguousMatchError, ErrorContext, FieldValidationError, ResourceNotFoundError,
)
from user_registry.core.lookup import Ambiguous, NotFound
from user_registry.core.repository_protocols import UserStore
from user_registry.core.validators import is_acceptable_email_format
from user_registry.infrastructure.clock import Clock
from user_registry.services.messages import (
    EMAIL_UPDATED, INVALID_EMAIL, USER_ID_NOT_FOUND, USER_NAME_NOT_FOUND,
)
from user_registry.services.user_lookup import resolve_by_name

logger = logging.getLogger(__name__)


def _check_new_email(identifier: str | None, label: str, new_email: str | None) -> None:
    if not identifier or not new_email:
        raise FieldValidationError(
            f"{label} and newEmail parameters are required.",
            label if not identifier else "newEmail",
        )
    if not is_acceptable_email_format(new_email):
        raise FieldValidationError(INVALID_EMAIL, "newEmail")


class UpdateHandlers:
    """Email update handlers."""

    def __init__(self, store: UserStore, clock: Clock):
        self.store = store
        self.clock = clock

    async def update_email_by_id(
        self, user_id: str | None, new_email: str | None,
    ) -> dict:
        _check_new_email(user_id, "userId", new_email)
        user_id = UserId(user_id)
        if await self.store.get_by_id(user_id) is None:
            raise ResourceNotFoundError(
                USER_ID_NOT_FOUND, ErrorContext(user_id=user_id),
            )
        await self._write_email(user_id, new_email)
        return {"success": True, "message": EMAIL_UPDATED}

    async def update_email_by_name(
        self, name: str | None, new_email: str | None,
    ) -> dict:
        _check_new_email(name, "name", new_email)
        outcome = await resolve_by_name(self.store, name)
        if isinstance(outcome, NotFound):
            raise ResourceNotFoundError(USER_NAME_NOT_FOUND, ErrorContext(name=name))
        if isinstance(outcome, Ambiguous):
            raise AmbiguousMatchError(name, outcome.count, "update the email")
        await self._write_email(outcome.user_id, new_email)
        return {
            "success": True,
            "message": EMAIL_UPDATED,
            "userId": outcome.user_id,
        }

    async def _write_email(self, user_id: UserId, new_email: str) -> None:
        updated = await self.store.update_by_id(user_id, {
            UserField.EMAIL.value: new_email,
            UserField.UPDATED_AT.value: self.clock(),
        })
        if not updated:
            raise ResourceNotFoundError(
                USER_ID_NOT_FOUND, ErrorContext(user_id=user_id),
            )
        logger.info(
            "User email updated",
            extra={"user_id": user_id, "operation": "update_email"},
        )
