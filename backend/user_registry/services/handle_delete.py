"""Delete Handlers — delete_user_by_id, delete_user_by_name.

Invariants:
    - Deletion requires now - createdAt >= GRACE_PERIOD_MINUTES (403 otherwise)
    - By id: a record without createdAt is an invalid state (400), checked before the clock
    - By name: a record without createdAt never satisfies the grace period (403)
    - Ambiguous name → 409 pointing at the id-based variant; never picks a record
    - By-name success returns the deleted userId
"""

import logging

from user_registry.core.domain_types import UserField, UserId, UserRecord
from user_registry.core.errors import (
    AmbiguousMatchError, ErrorContext, FieldValidationError,
    GracePeriodNotElapsedError, InvalidRecordStateError, ResourceNotFoundError,
)
from user_registry.core.lookup import Ambiguous, NotFound
from user_registry.core.repository_protocols import UserStore
from user_registry.core.validators import (
    GRACE_PERIOD_MINUTES, is_past_grace_period, minutes_since,
)
from user_registry.infrastructure.clock import Clock
from user_registry.services.messages import (
    USER_DELETED, USER_ID_NOT_FOUND, USER_NAME_NOT_FOUND,
)
from user_registry.services.user_lookup import resolve_by_name

logger = logging.getLogger(__name__)


class DeleteHandlers:
    """Grace-period-gated deletion handlers."""

    def __init__(self, store: UserStore, clock: Clock):
        self.store = store
        self.clock = clock

    async def delete_user_by_id(self, user_id: str | None) -> dict:
        if not user_id:
            raise FieldValidationError("userId parameter is required.", "userId")
        user_id = UserId(user_id)
        record = await self.store.get_by_id(user_id)
        if record is None:
            raise ResourceNotFoundError(
                USER_ID_NOT_FOUND, ErrorContext(user_id=user_id),
            )
        if not record.get(UserField.CREATED_AT.value):
            raise InvalidRecordStateError(
                "User has no creation timestamp.", ErrorContext(user_id=user_id),
            )
        await self._delete_after_grace_period(user_id, record)
        return {"success": True, "message": USER_DELETED}

    async def delete_user_by_name(self, name: str | None) -> dict:
        if not name:
            raise FieldValidationError("name parameter is required.", "name")
        outcome = await resolve_by_name(self.store, name)
        if isinstance(outcome, NotFound):
            raise ResourceNotFoundError(USER_NAME_NOT_FOUND, ErrorContext(name=name))
        if isinstance(outcome, Ambiguous):
            raise AmbiguousMatchError(name, outcome.count, "delete the user")
        await self._delete_after_grace_period(outcome.user_id, outcome.record)
        return {
            "success": True,
            "message": USER_DELETED,
            "userId": outcome.user_id,
        }

    async def _delete_after_grace_period(
        self, user_id: UserId, record: UserRecord,
    ) -> None:
        elapsed = minutes_since(record.get(UserField.CREATED_AT.value), self.clock())
        logger.debug(
            "Grace period check",
            extra={"user_id": user_id, "elapsed_minutes": elapsed},
        )
        if not is_past_grace_period(elapsed):
            raise GracePeriodNotElapsedError(
                GRACE_PERIOD_MINUTES, ErrorContext(user_id=user_id),
            )
        if not await self.store.delete_by_id(user_id):
            raise ResourceNotFoundError(
                USER_ID_NOT_FOUND, ErrorContext(user_id=user_id),
            )
        logger.info(
            "User deleted", extra={"user_id": user_id, "operation": "delete_user"},
        )
