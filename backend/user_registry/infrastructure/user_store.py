"""SQLAlchemy User Store — UserStore protocol over the `users` table.

Invariants:
    - insert assigns the id (UUID4 string); any client-supplied id is ignored
    - Every mutating call commits exactly once; nothing is retried
    - query_by_field only accepts QUERYABLE_FIELDS (no arbitrary column access)
    - Results are (id, record) pairs with wire field names (createdAt, updatedAt)
    - SQLAlchemy failures surface as StoreError carrying the driver detail

Design Decisions:
    - Explicit field→column mapping dict: prevents arbitrary attribute queries
    - get_all ordered by created_at, then id: stable listing across calls
"""

import logging
import uuid
from contextlib import asynccontextmanager

from sqlalchemy import select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from user_registry.core.domain_types import (
    QUERYABLE_FIELDS, UserField, UserId, UserRecord,
)
from user_registry.core.errors import StoreError
from user_registry.models.user import User

logger = logging.getLogger(__name__)

_COLUMNS = {
    UserField.NAME.value: User.name,
    UserField.EMAIL.value: User.email,
    UserField.CREATED_AT.value: User.created_at,
    UserField.UPDATED_AT.value: User.updated_at,
}
_ATTRIBUTES = {
    UserField.NAME.value: "name",
    UserField.EMAIL.value: "email",
    UserField.CREATED_AT.value: "created_at",
    UserField.UPDATED_AT.value: "updated_at",
}


def _to_record(user: User) -> UserRecord:
    return {
        UserField.NAME.value: user.name,
        UserField.EMAIL.value: user.email,
        UserField.CREATED_AT.value: user.created_at,
        UserField.UPDATED_AT.value: user.updated_at,
    }


class SqlAlchemyUserStore:
    """UserStore backed by an AsyncSession (one per request)."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @asynccontextmanager
    async def _operation(self, name: str):
        try:
            yield
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Store {name} failed: {e}", extra={"operation": name})
            raise StoreError(str(getattr(e, "orig", None) or e), name)

    async def insert(self, record: UserRecord) -> UserId:
        async with self._operation("insert"):
            user = User(id=str(uuid.uuid4()))
            for key, value in record.items():
                setattr(user, _ATTRIBUTES[key], value)
            self.db.add(user)
            await self.db.commit()
            return UserId(user.id)

    async def get_by_id(self, user_id: UserId) -> UserRecord | None:
        async with self._operation("get"):
            user = await self.db.get(User, user_id)
            return _to_record(user) if user else None

    async def query_by_field(
        self, field_name: str, value: object,
    ) -> list[tuple[UserId, UserRecord]]:
        if field_name not in QUERYABLE_FIELDS:
            raise ValueError(f"Field '{field_name}' is not queryable")
        async with self._operation("query"):
            result = await self.db.execute(
                select(User)
                .where(_COLUMNS[field_name] == value)
                .order_by(User.created_at, User.id),
            )
            return [(UserId(u.id), _to_record(u)) for u in result.scalars().all()]

    async def update_by_id(self, user_id: UserId, fields: UserRecord) -> bool:
        async with self._operation("update"):
            user = await self.db.get(User, user_id)
            if user is None:
                return False
            for key, value in fields.items():
                setattr(user, _ATTRIBUTES[key], value)
            await self.db.commit()
            return True

    async def delete_by_id(self, user_id: UserId) -> bool:
        async with self._operation("delete"):
            user = await self.db.get(User, user_id)
            if user is None:
                return False
            await self.db.delete(user)
            await self.db.commit()
            return True

    async def get_all(self) -> list[tuple[UserId, UserRecord]]:
        async with self._operation("list"):
            result = await self.db.execute(
                select(User).order_by(User.created_at, User.id),
            )
            return [(UserId(u.id), _to_record(u)) for u in result.scalars().all()]

    async def ping(self) -> bool:
        async with self._operation("ping"):
            await self.db.execute(text("SELECT 1"))
            return True
