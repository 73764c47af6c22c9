"""In-Memory Store & Clock — substitutes for SqlAlchemyUserStore and utc_now in handler tests.

Invariants:
    - InMemoryUserStore satisfies the UserStore protocol structurally (no inheritance)
    - Records returned as copies: handlers cannot mutate stored state by accident
    - fail_with makes every call raise, to exercise the 500 path
    - FakeClock only moves when advance() is called

Design Decisions:
    - Flat classes, no mocks: assertions read the real stored state afterwards
"""

import uuid
from datetime import datetime, timedelta, timezone

from user_registry.core.domain_types import QUERYABLE_FIELDS


START = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class FakeClock:
    """Controllable clock; call it like utc_now()."""

    def __init__(self, start: datetime = START):
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **delta) -> None:
        self.current += timedelta(**delta)


class InMemoryUserStore:
    """Dict-backed users collection preserving insertion order."""

    def __init__(self):
        self.records: dict[str, dict] = {}
        self.fail_with: Exception | None = None
        self.mutations = 0

    def _check(self):
        if self.fail_with is not None:
            raise self.fail_with

    def seed(self, record: dict, user_id: str | None = None) -> str:
        """Insert directly, bypassing handlers (e.g. legacy rows without createdAt)."""
        user_id = user_id or str(uuid.uuid4())
        self.records[user_id] = dict(record)
        return user_id

    async def insert(self, record):
        self._check()
        self.mutations += 1
        return self.seed(record)

    async def get_by_id(self, user_id):
        self._check()
        record = self.records.get(user_id)
        return dict(record) if record is not None else None

    async def query_by_field(self, field_name, value):
        self._check()
        if field_name not in QUERYABLE_FIELDS:
            raise ValueError(f"Field '{field_name}' is not queryable")
        return [
            (uid, dict(r)) for uid, r in self.records.items()
            if r.get(field_name) == value
        ]

    async def update_by_id(self, user_id, fields):
        self._check()
        if user_id not in self.records:
            return False
        self.mutations += 1
        self.records[user_id].update(fields)
        return True

    async def delete_by_id(self, user_id):
        self._check()
        if user_id not in self.records:
            return False
        self.mutations += 1
        del self.records[user_id]
        return True

    async def get_all(self):
        self._check()
        return [(uid, dict(r)) for uid, r in self.records.items()]

    async def ping(self):
        self._check()
        return True
