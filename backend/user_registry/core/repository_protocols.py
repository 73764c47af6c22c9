"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All store IO accessed through the UserStore protocol
    - Implementations provided by shell via dependency injection
    - query_by_field accepts only QUERYABLE_FIELDS (ValueError otherwise)

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO; handlers await them, validators never do
"""

from typing import Protocol

from user_registry.core.domain_types import UserId, UserRecord


class UserStore(Protocol):
    """Contract for the `users` collection — implemented by shell."""
    async def insert(self, record: UserRecord) -> UserId: ...
    async def get_by_id(self, user_id: UserId) -> UserRecord | None: ...
    async def query_by_field(
        self, field_name: str, value: object,
    ) -> list[tuple[UserId, UserRecord]]: ...
    async def update_by_id(self, user_id: UserId, fields: UserRecord) -> bool: ...
    async def delete_by_id(self, user_id: UserId) -> bool: ...
    async def get_all(self) -> list[tuple[UserId, UserRecord]]: ...
    async def ping(self) -> bool: ...
