"""User ORM — persists the single user document per row in the `users` table.

Invariants:
    - id is assigned by SqlAlchemyUserStore.insert (UUID4 string); no column default
    - name and email are non-nullable text (validated before insert, not here)
    - created_at is nullable: legacy rows without it exist and are never deletable

Design Decisions:
    - String(36) id over native UUID: same column type on SQLite and PostgreSQL,
      and ids travel as opaque strings on the wire
    - Index on name: every name-based operation is an equality query
"""

from datetime import datetime

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from user_registry.db.base import Base


class User(Base):
    """User record — name, email and creation/update timestamps."""
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
