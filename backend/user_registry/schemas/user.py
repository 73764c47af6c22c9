"""User Schemas — request body shapes (JSON or form) for the user endpoints.

Invariants:
    - Every field is optional: a missing field is a domain validation error raised
      by the handler (with its own message), not a schema error
    - Wrong value types (e.g. a JSON number for `name`) are rejected here (400)
    - Wire names are camelCase (userId, newEmail); Python attributes are snake_case

Design Decisions:
    - No format rules in schemas: script/email checks stay in core.validators so
      create and update share one implementation
"""

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Create body — name and email."""
    name: str | None = None
    email: str | None = None


class UserTarget(BaseModel):
    """Update/delete body — identifies one user by id or name, optional new email."""
    model_config = ConfigDict(populate_by_name=True)

    user_id: str | None = Field(None, alias="userId")
    name: str | None = None
    new_email: str | None = Field(None, alias="newEmail")
