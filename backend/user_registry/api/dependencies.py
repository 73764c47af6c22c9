"""Request Dependencies — build the store, clock and request body each handler receives.

Invariants:
    - One SqlAlchemyUserStore per request, bound to that request's AsyncSession
    - Handlers never reach the session manager directly
    - Request bodies may be JSON or form-encoded; both validate through the same schema
    - An empty body yields None, never a validation error

Design Decisions:
    - get_clock is a dependency so tests override time with app.dependency_overrides
    - Schema failures re-raised as RequestValidationError: one 400 rendering path
"""

import json
from typing import Callable, TypeVar

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from user_registry.core.repository_protocols import UserStore
from user_registry.infrastructure.clock import Clock, utc_now
from user_registry.infrastructure.database import get_db
from user_registry.infrastructure.user_store import SqlAlchemyUserStore

ModelT = TypeVar("ModelT", bound=BaseModel)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def get_user_store(db: AsyncSession = Depends(get_db)) -> UserStore:
    return SqlAlchemyUserStore(db)


def get_clock() -> Clock:
    return utc_now


async def _read_fields(request: Request) -> object | None:
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return dict(form) if form else None
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError as e:
        raise RequestValidationError([{
            "loc": ("body",), "msg": f"Invalid JSON: {e}", "type": "json_invalid",
        }])


def request_body(model: type[ModelT]) -> Callable:
    """Dependency parsing a JSON or form body into `model` (None when empty)."""

    async def dependency(request: Request) -> ModelT | None:
        fields = await _read_fields(request)
        if fields is None:
            return None
        try:
            return model.model_validate(fields)
        except ValidationError as e:
            raise RequestValidationError(
                [{**err, "loc": ("body", *err["loc"])} for err in e.errors()],
            )

    return dependency
