"""User Routes — one endpoint per handler, one HTTP method per endpoint.

Invariants:
    - Paths mirror the function names clients already call (createUser, getUserByName, ...)
    - Update/delete parameters read from the query string first, then the body (JSON or form)
    - Any non-domain exception from a handler becomes UnexpectedError (500 with detail)
    - Routes contain no business rules: extract parameters, call handler, return dict

Design Decisions:
    - Handlers built per request from injected store + clock (no global store handle)
    - Wrong-method requests are rejected by the router (405), rendered in error_handlers
"""

import logging
from typing import Awaitable

from fastapi import APIRouter, Depends, Query, status

from user_registry.api.dependencies import get_clock, get_user_store, request_body
from user_registry.core.errors import UnexpectedError, UserRegistryError
from user_registry.core.repository_protocols import UserStore
from user_registry.infrastructure.clock import Clock
from user_registry.schemas.user import UserCreate, UserTarget
from user_registry.services.handle_create import CreateHandlers
from user_registry.services.handle_delete import DeleteHandlers
from user_registry.services.handle_read import ReadHandlers
from user_registry.services.handle_update import UpdateHandlers

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["users"])

_create_body = request_body(UserCreate)
_target_body = request_body(UserTarget)


async def _run(operation: str, call: Awaitable[dict]) -> dict:
    """Await a handler, converting unexpected failures into UnexpectedError."""
    try:
        return await call
    except UserRegistryError:
        raise
    except Exception as e:
        logger.error(
            f"{operation} failed: {e}", exc_info=True, extra={"operation": operation},
        )
        raise UnexpectedError(str(e), operation) from e


def _pick(query_value: str | None, body: UserTarget | None, attr: str) -> str | None:
    if query_value:
        return query_value
    return getattr(body, attr) if body else None


@router.post("/createUser", status_code=status.HTTP_201_CREATED)
async def create_user(
    body: UserCreate | None = Depends(_create_body),
    store: UserStore = Depends(get_user_store),
    clock: Clock = Depends(get_clock),
):
    """Create a user from a JSON or form body {name, email}."""
    body = body or UserCreate()
    return await _run(
        "create_user", CreateHandlers(store, clock).create_user(body.name, body.email),
    )


@router.get("/getUserByName")
async def get_user_by_name(
    name: str | None = Query(None),
    store: UserStore = Depends(get_user_store),
):
    """Return every user with exactly this name."""
    return await _run("get_user_by_name", ReadHandlers(store).get_users_by_name(name))


@router.put("/updateEmail")
async def update_email(
    user_id: str | None = Query(None, alias="userId"),
    new_email: str | None = Query(None, alias="newEmail"),
    body: UserTarget | None = Depends(_target_body),
    store: UserStore = Depends(get_user_store),
    clock: Clock = Depends(get_clock),
):
    """Update a user's email by id."""
    return await _run(
        "update_email",
        UpdateHandlers(store, clock).update_email_by_id(
            _pick(user_id, body, "user_id"), _pick(new_email, body, "new_email"),
        ),
    )


@router.put("/updateEmailByName")
async def update_email_by_name(
    name: str | None = Query(None),
    new_email: str | None = Query(None, alias="newEmail"),
    body: UserTarget | None = Depends(_target_body),
    store: UserStore = Depends(get_user_store),
    clock: Clock = Depends(get_clock),
):
    """Update a user's email by name; 409 when the name is shared."""
    return await _run(
        "update_email_by_name",
        UpdateHandlers(store, clock).update_email_by_name(
            _pick(name, body, "name"), _pick(new_email, body, "new_email"),
        ),
    )


@router.delete("/deleteUser")
async def delete_user(
    user_id: str | None = Query(None, alias="userId"),
    body: UserTarget | None = Depends(_target_body),
    store: UserStore = Depends(get_user_store),
    clock: Clock = Depends(get_clock),
):
    """Delete a user by id once the grace period has passed."""
    return await _run(
        "delete_user",
        DeleteHandlers(store, clock).delete_user_by_id(_pick(user_id, body, "user_id")),
    )


@router.delete("/deleteUserByName")
async def delete_user_by_name(
    name: str | None = Query(None),
    body: UserTarget | None = Depends(_target_body),
    store: UserStore = Depends(get_user_store),
    clock: Clock = Depends(get_clock),
):
    """Delete a user by name once the grace period has passed; 409 when shared."""
    return await _run(
        "delete_user_by_name",
        DeleteHandlers(store, clock).delete_user_by_name(_pick(name, body, "name")),
    )


@router.get("/getAllUsers")
async def get_all_users(store: UserStore = Depends(get_user_store)):
    """Return every user; 404 when the store is empty."""
    return await _run("get_all_users", ReadHandlers(store).list_users())
