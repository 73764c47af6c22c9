"""User Schemas — JSON body validation at the API boundary.

Invariants:
    - Missing fields are allowed (handlers report them with domain messages)
    - Non-string values are rejected
    - camelCase wire names map to snake_case attributes
"""

import pytest
from pydantic import ValidationError

from user_registry.schemas.user import UserCreate, UserTarget


def test_user_create_fields_default_to_none():
    body = UserCreate()
    assert body.name is None
    assert body.email is None


def test_user_create_accepts_hangul_name():
    # Script rules belong to the handler, not the schema
    assert UserCreate(name="홍길동", email="a@b.com").name == "홍길동"


def test_user_create_rejects_non_string_name():
    with pytest.raises(ValidationError):
        UserCreate(name=123, email="a@b.com")


def test_user_target_reads_camel_case_aliases():
    body = UserTarget.model_validate({"userId": "u1", "newEmail": "x@y"})
    assert body.user_id == "u1"
    assert body.new_email == "x@y"
    assert body.name is None


def test_user_target_accepts_field_names():
    body = UserTarget(user_id="u1", new_email="x@y")
    assert body.user_id == "u1"
