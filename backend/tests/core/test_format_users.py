"""User Formatting — tests for the public JSON shape of stored records.

Tests cover:
    - Output keys are exactly id, name, email, createdAt, updatedAt
    - Timestamps normalized to ISO-8601 regardless of stored shape
    - Missing timestamps render as None
"""

from datetime import datetime, timezone

from user_registry.core.format_users import format_user, format_users


def test_format_user_keys_and_values():
    created = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
    user = format_user("u1", {
        "name": "Kim", "email": "a@b.com", "createdAt": created, "updatedAt": created,
    })
    assert user == {
        "id": "u1",
        "name": "Kim",
        "email": "a@b.com",
        "createdAt": "2026-01-01T12:00:00+00:00",
        "updatedAt": "2026-01-01T12:00:00+00:00",
    }


def test_format_user_normalizes_mixed_timestamp_shapes():
    user = format_user("u1", {
        "name": "Kim", "email": "a@b.com",
        "createdAt": "2026-01-01T12:00:00Z",
        "updatedAt": datetime(2026, 1, 1, 12, 5, 0),
    })
    assert user["createdAt"] == "2026-01-01T12:00:00+00:00"
    assert user["updatedAt"] == "2026-01-01T12:05:00+00:00"


def test_format_user_missing_timestamps():
    user = format_user("u1", {"name": "Kim", "email": "a@b.com"})
    assert user["createdAt"] is None
    assert user["updatedAt"] is None


def test_format_users_preserves_order():
    users = format_users([
        ("u2", {"name": "B", "email": "b@x"}),
        ("u1", {"name": "A", "email": "a@x"}),
    ])
    assert [u["id"] for u in users] == ["u2", "u1"]
