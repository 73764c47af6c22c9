"""Timestamp Normalization — one conversion point for every stored timestamp.

Invariants:
    - normalize_timestamp always returns a timezone-aware UTC datetime or None
    - Naive datetimes are interpreted as UTC (SQLite drops tzinfo on read)
    - Numeric values are epoch seconds
    - Unknown shapes raise TypeError (never silently coerced to None)

Design Decisions:
    - Duck-typed store-native timestamps (to_datetime / ToDatetime): covers document
      store SDK types without importing them into core
"""

from datetime import date, datetime, timezone
from typing import Any


def normalize_timestamp(value: Any) -> datetime | None:
    """Convert a stored timestamp of any supported shape to an aware UTC datetime."""
    if value is None:
        return None
    for attr in ("to_datetime", "ToDatetime"):
        converter = getattr(value, attr, None)
        if callable(converter):
            value = converter()
            break
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, bool):
        raise TypeError("boolean is not a timestamp")
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        return normalize_timestamp(datetime.fromisoformat(text))
    raise TypeError(f"Unsupported timestamp type: {type(value).__name__}")


def format_timestamp(value: Any) -> str | None:
    """Render a stored timestamp as ISO-8601 (UTC), or None when absent."""
    normalized = normalize_timestamp(value)
    return normalized.isoformat() if normalized else None
