"""Validators — pure predicates for the user business rules.

Invariants:
    - All functions are PURE: no store access, no clock reads (`now` is passed in)
    - HANGUL_SYLLABLES_FIRST..HANGUL_SYLLABLES_LAST (U+AC00–U+D7A3) is the only
      disallowed range in names
    - Email check is deliberately permissive: contains '@', nothing more
    - Grace period compares fractional minutes (59.9 s is NOT elapsed, 60.0 s is)
    - Missing created_at never satisfies the grace period

Design Decisions:
    - GRACE_PERIOD_MINUTES is the single source of truth for the deletion cutoff
"""

from datetime import datetime
from typing import Any

from user_registry.core.timestamps import normalize_timestamp


HANGUL_SYLLABLES_FIRST: int = 0xAC00
HANGUL_SYLLABLES_LAST: int = 0xD7A3
GRACE_PERIOD_MINUTES: float = 1.0


def contains_disallowed_script(text: str) -> bool:
    """True if any character is a Hangul syllable."""
    return any(
        HANGUL_SYLLABLES_FIRST <= ord(ch) <= HANGUL_SYLLABLES_LAST for ch in text
    )


def is_acceptable_email_format(email: str) -> bool:
    return "@" in email


def minutes_since(created_at: Any, now: datetime) -> float | None:
    """Fractional minutes between created_at and now, or None if created_at is absent."""
    created = normalize_timestamp(created_at)
    if created is None:
        return None
    return (normalize_timestamp(now) - created).total_seconds() / 60


def is_past_grace_period(elapsed_minutes: float | None) -> bool:
    """True iff elapsed_minutes is known and at least GRACE_PERIOD_MINUTES."""
    return elapsed_minutes is not None and elapsed_minutes >= GRACE_PERIOD_MINUTES


def has_grace_period_elapsed(created_at: Any, now: datetime) -> bool:
    """True iff at least GRACE_PERIOD_MINUTES have passed since created_at."""
    return is_past_grace_period(minutes_since(created_at, now))
