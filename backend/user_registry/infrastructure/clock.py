"""Clock — the only place the service reads wall-clock time.

Invariants:
    - Always returns timezone-aware UTC datetimes

Design Decisions:
    - Injected as a FastAPI dependency (get_clock) so tests can move time forward
      instead of sleeping through the deletion grace period
"""

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
