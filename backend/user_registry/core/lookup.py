"""Name Match Classification — tagged outcome for lookups that need exactly one record.

Invariants:
    - classify_matches is PURE: takes the query result, returns an outcome
    - 0 matches → NotFound, 1 → Found, >1 → Ambiguous(count)
    - Ambiguous never carries a record: callers cannot pick one by accident

Design Decisions:
    - Frozen dataclasses with a `status` tag over exceptions: update and delete map
      the same outcome to different messages, so the decision stays with the caller
"""

from dataclasses import dataclass, field
from typing import Sequence, Union

from user_registry.core.domain_types import MatchStatus, UserId, UserRecord


@dataclass(frozen=True)
class NotFound:
    status: MatchStatus = field(default=MatchStatus.NOT_FOUND, init=False)


@dataclass(frozen=True)
class Found:
    user_id: UserId
    record: UserRecord
    status: MatchStatus = field(default=MatchStatus.FOUND, init=False)


@dataclass(frozen=True)
class Ambiguous:
    count: int
    status: MatchStatus = field(default=MatchStatus.AMBIGUOUS, init=False)


LookupOutcome = Union[NotFound, Found, Ambiguous]


def classify_matches(matches: Sequence[tuple[UserId, UserRecord]]) -> LookupOutcome:
    """Classify an equality-query result by match count."""
    if not matches:
        return NotFound()
    if len(matches) > 1:
        return Ambiguous(count=len(matches))
    user_id, record = matches[0]
    return Found(user_id=user_id, record=record)
