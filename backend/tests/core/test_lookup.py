"""Name Match Classification — tests for the tagged NotFound/Found/Ambiguous outcome.

Tests cover:
    - 0 matches → NotFound
    - 1 match → Found with id and record
    - 2+ matches → Ambiguous with count and no record
"""

from user_registry.core.domain_types import MatchStatus, UserId
from user_registry.core.lookup import Ambiguous, Found, NotFound, classify_matches


def _match(uid: str, name: str = "Lee"):
    return (UserId(uid), {"name": name, "email": f"{uid}@example.com"})


def test_no_matches_is_not_found():
    outcome = classify_matches([])
    assert isinstance(outcome, NotFound)
    assert outcome.status == MatchStatus.NOT_FOUND


def test_single_match_is_found():
    outcome = classify_matches([_match("u1")])
    assert isinstance(outcome, Found)
    assert outcome.status == MatchStatus.FOUND
    assert outcome.user_id == "u1"
    assert outcome.record["email"] == "u1@example.com"


def test_two_matches_are_ambiguous():
    outcome = classify_matches([_match("u1"), _match("u2")])
    assert isinstance(outcome, Ambiguous)
    assert outcome.status == MatchStatus.AMBIGUOUS
    assert outcome.count == 2


def test_ambiguous_carries_full_count():
    outcome = classify_matches([_match(f"u{i}") for i in range(5)])
    assert outcome.count == 5


def test_ambiguous_has_no_record():
    outcome = classify_matches([_match("u1"), _match("u2")])
    assert not hasattr(outcome, "record")
    assert not hasattr(outcome, "user_id")
