"""Name Resolver — single source of truth for "find the one user with this name".

Invariants:
    - Always an equality query on `name`; never a prefix or case-folded match
    - Classification delegated to core.lookup.classify_matches (pure)
    - Shared by update-by-name and delete-by-name; get-by-name does NOT use it
      (reads return every match)
"""

import logging

from user_registry.core.domain_types import UserField
from user_registry.core.lookup import LookupOutcome, classify_matches
from user_registry.core.repository_protocols import UserStore

logger = logging.getLogger(__name__)


async def resolve_by_name(store: UserStore, name: str) -> LookupOutcome:
    """Query the store by name and classify the result."""
    matches = await store.query_by_field(UserField.NAME.value, name)
    outcome = classify_matches(matches)
    logger.debug(
        f"Resolved name lookup: {outcome.status.value}",
        extra={"match_count": len(matches), "operation": "resolve_by_name"},
    )
    return outcome
