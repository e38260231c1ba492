"""
Matchmaking engine — ranks candidate profiles for a viewing player.

Flow:
  1. Load the viewer profile from the store (ProfileNotFound if absent)
  2. Load the candidate pool, excluding the viewer and, when requested,
     every user the viewer already liked or passed
  3. Score every candidate against the viewer
  4. Stable sort by score descending (ties keep pool order)
  5. Truncate to the requested limit

The engine is pure: it performs no writes and keeps no state between calls.
"""

import logging
from typing import Iterable

from app.config import get_settings
from app.matching.errors import InvalidLimit, ProfileNotFound
from app.matching.profile import PlayerProfile, ScoredCandidate
from app.matching.scoring import score
from app.matching.store import ProfileStore

logger = logging.getLogger(__name__)


def _coerce_limit(limit) -> int:
    if limit is None:
        return get_settings().default_match_limit
    if isinstance(limit, bool):
        raise InvalidLimit(limit)
    if isinstance(limit, int):
        return limit
    try:
        return int(str(limit).strip())
    except ValueError:
        raise InvalidLimit(limit) from None


def rank(
    viewer: PlayerProfile,
    pool: Iterable[PlayerProfile],
    limit: int = 10,
) -> list[ScoredCandidate]:
    """
    Score and rank a candidate pool for a viewer.

    Args:
        viewer: Profile of the player browsing for matches
        pool: Candidate profiles, in their natural retrieval order
        limit: Maximum number of results; <= 0 yields an empty list

    Returns:
        ScoredCandidate list sorted by match_score descending.
    """
    if limit <= 0:
        return []

    scored = [ScoredCandidate(profile=c, match_score=score(viewer, c)) for c in pool]
    # list.sort is stable, so equal scores keep their pool order
    scored.sort(key=lambda c: c.match_score, reverse=True)
    return scored[:limit]


def rank_candidates(
    viewer_id: str,
    store: ProfileStore,
    seen: Iterable[str] | None = None,
    limit=None,
    exclude_viewed: bool = True,
) -> list[ScoredCandidate]:
    """
    Rank potential matches for viewer_id from the profiles in store.

    Args:
        viewer_id: User id of the viewing player
        store: Profile store providing get_profile / list_profiles
        seen: User ids the viewer already liked or passed
        limit: Maximum number of results (default from settings)
        exclude_viewed: Whether to drop seen users from the pool

    Raises:
        ProfileNotFound: viewer has no profile
        InvalidLimit: limit is not an integer

    Returns:
        Ranked ScoredCandidate list.
    """
    limit = _coerce_limit(limit)

    viewer = store.get_profile(viewer_id)
    if viewer is None:
        raise ProfileNotFound(viewer_id)

    excluded = set(seen or ()) if exclude_viewed else set()

    pool = store.list_profiles(
        exclude_user_id=viewer_id,
        exclude_ids=excluded or None,
    )
    excluded.add(viewer_id)
    pool = [p for p in pool if p.user_id not in excluded]

    if not pool:
        logger.info(
            "No candidates for %s (%d excluded as already seen)",
            viewer_id,
            len(excluded) - 1,
        )
        return []

    ranked = rank(viewer, pool, limit)

    logger.info(
        "Ranked %d candidates for %s, returning %d",
        len(pool),
        viewer_id,
        len(ranked),
    )
    return ranked
