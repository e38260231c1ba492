"""
Matchmaking service — glues the scoring engine to the database.

Called by the /matchmaking endpoints. Keeps the API layer thin:
  - potential matches: seen-set lookup + engine ranking + profile hydration
  - like/pass actions: records the action, detects mutual likes and
    creates match notifications for both players
  - mutual matches and per-user statistics
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime

from sqlalchemy.orm import Session

from app.matching.engine import rank_candidates
from app.matching.errors import ProfileNotFound
from app.matching.scoring import score_pair, ScoreResult
from app.models.like import Like, LikeAction
from app.models.notification import Notification
from app.models.profile import Profile
from app.services.profile_store import SqlProfileStore

logger = logging.getLogger(__name__)


@dataclass
class PotentialMatchesResult:
    """Ranked candidates for one viewer."""

    matches: list = field(default_factory=list)  # (Profile, match_score) tuples
    viewed_count: int = 0
    request_time: datetime = field(default_factory=datetime.utcnow)

    @property
    def total_found(self) -> int:
        return len(self.matches)


@dataclass
class ActionResult:
    """Outcome of a like/pass action."""

    action: LikeAction
    is_match: bool = False

    @property
    def message(self) -> str:
        if self.is_match:
            return "It's a match!"
        return f"{self.action.value} recorded successfully"


@dataclass
class MatchStats:
    """Like/pass/match counters for one user."""

    total_likes: int = 0
    total_passes: int = 0
    total_matches: int = 0

    @property
    def total_actions(self) -> int:
        return self.total_likes + self.total_passes

    @property
    def match_rate(self) -> float:
        if self.total_likes == 0:
            return 0.0
        return round(self.total_matches / self.total_likes * 100, 1)

    def to_dict(self) -> dict:
        return {
            "total_likes": self.total_likes,
            "total_passes": self.total_passes,
            "total_matches": self.total_matches,
            "total_actions": self.total_actions,
            "match_rate": self.match_rate,
        }


def get_seen_user_ids(db: Session, user_id: str) -> set[str]:
    """User ids this user already liked or passed."""
    rows = db.query(Like.target_user_id).filter(Like.user_id == user_id).distinct().all()
    return {row[0] for row in rows}


def find_potential_matches(
    db: Session,
    user_id: str,
    limit: int | None = None,
    exclude_viewed: bool = True,
) -> PotentialMatchesResult:
    """
    Rank potential matches for a user.

    Raises:
        ProfileNotFound: the user has no profile
        InvalidLimit: limit is not an integer
    """
    result = PotentialMatchesResult()

    seen = get_seen_user_ids(db, user_id) if exclude_viewed else set()
    result.viewed_count = len(seen)

    logger.info(
        "Finding potential matches for %s (limit=%s, exclude_viewed=%s, viewed=%d)",
        user_id,
        limit,
        exclude_viewed,
        len(seen),
    )

    ranked = rank_candidates(
        user_id,
        SqlProfileStore(db),
        seen=seen,
        limit=limit,
        exclude_viewed=exclude_viewed,
    )
    if not ranked:
        return result

    ids = [c.profile.user_id for c in ranked]
    rows = {p.user_id: p for p in db.query(Profile).filter(Profile.user_id.in_(ids)).all()}
    result.matches = [
        (rows[c.profile.user_id], c.match_score)
        for c in ranked
        if c.profile.user_id in rows
    ]
    return result


def explain_score(db: Session, user_id: str, target_user_id: str) -> ScoreResult:
    """Per-rule score breakdown of target_user_id from user_id's point of view."""
    store = SqlProfileStore(db)

    viewer = store.get_profile(user_id)
    if viewer is None:
        raise ProfileNotFound(user_id)
    candidate = store.get_profile(target_user_id)
    if candidate is None:
        raise ProfileNotFound(target_user_id)

    return score_pair(viewer, candidate)


def record_action(
    db: Session,
    user_id: str,
    target_user_id: str,
    action: LikeAction,
) -> ActionResult:
    """
    Record a like or pass. A like on someone who already liked the user
    back is a match: both like records are flagged and both players get a
    notification.

    Repeating an action on the same target replaces the previous one. A
    repeated like on an existing match does not notify again.
    """
    result = ActionResult(action=action)

    reverse_like = (
        db.query(Like)
        .filter(
            Like.user_id == target_user_id,
            Like.target_user_id == user_id,
            Like.action == LikeAction.LIKE,
        )
        .first()
    )
    result.is_match = action == LikeAction.LIKE and reverse_like is not None

    existing = (
        db.query(Like)
        .filter(Like.user_id == user_id, Like.target_user_id == target_user_id)
        .first()
    )
    already_matched = existing is not None and bool(existing.is_match)
    if existing is not None:
        existing.action = action
        existing.is_match = result.is_match
    else:
        db.add(
            Like(
                user_id=user_id,
                target_user_id=target_user_id,
                action=action,
                is_match=result.is_match,
            )
        )

    if reverse_like is not None:
        reverse_like.is_match = result.is_match

    logger.info("User %s %s %s", user_id, action.value, target_user_id)

    if result.is_match and not already_matched:
        _create_match_notifications(db, user_id, target_user_id)
        logger.info("Match created between %s and %s", user_id, target_user_id)

    db.commit()
    return result


def _create_match_notifications(db: Session, user_id: str, target_user_id: str) -> None:
    """Notify both players of a new match."""
    profiles = {
        p.user_id: p
        for p in db.query(Profile)
        .filter(Profile.user_id.in_([user_id, target_user_id]))
        .all()
    }
    actor = profiles.get(user_id)
    target = profiles.get(target_user_id)
    actor_name = (actor.first_name if actor else None) or "Someone"
    target_name = (target.first_name if target else None) or "Someone"

    db.add(
        Notification(
            user_id=target_user_id,
            type="match",
            related_user_id=user_id,
            message=f"It's a match! {actor_name} liked you back!",
        )
    )
    db.add(
        Notification(
            user_id=user_id,
            type="match",
            related_user_id=target_user_id,
            message=f"It's a match! You and {target_name} liked each other!",
        )
    )


def get_mutual_matches(db: Session, user_id: str) -> list[Profile]:
    """Profiles of users this user has matched with."""
    matched_ids = [
        row[0]
        for row in db.query(Like.target_user_id)
        .filter(Like.user_id == user_id, Like.is_match.is_(True))
        .all()
    ]
    if not matched_ids:
        return []

    return (
        db.query(Profile)
        .filter(Profile.user_id.in_(matched_ids))
        .order_by(Profile.created_at, Profile.seq)
        .all()
    )


def get_stats(db: Session, user_id: str) -> MatchStats:
    """Count likes, passes and matches made by a user."""
    base = db.query(Like).filter(Like.user_id == user_id)
    return MatchStats(
        total_likes=base.filter(Like.action == LikeAction.LIKE).count(),
        total_passes=base.filter(Like.action == LikeAction.PASS).count(),
        total_matches=base.filter(Like.is_match.is_(True)).count(),
    )
