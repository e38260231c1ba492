from app.matching.engine import rank, rank_candidates
from app.matching.errors import InvalidLimit, MatchingError, ProfileNotFound
from app.matching.profile import PlayerProfile, ScoredCandidate
from app.matching.scoring import score, score_pair, ScoreResult
from app.matching.store import InMemoryProfileStore, ProfileStore

__all__ = [
    "rank",
    "rank_candidates",
    "InvalidLimit",
    "MatchingError",
    "ProfileNotFound",
    "PlayerProfile",
    "ScoredCandidate",
    "score",
    "score_pair",
    "ScoreResult",
    "InMemoryProfileStore",
    "ProfileStore",
]
