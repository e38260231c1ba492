"""
Game type overlap rule (Weight: 20 points).

Compares the sets of preferred game types (8-Ball, 9-Ball, Snooker, ...).
The overlap is measured against the larger of the two sets, so a player
with many preferences is not a perfect fit for a player with one.

Scoring:
  - common / max(|viewer|, |candidate|) * weight
  - No common game type (or either set empty): 0 pts
"""

from app.matching.profile import PlayerProfile


def score(
    viewer: PlayerProfile,
    candidate: PlayerProfile,
    weight: float = 20.0,
) -> dict:
    """
    Score game type overlap between viewer and candidate.

    Returns:
        dict with keys: score (float), max_score (float), details (str)
    """
    viewer_types = viewer.preferred_game_types
    candidate_types = candidate.preferred_game_types
    common = viewer_types & candidate_types

    if not common:
        return {
            "score": 0.0,
            "max_score": weight,
            "details": "No common game types",
        }

    ratio = len(common) / max(len(viewer_types), len(candidate_types))
    return {
        "score": ratio * weight,
        "max_score": weight,
        "details": f"Common game types: {', '.join(sorted(common))} ({ratio:.0%} overlap)",
    }
