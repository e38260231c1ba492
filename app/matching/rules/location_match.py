"""
Location proximity rule (Weight: 25 points).

Compares the players' preferred locations as plain strings. There is no
geocoding; two different named locations still earn a little credit since
both players at least stated where they play.

Scoring:
  - Same location: full weight (25 pts)
  - Both present but different: 30% of weight (7.5 pts)
  - Missing on either side: 0 pts
"""

from app.matching.profile import PlayerProfile


def score(
    viewer: PlayerProfile,
    candidate: PlayerProfile,
    weight: float = 25.0,
    partial_credit: float = 0.3,
) -> dict:
    """
    Score location proximity between viewer and candidate.

    Returns:
        dict with keys: score (float), max_score (float), details (str)
    """
    viewer_location = viewer.preferred_location
    candidate_location = candidate.preferred_location

    if not viewer_location or not candidate_location:
        return {
            "score": 0.0,
            "max_score": weight,
            "details": "Missing location on one or both sides",
        }

    if viewer_location == candidate_location:
        return {
            "score": weight,
            "max_score": weight,
            "details": f"Same location: '{viewer_location}'",
        }

    return {
        "score": weight * partial_credit,
        "max_score": weight,
        "details": f"Different locations: '{viewer_location}' != '{candidate_location}'",
    }
