"""
Skill compatibility rule (Weight: 40 points).

Compares the two players' skill levels (roughly on a 0-5 scale). Players
enjoy games most against opponents of similar strength, so the score decays
linearly with the skill gap.

Scoring:
  - Same level: full weight (40 pts)
  - Each level of difference costs 25 points on a 0-100 scale
  - Gap of 4 or more levels: 0 pts
"""

import math

from app.matching.profile import PlayerProfile


def score(
    viewer: PlayerProfile,
    candidate: PlayerProfile,
    weight: float = 40.0,
    gap_penalty: float = 25.0,
) -> dict:
    """
    Score skill compatibility between viewer and candidate.

    Args:
        viewer: Profile of the player browsing for matches
        candidate: Profile being scored
        weight: Maximum score for this rule
        gap_penalty: Points lost (out of 100) per level of skill difference

    Returns:
        dict with keys: score (float), max_score (float), details (str)
    """
    diff = abs(viewer.skill_level - candidate.skill_level)

    if not math.isfinite(diff):
        return {
            "score": 0.0,
            "max_score": weight,
            "details": "Skill level not comparable",
        }

    sub_score = max(0.0, 100.0 - diff * gap_penalty)

    if sub_score == 0:
        return {
            "score": 0.0,
            "max_score": weight,
            "details": f"Skill gap too large: {viewer.skill_level} vs {candidate.skill_level}",
        }

    return {
        "score": sub_score * (weight / 100.0),
        "max_score": weight,
        "details": f"Skill gap {diff:g}: {viewer.skill_level} vs {candidate.skill_level} ({sub_score:.0f}% compatible)",
    }
