"""
Scoring combiner — runs all compatibility rules and produces a total score.

Takes a viewer and a candidate profile, executes all 4 rules with their
configured weights, and returns a combined score with a per-rule breakdown.

Every rule's weight counts toward max_possible even when the rule has
nothing to compare (missing location, no game types, ...). The final match
score is total / max_possible * 100, rounded half up to an integer.
"""

import math
from dataclasses import dataclass, field

from app.config import get_settings
from app.matching.profile import PlayerProfile
from app.matching.rules import (
    skill_match,
    location_match,
    game_type_match,
    availability_match,
)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


@dataclass
class ScoreResult:
    """Result of scoring a viewer/candidate pair."""

    total_score: float
    max_possible: float
    rule_scores: dict = field(default_factory=dict)

    @property
    def match_score(self) -> int:
        if self.max_possible <= 0:
            return 0
        percentage = self.total_score * 100 / self.max_possible
        return min(100, max(0, round_half_up(percentage)))


def score_pair(viewer: PlayerProfile, candidate: PlayerProfile) -> ScoreResult:
    """
    Score a viewer/candidate pair using all compatibility rules.

    Weights are loaded from application settings (config.py).

    Returns:
        ScoreResult with total score, max possible, and per-rule breakdown.
    """
    settings = get_settings()

    rules = [
        ("skill", skill_match.score, settings.skill_match_weight),
        ("location", location_match.score, settings.location_match_weight),
        ("game_type", game_type_match.score, settings.game_type_match_weight),
        ("availability", availability_match.score, settings.availability_match_weight),
    ]

    rule_scores = {}
    total_score = 0.0
    max_possible = 0.0

    for rule_name, rule_fn, weight in rules:
        if rule_name == "skill":
            result = rule_fn(
                viewer,
                candidate,
                weight=weight,
                gap_penalty=settings.skill_gap_penalty,
            )
        elif rule_name == "location":
            result = rule_fn(
                viewer,
                candidate,
                weight=weight,
                partial_credit=settings.location_partial_credit,
            )
        else:
            result = rule_fn(viewer, candidate, weight=weight)

        rule_scores[rule_name] = result
        total_score += result["score"]
        max_possible += result["max_score"]

    return ScoreResult(
        total_score=total_score,
        max_possible=max_possible,
        rule_scores=rule_scores,
    )


def score(viewer: PlayerProfile, candidate: PlayerProfile) -> int:
    """Compatibility of candidate for viewer as an integer 0-100."""
    return score_pair(viewer, candidate).match_score
