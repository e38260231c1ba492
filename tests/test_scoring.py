"""
Tests for scoring.py - combined compatibility score.
"""

import pytest

from app.matching.scoring import score, score_pair, round_half_up


@pytest.fixture
def brisbane_player(make_player):
    def _make(user_id: str, **overrides):
        fields = {
            "skill_level": 3.0,
            "preferred_location": "Brisbane",
            "preferred_game_types": ["Billiards"],
            "availability": {"Mon": ["Evening"]},
        }
        fields.update(overrides)
        return make_player(user_id, **fields)

    return _make


class TestScore:
    """Test the 0-100 match score."""

    def test_identical_profiles_score_100(self, brisbane_player):
        assert score(brisbane_player("viewer"), brisbane_player("candidate")) == 100

    def test_self_score_is_100_when_all_fields_present(self, brisbane_player):
        player = brisbane_player("p", preferred_game_types=["8-Ball", "9-Ball"])
        assert score(player, player) == 100

    def test_bare_profiles_score_skill_only(self, make_player):
        """All optional fields absent: 40 for equal skill, 0 for everything else."""
        assert score(make_player("a", skill_level=2.0), make_player("b", skill_level=2.0)) == 40

    def test_large_skill_gap_and_nothing_shared_scores_zero(self, make_player):
        viewer = make_player("a", skill_level=1.0, preferred_game_types=["Snooker"])
        candidate = make_player("b", skill_level=5.0, preferred_game_types=["8-Ball"])
        assert score(viewer, candidate) == 0

    def test_game_type_half_overlap(self, make_player):
        viewer = make_player("a", skill_level=2.0, preferred_game_types=["A", "B"])
        candidate = make_player("b", skill_level=2.0, preferred_game_types=["B", "C"])
        assert score(viewer, candidate) == 50

    def test_rounds_half_up(self, make_player):
        """35 (skill gap 0.5) + 7.5 (different locations) = 42.5 -> 43."""
        viewer = make_player("a", skill_level=2.0, preferred_location="Brisbane")
        candidate = make_player("b", skill_level=2.5, preferred_location="Sydney")
        assert score(viewer, candidate) == 43

    def test_missing_factors_still_count_in_denominator(self, make_player):
        """Location present on one side only adds nothing and is not renormalized away."""
        viewer = make_player("a", skill_level=2.0, preferred_location="Brisbane")
        candidate = make_player("b", skill_level=2.0)
        assert score(viewer, candidate) == 40

    def test_score_is_int_in_range(self, make_player, brisbane_player):
        pairs = [
            (make_player("a"), make_player("b")),
            (make_player("a", skill_level=0.0), make_player("b", skill_level=100.0)),
            (brisbane_player("a"), make_player("b", skill_level=3.3)),
            (brisbane_player("a", availability={}), brisbane_player("b", preferred_location="Perth")),
        ]
        for viewer, candidate in pairs:
            value = score(viewer, candidate)
            assert isinstance(value, int)
            assert 0 <= value <= 100


class TestScorePair:
    """Test the per-rule breakdown."""

    def test_breakdown_has_all_rules(self, brisbane_player):
        result = score_pair(brisbane_player("a"), brisbane_player("b", preferred_location="Sydney"))

        assert set(result.rule_scores) == {"skill", "location", "game_type", "availability"}
        assert result.max_possible == 100.0
        assert result.rule_scores["location"]["score"] == pytest.approx(7.5)
        assert result.total_score == pytest.approx(82.5)
        assert result.match_score == 83

    def test_each_rule_reports_details(self, make_player):
        result = score_pair(make_player("a"), make_player("b"))
        for rule in result.rule_scores.values():
            assert rule["details"]


class TestRoundHalfUp:

    @pytest.mark.parametrize(
        "value,expected",
        [(0.0, 0), (0.49, 0), (0.5, 1), (42.5, 43), (43.5, 44), (99.5, 100), (100.0, 100)],
    )
    def test_values(self, value, expected):
        assert round_half_up(value) == expected
