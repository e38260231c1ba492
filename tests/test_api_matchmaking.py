"""
Tests for the /matchmaking endpoints.
"""

import pytest


@pytest.fixture
def players(create_profile, brisbane_player_payload):
    """Viewer, a perfect match, and a weak match, created in that order."""
    create_profile("viewer", **brisbane_player_payload)
    create_profile("twin", **{**brisbane_player_payload, "first_name": "Jordan"})
    create_profile("rookie", first_name="Casey", skill_level=1.0, preferred_location="Sydney")


def like(client, user_id, target_user_id, action="like"):
    response = client.post(
        "/api/v1/matchmaking/action",
        json={"user_id": user_id, "target_user_id": target_user_id, "action": action},
    )
    assert response.status_code == 200, response.text
    return response.json()


class TestPotentialMatches:
    """Test GET /matchmaking/{user_id}/potential-matches."""

    def test_ranked_by_score(self, client, players):
        response = client.get("/api/v1/matchmaking/viewer/potential-matches")

        assert response.status_code == 200
        body = response.json()
        assert [m["user_id"] for m in body["matches"]] == ["twin", "rookie"]
        assert body["matches"][0]["match_score"] == 100
        assert body["matches"][1]["match_score"] == 28
        assert body["total_found"] == 2
        assert body["viewed_count"] == 0

    def test_limit(self, client, players):
        body = client.get("/api/v1/matchmaking/viewer/potential-matches?limit=1").json()
        assert [m["user_id"] for m in body["matches"]] == ["twin"]

    def test_zero_limit(self, client, players):
        body = client.get("/api/v1/matchmaking/viewer/potential-matches?limit=0").json()
        assert body["matches"] == []
        assert body["total_found"] == 0

    def test_non_numeric_limit(self, client, players):
        response = client.get("/api/v1/matchmaking/viewer/potential-matches?limit=abc")
        assert response.status_code == 422

    def test_seen_users_excluded(self, client, players):
        like(client, "viewer", "twin")

        body = client.get("/api/v1/matchmaking/viewer/potential-matches").json()
        assert [m["user_id"] for m in body["matches"]] == ["rookie"]
        assert body["viewed_count"] == 1

    def test_passed_users_excluded(self, client, players):
        like(client, "viewer", "rookie", action="pass")

        body = client.get("/api/v1/matchmaking/viewer/potential-matches").json()
        assert [m["user_id"] for m in body["matches"]] == ["twin"]

    def test_seen_users_included_when_not_excluding(self, client, players):
        like(client, "viewer", "twin")

        body = client.get(
            "/api/v1/matchmaking/viewer/potential-matches?exclude_viewed=false"
        ).json()
        assert [m["user_id"] for m in body["matches"]] == ["twin", "rookie"]

    def test_missing_viewer(self, client, players):
        response = client.get("/api/v1/matchmaking/ghost/potential-matches")
        assert response.status_code == 404

    def test_no_other_profiles(self, client, create_profile):
        create_profile("loner")
        body = client.get("/api/v1/matchmaking/loner/potential-matches").json()
        assert body["matches"] == []


class TestScoreBreakdown:
    """Test GET /matchmaking/{user_id}/score/{target_user_id}."""

    def test_breakdown(self, client, players):
        response = client.get("/api/v1/matchmaking/viewer/score/rookie")

        assert response.status_code == 200
        body = response.json()
        assert body["match_score"] == 28
        assert body["max_possible"] == 100.0
        assert body["rules"]["skill"]["score"] == 20.0
        assert body["rules"]["location"]["score"] == 7.5
        assert body["rules"]["game_type"]["score"] == 0.0
        assert body["rules"]["availability"]["score"] == 0.0

    def test_missing_target(self, client, players):
        assert client.get("/api/v1/matchmaking/viewer/score/ghost").status_code == 404


class TestActions:
    """Test POST /matchmaking/action and mutual matches."""

    def test_one_sided_like_is_not_a_match(self, client, players):
        body = like(client, "viewer", "twin")

        assert body["is_match"] is False
        assert body["action"] == "like"

    def test_mutual_like_creates_match(self, client, players):
        like(client, "viewer", "twin")
        body = like(client, "twin", "viewer")

        assert body["is_match"] is True
        assert body["message"] == "It's a match!"

        viewer_matches = client.get("/api/v1/matchmaking/viewer/matches").json()
        twin_matches = client.get("/api/v1/matchmaking/twin/matches").json()
        assert [p["user_id"] for p in viewer_matches["matches"]] == ["twin"]
        assert [p["user_id"] for p in twin_matches["matches"]] == ["viewer"]
        assert viewer_matches["total_matches"] == 1

    def test_mutual_like_notifies_both(self, client, players):
        like(client, "viewer", "twin")
        like(client, "twin", "viewer")

        viewer_notes = client.get("/api/v1/notifications/viewer").json()["notifications"]
        twin_notes = client.get("/api/v1/notifications/twin").json()["notifications"]

        assert len(viewer_notes) == 1
        assert viewer_notes[0]["type"] == "match"
        assert viewer_notes[0]["related_user_id"] == "twin"
        assert viewer_notes[0]["message"] == "It's a match! Jordan liked you back!"
        assert twin_notes[0]["message"] == "It's a match! You and Alex liked each other!"

    def test_repeated_like_does_not_notify_again(self, client, players):
        like(client, "viewer", "twin")
        like(client, "twin", "viewer")
        body = like(client, "twin", "viewer")

        assert body["is_match"] is True
        viewer_notes = client.get("/api/v1/notifications/viewer").json()
        assert viewer_notes["unread_count"] == 1
        assert len(viewer_notes["notifications"]) == 1
        assert client.get("/api/v1/notifications/twin/unread-count").json() == {"count": 1}
        assert client.get("/api/v1/matchmaking/twin/stats").json()["total_matches"] == 1

    def test_like_after_pass_is_not_a_match(self, client, players):
        like(client, "viewer", "twin", action="pass")
        body = like(client, "twin", "viewer")

        assert body["is_match"] is False
        assert client.get("/api/v1/notifications/twin").json()["notifications"] == []

    def test_invalid_action(self, client, players):
        response = client.post(
            "/api/v1/matchmaking/action",
            json={"user_id": "viewer", "target_user_id": "twin", "action": "superlike"},
        )
        assert response.status_code == 422

    def test_self_action_rejected(self, client, players):
        response = client.post(
            "/api/v1/matchmaking/action",
            json={"user_id": "viewer", "target_user_id": "viewer", "action": "like"},
        )
        assert response.status_code == 400


class TestStats:
    """Test GET /matchmaking/{user_id}/stats."""

    def test_empty(self, client):
        body = client.get("/api/v1/matchmaking/nobody/stats").json()

        assert body == {
            "total_likes": 0,
            "total_passes": 0,
            "total_matches": 0,
            "total_actions": 0,
            "match_rate": 0.0,
        }

    def test_counts(self, client, players, create_profile):
        create_profile("third")
        like(client, "twin", "viewer")
        like(client, "viewer", "twin")
        like(client, "viewer", "third")
        like(client, "viewer", "rookie", action="pass")

        body = client.get("/api/v1/matchmaking/viewer/stats").json()

        assert body["total_likes"] == 2
        assert body["total_passes"] == 1
        assert body["total_matches"] == 1
        assert body["total_actions"] == 3
        assert body["match_rate"] == 50.0
