"""
Tests for the /usernames endpoints and profile usernames.
"""

import pytest


def reserve(client, username, user_id):
    return client.post(
        "/api/v1/usernames/reserve", json={"username": username, "user_id": user_id}
    )


class TestCheckUsername:
    """Test GET /usernames/check."""

    def test_available(self, client):
        response = client.get("/api/v1/usernames/check", params={"username": "  PoolShark "})

        assert response.status_code == 200
        assert response.json() == {
            "username": "poolshark",
            "is_available": True,
            "message": "Username is available",
        }

    def test_taken_ignores_case(self, client):
        reserve(client, "PoolShark", "u1")

        body = client.get("/api/v1/usernames/check", params={"username": "POOLSHARK"}).json()

        assert body["is_available"] is False
        assert body["message"] == "Username is already taken"

    def test_taken_by_profile(self, client, create_profile):
        create_profile("u1", username="Breaker")

        body = client.get("/api/v1/usernames/check", params={"username": "breaker"}).json()
        assert body["is_available"] is False

    @pytest.mark.parametrize("params", [{}, {"username": "   "}, {"username": "ab"}])
    def test_invalid(self, client, params):
        response = client.get("/api/v1/usernames/check", params=params)
        assert response.status_code == 400


class TestReserveUsername:
    """Test POST /usernames/reserve."""

    def test_reserve(self, client):
        response = reserve(client, "  PoolShark ", "u1")

        assert response.status_code == 201
        body = response.json()
        assert body["username"] == "poolshark"
        assert body["display_username"] == "PoolShark"
        assert body["user_id"] == "u1"

    def test_taken_conflicts(self, client):
        reserve(client, "PoolShark", "u1")

        assert reserve(client, "poolshark", "u2").status_code == 409
        assert reserve(client, "poolshark", "u1").status_code == 409

    def test_blank_rejected(self, client):
        assert reserve(client, "  ", "u1").status_code == 400

    def test_too_long_rejected(self, client):
        assert reserve(client, "x" * 101, "u1").status_code == 400

    def test_missing_user_id_rejected(self, client):
        response = client.post("/api/v1/usernames/reserve", json={"username": "poolshark"})
        assert response.status_code == 422


class TestUpdateUsername:
    """Test PUT /usernames/update."""

    def update(self, client, old, new, user_id):
        return client.put(
            "/api/v1/usernames/update",
            json={"old_username": old, "new_username": new, "user_id": user_id},
        )

    def test_rename(self, client):
        reserve(client, "PoolShark", "u1")

        response = self.update(client, "poolshark", "CueBall", "u1")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Username updated successfully"
        assert body["username"]["username"] == "cueball"
        assert body["username"]["display_username"] == "CueBall"

        check = client.get("/api/v1/usernames/check", params={"username": "poolshark"}).json()
        assert check["is_available"] is True

    def test_same_name_is_no_change(self, client):
        reserve(client, "PoolShark", "u1")

        response = self.update(client, "poolshark", " POOLSHARK ", "u1")

        assert response.status_code == 200
        assert response.json() == {"message": "No change in username", "username": None}

    def test_not_owned(self, client):
        reserve(client, "PoolShark", "u1")
        assert self.update(client, "poolshark", "cueball", "u2").status_code == 404

    def test_missing_old_name(self, client):
        assert self.update(client, "ghost", "cueball", "u1").status_code == 404

    def test_new_name_taken(self, client):
        reserve(client, "PoolShark", "u1")
        reserve(client, "CueBall", "u2")

        assert self.update(client, "poolshark", "cueball", "u1").status_code == 409

    def test_blank_new_name_rejected(self, client):
        reserve(client, "PoolShark", "u1")
        assert self.update(client, "poolshark", " ", "u1").status_code == 400


class TestProfileUsernames:
    """Test username handling on /profiles."""

    def test_normalized_on_create(self, client, create_profile):
        body = create_profile("u1", username="  Breaker ")
        assert body["username"] == "breaker"

    def test_taken_by_other_profile(self, client, create_profile):
        create_profile("u1", username="breaker")

        response = client.post("/api/v1/profiles", json={"user_id": "u2", "username": "BREAKER"})
        assert response.status_code == 409

    def test_reserved_by_other_user(self, client):
        reserve(client, "breaker", "u1")

        response = client.put("/api/v1/profiles/u2", json={"username": "breaker"})
        assert response.status_code == 409

    def test_own_reservation_allowed(self, client):
        reserve(client, "breaker", "u1")

        response = client.put("/api/v1/profiles/u1", json={"username": "Breaker"})

        assert response.status_code == 201
        assert response.json()["username"] == "breaker"

    def test_keeping_own_username_on_update(self, client, create_profile):
        create_profile("u1", username="breaker")

        response = client.put("/api/v1/profiles/u1", json={"username": "breaker", "bio": "9-ball"})

        assert response.status_code == 200
        assert response.json()["bio"] == "9-ball"

    def test_short_username_rejected(self, client):
        response = client.post("/api/v1/profiles", json={"user_id": "u1", "username": "ab"})
        assert response.status_code == 400

    def test_check_username(self, client, create_profile):
        create_profile("u1", username="breaker")

        taken = client.get("/api/v1/profiles/check-username/Breaker").json()
        free = client.get("/api/v1/profiles/check-username/cueball").json()

        assert taken["is_available"] is False
        assert free == {
            "username": "cueball",
            "is_available": True,
            "message": "Username is available",
        }

    def test_check_username_too_short(self, client):
        assert client.get("/api/v1/profiles/check-username/ab").status_code == 400
