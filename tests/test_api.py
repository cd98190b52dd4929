"""
HTTP tests for the places and health routes.
"""

import pytest

from leaderboard_places.config import places as places_config, service


def thresholds(first=100, second=50, third=10):
    return {
        "first_place_min_score": first,
        "second_place_min_score": second,
        "third_place_min_score": third,
    }


def response_places(response):
    return {entry["user_id"]: entry["place"] for entry in response.json()["places"]}


class TestPlacesRoute:
    def test_calculates_places(self, client):
        response = client.post("/places", json={
            "users": [
                {"user_id": "id1", "score": 200},
                {"user_id": "id2", "score": 150},
                {"user_id": "id3", "score": 80},
            ],
            "min_scores": thresholds(180, 100, 50),
        })
        assert response.status_code == 200
        assert response_places(response) == {"id1": 1, "id2": 2, "id3": 3}
        assert response.json()["min_scores"] == thresholds(180, 100, 50)

    def test_uses_configured_thresholds_when_omitted(self, client):
        response = client.post("/places", json={"users": [{"user_id": "id1", "score": 55}]})
        assert response.status_code == 200
        assert response.json()["min_scores"] == places_config.min_scores().to_dict()

    def test_strips_user_ids(self, client):
        response = client.post("/places", json={
            "users": [{"user_id": "  id1 ", "score": 3}],
            "min_scores": thresholds(),
        })
        assert response_places(response) == {"id1": 4}

    @pytest.mark.parametrize("users", [
        [],
        [{"user_id": "id1", "score": 0}],
        [{"user_id": "   ", "score": 5}],
        [{"user_id": "id1", "score": 5}, {"user_id": "id1", "score": 6}],
        [{"user_id": "id1", "score": 5}, {"user_id": "id2", "score": 5}],
        [{"user_id": f"id{n}", "score": n} for n in range(1, 102)],
    ])
    def test_rejects_invalid_users(self, client, users):
        response = client.post("/places", json={"users": users, "min_scores": thresholds()})
        assert response.status_code == 422

    @pytest.mark.parametrize("min_scores", [
        thresholds(50, 100, 10),
        thresholds(100, 50, 50),
        thresholds(100, 50, 0),
    ])
    def test_rejects_misordered_thresholds(self, client, min_scores):
        response = client.post("/places", json={
            "users": [{"user_id": "id1", "score": 5}],
            "min_scores": min_scores,
        })
        assert response.status_code == 422

    def test_accepts_hundred_users(self, client):
        users = [{"user_id": f"id{n}", "score": n} for n in range(1, 101)]
        response = client.post("/places", json={"users": users, "min_scores": thresholds()})
        assert response.status_code == 200
        places = response_places(response)
        assert len(places) == 100
        assert places["id100"] == 1
        assert places["id10"] == 91
        assert places["id9"] == 4
        assert places["id1"] == 12


class TestThresholdsRoute:
    def test_returns_configured_thresholds(self, client):
        response = client.get("/thresholds")
        assert response.status_code == 200
        assert response.json() == places_config.min_scores().to_dict()


class TestHealthRoute:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["uptime"] >= 0
        assert body["version"] == service.version
        assert body["min_scores"] == places_config.min_scores().to_dict()

    def test_health_head(self, client):
        assert client.head("/health").status_code == 200
