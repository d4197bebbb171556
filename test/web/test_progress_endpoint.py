"""Tests for GET/POST /progress."""


class TestProgressEndpoint:
    """Test /progress endpoints"""

    def test_unknown_session_is_idle(self, client):
        response = client.get("/progress", params={"sessionId": "nope"})

        assert response.status_code == 200
        assert response.json() == {"current": 0, "total": 0, "status": "idle"}

    def test_post_then_get(self, client):
        response = client.post(
            "/progress", json={"sessionId": "s1", "current": 2, "total": 5, "status": "processing"}
        )
        assert response.status_code == 200
        assert response.json() == {"success": True}

        data = client.get("/progress", params={"sessionId": "s1"}).json()
        assert data == {"current": 2, "total": 5, "status": "processing"}

    def test_post_defaults(self, client):
        client.post("/progress", json={"sessionId": "s2"})

        data = client.get("/progress", params={"sessionId": "s2"}).json()
        assert data == {"current": 0, "total": 0, "status": "processing"}

    def test_get_requires_session_id(self, client):
        response = client.get("/progress")

        assert response.status_code == 400
        assert response.json() == {"error": "Session ID is required"}

    def test_post_requires_session_id(self, client):
        response = client.post("/progress", json={"current": 1, "total": 2})

        assert response.status_code == 400
        assert response.json() == {"error": "Session ID is required"}

    def test_post_rejects_current_above_total(self, client):
        response = client.post("/progress", json={"sessionId": "s1", "current": 3, "total": 2})

        assert response.status_code == 400
        assert "exceeds total" in response.json()["error"]

    def test_post_rejects_unknown_status(self, client):
        response = client.post(
            "/progress", json={"sessionId": "s1", "current": 0, "total": 2, "status": "paused"}
        )
        assert response.status_code == 400

    def test_post_rejects_invalid_json(self, client):
        response = client.post(
            "/progress", content="nope", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request body"}
