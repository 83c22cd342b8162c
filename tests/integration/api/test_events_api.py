"""Integration tests for Events API."""

from httpx import AsyncClient


async def _create(client: AsyncClient, **fields) -> dict:
    payload = {"name": "Torneo", "date": "2025-07-20", **fields}
    response = await client.post("/api/v1/events", json=payload)
    assert response.status_code == 201
    return response.json()["data"]


class TestEventsAPI:
    """Integration tests for event management."""

    async def test_create_event(self, authenticated_client: AsyncClient):
        response = await authenticated_client.post(
            "/api/v1/events",
            json={
                "name": "Torneo de invierno",
                "date": "2025-07-20",
                "description": "Final en vivo",
                "cover": "https://example.com/cover.webp",
            },
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["name"] == "Torneo de invierno"
        assert data["date"] == "2025-07-20"
        assert data["winner"] is None
        assert isinstance(data["id"], int)

    async def test_create_requires_date(self, authenticated_client: AsyncClient):
        response = await authenticated_client.post("/api/v1/events", json={"name": "Sin fecha"})

        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    async def test_create_rejects_blank_name(self, authenticated_client: AsyncClient):
        response = await authenticated_client.post(
            "/api/v1/events", json={"name": "   ", "date": "2025-07-20"}
        )

        assert response.status_code == 400
        assert response.json()["details"] == {"field": "name"}

    async def test_list_most_recent_first(self, authenticated_client: AsyncClient):
        older = await _create(authenticated_client, name="Antiguo", date="2001-01-01")
        newer = await _create(authenticated_client, name="Reciente", date="2001-06-01")

        response = await authenticated_client.get("/api/v1/events")

        assert response.status_code == 200
        ids = [e["id"] for e in response.json()["data"]]
        assert ids.index(newer["id"]) < ids.index(older["id"])

    async def test_set_winner(self, authenticated_client: AsyncClient):
        event = await _create(authenticated_client)

        response = await authenticated_client.put(
            f"/api/v1/events/{event['id']}/winner", json={"winner": "Luis"}
        )

        assert response.status_code == 200
        assert response.json()["data"]["winner"] == "Luis"

    async def test_set_winner_unknown_event(self, authenticated_client: AsyncClient):
        response = await authenticated_client.put(
            "/api/v1/events/999999/winner", json={"winner": "Luis"}
        )

        assert response.status_code == 404
        assert response.json()["error_code"] == "EVENT_NOT_FOUND"

    async def test_delete_event(self, authenticated_client: AsyncClient):
        event = await _create(authenticated_client)

        response = await authenticated_client.delete(f"/api/v1/events/{event['id']}")
        again = await authenticated_client.delete(f"/api/v1/events/{event['id']}")

        assert response.status_code == 204
        assert again.status_code == 404

    async def test_requires_auth(self, client: AsyncClient):
        response = await client.get("/api/v1/events")

        assert response.status_code == 401
