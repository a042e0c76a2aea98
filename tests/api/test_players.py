import pytest
from httpx import AsyncClient
from sqlalchemy import func, select

from app.models import Player


@pytest.mark.asyncio
class TestPlayersAPI:
    """Tests for /api/v1/players endpoints."""

    async def test_get_players_empty(self, client: AsyncClient):
        response = await client.get("/api/v1/players")
        assert response.status_code == 200
        assert response.json() == []

    async def test_get_players_ordered_by_number(self, client: AsyncClient, test_session):
        test_session.add_all([
            Player(name="Nine", number=9, positions=["ST"]),
            Player(name="One", number=1, positions=["GK"]),
            Player(name="Four", number=4, positions=["CB"]),
        ])
        await test_session.commit()

        response = await client.get("/api/v1/players")
        assert response.status_code == 200
        assert [p["number"] for p in response.json()] == [1, 4, 9]

    async def test_create_player(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/players",
            json={"name": "  Alex Morgan ", "positions": ["ST", "LW"], "number": 13},
        )
        assert response.status_code == 201, response.text
        data = response.json()
        assert data["id"] > 0
        assert data["name"] == "Alex Morgan"
        assert data["positions"] == ["ST", "LW"]
        assert data["number"] == 13

    async def test_create_player_duplicate_number(self, client: AsyncClient, test_session):
        payload = {"name": "First Ten", "positions": ["AM"], "number": 10}
        first = await client.post("/api/v1/players", json=payload)
        assert first.status_code == 201

        second = await client.post(
            "/api/v1/players",
            json={"name": "Second Ten", "positions": ["CM"], "number": 10},
        )
        assert second.status_code == 400
        assert second.json()["detail"] == "shirt number already exists"

        count = await test_session.execute(
            select(func.count()).select_from(Player).where(Player.number == 10)
        )
        assert count.scalar() == 1

    @pytest.mark.parametrize(
        "payload, message",
        [
            ({"name": "  ", "positions": ["GK"], "number": 1}, "name is required"),
            ({"positions": ["GK"], "number": 1}, "name is required"),
            ({"name": "Keeper", "positions": [], "number": 1}, "positions are required"),
            ({"name": "Keeper", "positions": ["GK"], "number": 0}, "number must be 1-99"),
            ({"name": "Keeper", "positions": ["GK"], "number": 100}, "number must be 1-99"),
            ({"name": "Keeper", "positions": ["GK"]}, "number must be 1-99"),
        ],
    )
    async def test_create_player_validation(self, client: AsyncClient, payload, message):
        response = await client.post("/api/v1/players", json=payload)
        assert response.status_code == 400
        assert response.json()["detail"] == message

    async def test_get_player_not_found(self, client: AsyncClient):
        response = await client.get("/api/v1/players/999999")
        assert response.status_code == 404
        assert response.json()["detail"] == "Player not found"

    async def test_bulk_delete_players(self, client: AsyncClient, sample_players, test_session):
        ids = [sample_players[0].id, sample_players[2].id]
        response = await client.post("/api/v1/players/bulk-delete", json={"ids": ids})
        assert response.status_code == 204

        remaining = await test_session.execute(select(Player.number).order_by(Player.number))
        assert remaining.scalars().all() == [5]

    async def test_bulk_delete_ignores_missing_ids(self, client: AsyncClient, sample_players):
        response = await client.post("/api/v1/players/bulk-delete", json={"ids": [999]})
        assert response.status_code == 204

        listing = await client.get("/api/v1/players")
        assert len(listing.json()) == len(sample_players)

    async def test_bulk_delete_requires_ids(self, client: AsyncClient):
        response = await client.post("/api/v1/players/bulk-delete", json={"ids": []})
        assert response.status_code == 400
        assert response.json()["detail"] == "ids are required"
