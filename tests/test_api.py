import httpx
import pytest

from scoreboard.main import app


@pytest.fixture
async def client(session_factory):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


async def test_health(client):
    response = await client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


async def test_collections_use_camel_case(client, tournament):
    events = (await client.get("/api/events")).json()
    assert events[0] == {"id": tournament.relay, "name": "Relay", "type": "team"}
    assert events[2]["type"] == "individual"

    players = (await client.get("/api/players")).json()
    assert players[0] == {"id": tournament.ann, "name": "Ann", "teamId": tournament.red}

    teams = (await client.get("/api/teams")).json()
    assert teams[0] == {"id": tournament.red, "name": "Red"}


async def test_record_results_and_read_ranked_table(client, tournament):
    response = await client.post(
        f"/api/events/{tournament.relay}/results",
        json={"type": "team", "winnerTeamId": tournament.red, "secondTeamId": str(tournament.blue)},
    )
    assert response.status_code == 204
    assert response.content == b""

    ranked = (await client.get("/api/standings/ranked")).json()
    assert ranked[0] == {
        "teamId": tournament.red,
        "teamName": "Red",
        "gold": 1,
        "silver": 0,
        "bronze": 0,
        "totalPoints": 20,
        "rank": 1,
    }
    assert ranked[1]["teamName"] == "Blue"
    assert ranked[1]["silver"] == 1
    assert ranked[1]["rank"] == 2

    standings = (await client.get("/api/standings/teams")).json()
    assert standings[0] == {"teamId": tournament.red, "teamName": "Red", "totalPoints": 20}

    medals = (await client.get("/api/medals")).json()
    assert medals[0] == {"teamId": tournament.red, "teamName": "Red", "gold": 1, "silver": 0, "bronze": 0}


async def test_mvp_and_player_views(client, tournament):
    response = await client.post(
        f"/api/events/{tournament.sprint}/results",
        json={
            "firstPlayerId": tournament.eve,
            "secondPlayerId": tournament.ann,
            "thirdPlayerId": tournament.cid,
        },
    )
    assert response.status_code == 204

    response = await client.put(f"/api/events/{tournament.sprint}/mvp", json={"playerId": tournament.eve})
    assert response.status_code == 204

    players = (await client.get("/api/standings/players")).json()
    assert players[0]["playerName"] == "Eve"
    assert players[0]["teamName"] == "Green"
    assert players[0]["totalPoints"] == 10
    assert players[0]["rank"] == 1

    highlights = (await client.get("/api/highlights")).json()
    assert highlights["topPlayer"] == {
        "playerId": tournament.eve,
        "playerName": "Eve",
        "teamId": tournament.green,
        "teamName": "Green",
        "gold": 1,
        "silver": 0,
        "bronze": 0,
        "points": 10,
    }
    assert highlights["topTeam"]["teamName"] == "Green"
    assert highlights["topTeam"]["totalPoints"] == 10


async def test_error_status_codes(client, tournament):
    response = await client.post("/api/events/999/results", json={"winnerTeamId": 1, "secondTeamId": 2})
    assert response.status_code == 404
    assert "Event 999" in response.json()["detail"]

    response = await client.post(
        f"/api/events/{tournament.relay}/results",
        json={"winnerTeamId": tournament.red, "secondTeamId": tournament.red},
    )
    assert response.status_code == 400

    response = await client.put(f"/api/events/{tournament.relay}/mvp", json={"playerId": tournament.ann})
    assert response.status_code == 400
    assert response.json() == {"detail": "MVP not applicable to team games"}

    response = await client.put(f"/api/events/{tournament.sprint}/mvp", json={})
    assert response.status_code == 400

    response = await client.post("/api/events/abc/results", json={})
    assert response.status_code == 422


async def test_highlights_without_data(client):
    response = await client.get("/api/highlights")
    assert response.status_code == 200
    assert response.json() == {"topTeam": None, "topPlayer": None}


async def test_boolean_ids_are_rejected(client, session_factory, tournament):
    response = await client.post(
        f"/api/events/{tournament.relay}/results",
        json={"winnerTeamId": True, "secondTeamId": tournament.blue},
    )
    assert response.status_code == 422

    response = await client.put(f"/api/events/{tournament.sprint}/mvp", json={"playerId": False})
    assert response.status_code == 422

    ranked = (await client.get("/api/standings/ranked")).json()
    assert all(row["totalPoints"] == 0 for row in ranked)
