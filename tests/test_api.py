"""
Testy dla API (FastAPI TestClient).

Testuje:
- Listę puli rekrutacji
- Symulację z gotowymi liniami wejścia
"""

import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from fastapi.testclient import TestClient

from api.main import app


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_units(client):
    units = client.get("/api/units").json()

    assert [u["index"] for u in units] == [1, 2, 3, 4, 5]
    assert units[0] == {
        "index": 1, "name": "Warrior 1", "kind": "unit",
        "health": 100, "damage": 20, "cost": 50,
    }
    assert units[4]["kind"] == "dragon"


def test_unit_by_index(client):
    assert client.get("/api/units/4").json()["name"] == "Dragon 1"
    assert "error" in client.get("/api/units/6").json()


def test_simulate(client):
    response = client.post("/api/simulate", json={"selections": ["4,5", "start"]})
    data = response.json()

    assert response.status_code == 200
    assert data["result"]["winner"] == "enemy"
    assert data["money_left"] == 150
    assert data["total_events"] == len(data["events"])
    assert data["events"][-1]["type"] == "BATTLE_END"


def test_simulate_ignores_lines_after_start(client):
    data = client.post("/api/simulate", json={"selections": ["1", "start", "2"]}).json()
    assert data["money_left"] == 200


def test_simulate_without_start(client):
    data = client.post("/api/simulate", json={"selections": ["1,2"]}).json()

    assert "error" in data
    assert [e["type"] for e in data["events"]] == [
        "GAME_SETUP", "RECRUIT_ACCEPTED", "RECRUIT_ACCEPTED",
    ]


def test_simulate_start_with_empty_team(client):
    data = client.post("/api/simulate", json={"selections": ["start"]}).json()
    assert "error" in data
    assert data["events"][-1]["type"] == "START_REJECTED"


def test_simulate_games_are_independent(client):
    first = client.post("/api/simulate", json={"selections": ["4,5", "start"]}).json()
    second = client.post("/api/simulate", json={"selections": ["4,5", "start"]}).json()
    assert first["result"] == second["result"]
