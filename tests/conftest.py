"""Shared fixtures: a fresh SQLite database per test and an API client."""

import pytest
from fastapi.testclient import TestClient

from cricket_dashboard.api import create_app
from cricket_dashboard.database import create_tables, get_database_engine, init_engine


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'cricket_test.db'}"


@pytest.fixture(autouse=True)
def database(db_url):
    init_engine(db_url, echo=False)
    create_tables()
    yield
    get_database_engine().dispose()


@pytest.fixture
def client():
    return TestClient(create_app())


class Factory:
    """Creates rows through the API and returns their JSON."""

    def __init__(self, client: TestClient):
        self.client = client
        self._counter = 0

    def _post(self, path: str, payload: dict) -> dict:
        response = self.client.post(path, json=payload)
        assert response.status_code == 201, response.json()
        return response.json()

    def team(self, name: str = None, country: str = None) -> dict:
        self._counter += 1
        name = name or f"Team {self._counter}"
        return self._post("/api/teams", {"name": name, "country": country or name})

    def player(self, team_id: int, name: str = "Virat Kohli", role: str = "Batsman") -> dict:
        return self._post("/api/players", {"name": name, "teamId": team_id, "role": role})

    def match(self, venue: str = "Eden Gardens", match_date: str = "2024-03-10", match_type: str = "T20") -> dict:
        return self._post("/api/matches", {"venue": venue, "matchDate": match_date, "matchType": match_type})

    def match_team(self, match_id: int, team_id: int) -> dict:
        return self._post("/api/match-teams", {"matchId": match_id, "teamId": team_id})

    def performance(self, match_id: int, player_id: int, runs: int = 0, wickets: int = 0) -> dict:
        return self._post("/api/performance", {
            "matchId": match_id,
            "playerId": player_id,
            "runsScored": runs,
            "wicketsTaken": wickets,
        })

    def award(self, name: str = "Best Batsman", category: str = "Performance") -> dict:
        return self._post("/api/awards", {"awardName": name, "awardCategory": category})

    def fixture(self, home: str = "India", away: str = "Australia") -> dict:
        """A match with two participating teams."""
        first = self.team(home)
        second = self.team(away)
        match = self.match()
        self.match_team(match["id"], first["id"])
        self.match_team(match["id"], second["id"])
        return {"match": match, "teams": [first, second]}


@pytest.fixture
def factory(client):
    return Factory(client)
