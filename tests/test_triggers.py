"""Deriving match results from both innings totals."""

import pytest

from cricket_dashboard.schemas.match_results import TeamScoreInput
from cricket_dashboard.services.triggers import Side, compose_summary, decide_winner


def side(team_id, name, runs, wickets=10):
    return Side(team_id, team_id, name, TeamScoreInput(runs=runs, wickets=wickets, overs=50.0))


def test_decide_winner_prefers_more_runs():
    india = side(1, "India", 320)
    australia = side(2, "Australia", 315)

    assert decide_winner(india, australia) is india
    assert decide_winner(australia, india) is india
    assert decide_winner(india, side(2, "Australia", 320)) is None


def test_compose_summary():
    india = side(1, "India", 320, 7)
    australia = side(2, "Australia", 315, 9)

    assert compose_summary(india, australia, india) == "India 320/7 vs Australia 315/9 - India won by 5 runs"
    assert compose_summary(india, india._replace(team_name="Australia"), None) \
        == "India 320/7 vs Australia 320/7 - Match tied"


def scores(first_runs, second_runs):
    return {
        "team1Score": {"runs": first_runs, "wickets": 7, "overs": 50},
        "team2Score": {"runs": second_runs, "wickets": 9, "overs": 50},
    }


def test_from_scores_records_scores_and_winner(client, factory):
    setup = factory.fixture("India", "Australia")
    match_id = setup["match"]["id"]

    response = client.post("/api/match-result/from-scores", json={"matchId": match_id, **scores(320, 315)})

    assert response.status_code == 201
    body = response.json()
    assert body["matchResult"]["winningTeamId"] == setup["teams"][0]["id"]
    assert body["matchResult"]["resultSummary"] == "India 320/7 vs Australia 315/9 - India won by 5 runs"
    assert [s["runs"] for s in body["scores"]] == [320, 315]
    assert client.get(f"/api/match-result?matchId={match_id}").json() == [body["matchResult"]]


def test_from_scores_second_team_wins(client, factory):
    setup = factory.fixture("England", "Pakistan")

    body = client.post(
        "/api/match-result/from-scores", json={"matchId": setup["match"]["id"], **scores(285, 290)}
    ).json()

    assert body["matchResult"]["winningTeamId"] == setup["teams"][1]["id"]
    assert body["matchResult"]["resultSummary"].endswith("Pakistan won by 5 runs")


def test_from_scores_tie_has_no_winner(client, factory):
    setup = factory.fixture()

    body = client.post(
        "/api/match-result/from-scores", json={"matchId": setup["match"]["id"], **scores(250, 250)}
    ).json()

    assert body["matchResult"]["winningTeamId"] is None
    assert body["matchResult"]["resultSummary"].endswith("- Match tied")


def test_from_scores_rolls_back_when_result_exists(client, factory):
    setup = factory.fixture()
    match_id = setup["match"]["id"]
    client.post("/api/match-result", json={"matchId": match_id, "resultSummary": "Entered by hand"})

    response = client.post("/api/match-result/from-scores", json={"matchId": match_id, **scores(200, 100)})

    assert response.status_code == 400
    assert response.json()["code"] == "DUPLICATE_MATCH_ID"
    assert client.get("/api/match-scores").json() == []
    error_logs = client.get("/api/sql-logs?operationType=TRIGGER&status=error").json()
    assert len(error_logs) == 1


def test_from_scores_rejects_duplicate_scores(client, factory):
    setup = factory.fixture()
    match_id = setup["match"]["id"]
    client.post("/api/match-result/from-scores", json={"matchId": match_id, **scores(200, 100)})
    client.delete(f"/api/match-result?id={client.get('/api/match-result').json()[0]['id']}")

    response = client.post("/api/match-result/from-scores", json={"matchId": match_id, **scores(150, 100)})

    assert response.json()["code"] == "DUPLICATE_MATCH_TEAM"
    assert client.get("/api/match-result").json() == []


@pytest.mark.parametrize("teams", [0, 1])
def test_from_scores_needs_two_teams(client, factory, teams):
    match = factory.match()
    for _ in range(teams):
        factory.match_team(match["id"], factory.team()["id"])

    response = client.post("/api/match-result/from-scores", json={"matchId": match["id"], **scores(1, 0)})

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_MATCH_TEAMS"


def test_from_scores_unknown_match(client):
    response = client.post("/api/match-result/from-scores", json={"matchId": 42, **scores(1, 0)})

    assert response.status_code == 404
    assert response.json()["code"] == "MATCH_NOT_FOUND"


def test_from_scores_validation(client):
    missing = client.post("/api/match-result/from-scores", json={"matchId": 1, "team1Score": {"runs": 1}})
    negative = client.post("/api/match-result/from-scores", json={"matchId": 1, **scores(-1, 0)})

    assert missing.json()["code"] == "INVALID_TEAM1_SCORE"
    assert negative.json()["code"] == "INVALID_TEAM1_SCORE"


def match_team_ids(client, match_id):
    return [row["id"] for row in client.get(f"/api/match-teams?matchId={match_id}").json()]


def test_from_scores_follows_named_match_teams(client, factory):
    setup = factory.fixture("India", "Australia")
    match_id = setup["match"]["id"]
    india_side, australia_side = match_team_ids(client, match_id)
    payload = scores(280, 300)
    payload["team1Score"]["matchTeamId"] = australia_side

    body = client.post("/api/match-result/from-scores", json={"matchId": match_id, **payload}).json()

    assert body["matchResult"]["winningTeamId"] == setup["teams"][0]["id"]
    assert body["matchResult"]["resultSummary"] == "Australia 280/7 vs India 300/9 - India won by 20 runs"
    assert [(s["matchTeamId"], s["runs"]) for s in body["scores"]] == [(australia_side, 280), (india_side, 300)]


def test_from_scores_rejects_foreign_or_repeated_match_teams(client, factory):
    setup = factory.fixture()
    match_id = setup["match"]["id"]
    other = factory.fixture("England", "Pakistan")
    own_side = match_team_ids(client, match_id)[0]
    foreign_side = match_team_ids(client, other["match"]["id"])[0]

    foreign = scores(1, 0)
    foreign["team2Score"]["matchTeamId"] = foreign_side
    repeated = scores(1, 0)
    repeated["team1Score"]["matchTeamId"] = own_side
    repeated["team2Score"]["matchTeamId"] = own_side

    for payload in (foreign, repeated):
        response = client.post("/api/match-result/from-scores", json={"matchId": match_id, **payload})
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_MATCH_TEAM_ID"
    assert client.get("/api/match-scores").json() == []
