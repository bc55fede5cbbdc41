"""Joined read-only views."""


def record_match(factory, venue, match_date, figures):
    """Create a match and one performance per (player, runs, wickets)."""
    match = factory.match(venue, match_date, "ODI")
    for player, runs, wickets in figures:
        factory.performance(match["id"], player["id"], runs, wickets)
    return match


def test_match_performance_summary_joins_and_orders(client, factory):
    india = factory.team("India")
    australia = factory.team("Australia")
    kohli = factory.player(india["id"], "Virat Kohli")
    smith = factory.player(australia["id"], "Steve Smith")
    older = record_match(factory, "Melbourne Cricket Ground", "2024-01-15", [(kohli, 85, 0), (smith, 120, 0)])
    newer = record_match(factory, "Sydney Cricket Ground", "2024-04-05", [(kohli, 102, 0)])

    rows = client.get("/api/match-performance-summary").json()

    assert rows[0] == {
        "matchId": newer["id"],
        "matchDate": "2024-04-05",
        "venue": "Sydney Cricket Ground",
        "playerName": "Virat Kohli",
        "teamName": "India",
        "runsScored": 102,
        "wicketsTaken": 0,
    }
    assert [(r["matchId"], r["playerName"]) for r in rows[1:]] == [
        (older["id"], "Steve Smith"),
        (older["id"], "Virat Kohli"),
    ]


def test_match_performance_summary_filters(client, factory):
    team = factory.team("India")
    kohli = factory.player(team["id"], "Virat Kohli")
    rahul = factory.player(team["id"], "KL Rahul", "Wicket-keeper")
    first = record_match(factory, "Eden Gardens", "2024-03-10", [(kohli, 40, 0), (rahul, 10, 0)])
    record_match(factory, "Wankhede Stadium", "2024-05-12", [(kohli, 70, 0)])

    by_match = client.get(f"/api/match-performance-summary?matchId={first['id']}").json()
    by_player = client.get(f"/api/match-performance-summary?playerId={rahul['id']}").json()

    assert {r["playerName"] for r in by_match} == {"Virat Kohli", "KL Rahul"}
    assert [r["runsScored"] for r in by_player] == [10]


def test_match_performance_summary_parameter_errors(client):
    for query, code in [
        ("limit=0", "INVALID_LIMIT"),
        ("limit=abc", "INVALID_LIMIT"),
        ("offset=-2", "INVALID_OFFSET"),
        ("matchId=0", "INVALID_MATCH_ID"),
        ("playerId=x", "INVALID_PLAYER_ID"),
    ]:
        response = client.get(f"/api/match-performance-summary?{query}")
        assert response.status_code == 400, query
        assert response.json()["code"] == code, query


def test_top_scorers_ranks_by_total_runs(client, factory):
    india = factory.team("India")
    kohli = factory.player(india["id"], "Virat Kohli")
    rohit = factory.player(india["id"], "Rohit Sharma")
    factory.player(india["id"], "Jasprit Bumrah", "Bowler")
    record_match(factory, "Eden Gardens", "2024-03-10", [(kohli, 85, 0), (rohit, 55, 0)])
    record_match(factory, "Wankhede Stadium", "2024-05-12", [(rohit, 65, 0)])

    rows = client.get("/api/players/top-scorers").json()

    assert [(r["playerName"], r["totalRuns"]) for r in rows] == [
        ("Rohit Sharma", 120),
        ("Virat Kohli", 85),
        ("Jasprit Bumrah", 0),
    ]
    assert rows[0]["teamName"] == "India"
    assert len(client.get("/api/players/top-scorers?limit=1").json()) == 1


def test_player_award_details(client, factory):
    team = factory.team("India")
    kohli = factory.player(team["id"], "Virat Kohli")
    bumrah = factory.player(team["id"], "Jasprit Bumrah", "Bowler")
    batting = factory.award("Best Batsman", "Performance")
    bowling = factory.award("Best Bowler", "Performance")
    for player, award, year in [(kohli, batting, 2023), (bumrah, bowling, 2024), (kohli, batting, 2024)]:
        client.post("/api/player-awards", json={"playerId": player["id"], "awardId": award["id"], "year": year})

    rows = client.get("/api/player-awards/details").json()
    kohli_rows = client.get(f"/api/player-awards/details?playerId={kohli['id']}&year=2023").json()

    assert [(r["year"], r["playerName"], r["awardName"]) for r in rows] == [
        (2024, "Jasprit Bumrah", "Best Bowler"),
        (2024, "Virat Kohli", "Best Batsman"),
        (2023, "Virat Kohli", "Best Batsman"),
    ]
    assert rows[0]["awardCategory"] == "Performance"
    assert len(kohli_rows) == 1
