"""The CRUD contract exercised end to end on teams."""


def test_create_team_trims_and_returns_row(client):
    response = client.post("/api/teams", json={"name": "  India ", "country": "India  "})

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "India"
    assert body["country"] == "India"
    assert isinstance(body["id"], int)
    assert body["createdAt"]


def test_create_team_missing_and_blank_fields(client):
    missing = client.post("/api/teams", json={"country": "India"})
    assert missing.status_code == 400
    assert missing.json()["code"] == "MISSING_NAME"

    blank = client.post("/api/teams", json={"name": "   ", "country": "India"})
    assert blank.status_code == 400
    assert blank.json()["code"] == "INVALID_NAME"

    wrong_type = client.post("/api/teams", json={"name": "India", "country": 42})
    assert wrong_type.status_code == 400
    assert wrong_type.json()["code"] == "INVALID_COUNTRY"


def test_duplicate_team_name_is_rejected(client, factory):
    factory.team("India")

    response = client.post("/api/teams", json={"name": "India", "country": "Elsewhere"})

    assert response.status_code == 400
    assert response.json()["code"] == "DUPLICATE_NAME"
    assert len(client.get("/api/teams").json()) == 1


def test_get_team_by_id(client, factory):
    team = factory.team("England")

    response = client.get(f"/api/teams?id={team['id']}")

    assert response.status_code == 200
    assert response.json() == team


def test_get_team_invalid_and_unknown_id(client):
    invalid = client.get("/api/teams?id=abc")
    assert invalid.status_code == 400
    assert invalid.json()["code"] == "INVALID_ID"

    unknown = client.get("/api/teams?id=999")
    assert unknown.status_code == 404
    assert unknown.json() == {"error": "Team not found"}


def test_list_teams_orders_by_id_and_paginates(client, factory):
    created = [factory.team(f"Side {i}") for i in range(5)]

    first_page = client.get("/api/teams?limit=2").json()
    second_page = client.get("/api/teams?limit=2&offset=2").json()

    assert [t["id"] for t in first_page] == [created[0]["id"], created[1]["id"]]
    assert [t["id"] for t in second_page] == [created[2]["id"], created[3]["id"]]


def test_list_teams_limit_is_clamped(client, factory):
    for i in range(12):
        factory.team(f"Side {i}")

    assert len(client.get("/api/teams").json()) == 10
    assert len(client.get("/api/teams?limit=500").json()) == 12
    assert len(client.get("/api/teams?limit=0").json()) == 1
    assert len(client.get("/api/teams?limit=-5").json()) == 1


def test_list_teams_invalid_pagination(client):
    limit = client.get("/api/teams?limit=ten")
    assert limit.status_code == 400
    assert limit.json()["code"] == "INVALID_LIMIT"

    offset = client.get("/api/teams?offset=-1")
    assert offset.status_code == 400
    assert offset.json()["code"] == "INVALID_OFFSET"


def test_list_teams_search_is_case_insensitive(client, factory):
    factory.team("South Africa", "South Africa")
    factory.team("India", "India")

    names = [t["name"] for t in client.get("/api/teams?search=AFRI").json()]

    assert names == ["South Africa"]


def test_list_teams_empty(client):
    response = client.get("/api/teams")

    assert response.status_code == 200
    assert response.json() == []


def test_update_team_merges_supplied_fields(client, factory):
    team = factory.team("Pakistan", "Pakistan")

    response = client.put(f"/api/teams?id={team['id']}", json={"country": "  PK "})

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Pakistan"
    assert body["country"] == "PK"


def test_update_team_with_empty_body_returns_row_unchanged(client, factory):
    team = factory.team("New Zealand")

    response = client.put(f"/api/teams?id={team['id']}", json={})

    assert response.status_code == 200
    assert response.json() == team


def test_update_team_errors(client, factory):
    team = factory.team("India")
    factory.team("Australia")

    assert client.put("/api/teams?id=x", json={"name": "A"}).json()["code"] == "INVALID_ID"
    assert client.put("/api/teams?id=999", json={"name": "A"}).status_code == 404

    null_name = client.put(f"/api/teams?id={team['id']}", json={"name": None})
    assert null_name.status_code == 400
    assert null_name.json()["code"] == "INVALID_NAME"

    duplicate = client.put(f"/api/teams?id={team['id']}", json={"name": "Australia"})
    assert duplicate.status_code == 400
    assert duplicate.json()["code"] == "DUPLICATE_NAME"


def test_delete_team_returns_deleted_row(client, factory):
    team = factory.team("England")

    response = client.delete(f"/api/teams?id={team['id']}")

    assert response.status_code == 200
    assert response.json() == {"message": "Team deleted successfully", "deleted": team}
    assert client.get(f"/api/teams?id={team['id']}").status_code == 404


def test_delete_team_with_players_is_refused(client, factory):
    team = factory.team("India")
    factory.player(team["id"])

    response = client.delete(f"/api/teams?id={team['id']}")

    assert response.status_code == 400
    assert response.json()["code"] == "FOREIGN_KEY_CONSTRAINT"
    assert client.get(f"/api/teams?id={team['id']}").status_code == 200


def test_delete_team_invalid_and_unknown_id(client):
    assert client.delete("/api/teams?id=").json()["code"] == "INVALID_ID"
    assert client.delete("/api/teams?id=404").status_code == 404


def test_out_of_range_ids_are_rejected(client):
    huge = "99999999999999999999"

    for response in (
        client.get(f"/api/teams?id={huge}"),
        client.put(f"/api/teams?id={huge}", json={"name": "A"}),
        client.delete(f"/api/teams?id=-{huge}"),
    ):
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ID"
    assert client.get(f"/api/teams?offset={huge}").json()["code"] == "INVALID_OFFSET"
