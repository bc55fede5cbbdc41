"""Audit trail of writes and the sql-logs endpoints."""

from cricket_dashboard.services.audit import render_call, render_insert, render_update, sql_literal


def test_sql_literal_rendering():
    assert sql_literal(None) == "NULL"
    assert sql_literal(5) == "5"
    assert sql_literal(48.5) == "48.5"
    assert sql_literal("Lord's") == "'Lord''s'"
    assert render_insert("teams", {"name": "India", "country": "India"}) \
        == "INSERT INTO teams (name, country) VALUES ('India', 'India');"
    assert render_update("teams", {"country": "IN"}, 3) == "UPDATE teams SET country = 'IN' WHERE id = 3;"
    assert render_call("insert_performance", 1, 2, 0, 0) == "CALL insert_performance(1, 2, 0, 0);"


def test_successful_writes_are_logged(client, factory):
    team = factory.team("India")
    client.put(f"/api/teams?id={team['id']}", json={"country": "Bharat"})
    client.delete(f"/api/teams?id={team['id']}")

    logs = client.get("/api/sql-logs?tableName=teams").json()

    assert [log["operationType"] for log in logs] == ["DELETE", "UPDATE", "INSERT"]
    assert all(log["status"] == "success" for log in logs)
    assert logs[2]["sqlStatement"] == "INSERT INTO teams (name, country) VALUES ('India', 'India');"
    assert logs[0]["sqlStatement"] == f"DELETE FROM teams WHERE id = {team['id']};"


def test_failed_write_is_logged_as_error(client, factory):
    factory.team("India")
    client.post("/api/teams", json={"name": "India", "country": "India"})

    errors = client.get("/api/sql-logs?status=error").json()

    assert len(errors) == 1
    assert errors[0]["operationType"] == "INSERT"
    assert errors[0]["errorMessage"] == "Team name already exists"


def test_validation_failures_are_not_logged(client):
    client.post("/api/teams", json={"name": ""})

    assert client.get("/api/sql-logs").json() == []


def test_manual_log_entry_crud(client):
    created = client.post("/api/sql-logs", json={
        "operationType": "SELECT",
        "tableName": "players",
        "sqlStatement": "SELECT * FROM players;",
        "status": "success",
    })

    assert created.status_code == 201
    entry = created.json()
    assert entry["executedAt"]
    assert client.get(f"/api/sql-logs?id={entry['id']}").json() == entry
    assert client.get("/api/sql-logs?search=from players").json() == [entry]

    deleted = client.delete(f"/api/sql-logs?id={entry['id']}")
    assert deleted.json()["message"] == "SQL log deleted successfully"
    assert client.get("/api/sql-logs").json() == []


def test_log_entries_cannot_be_updated(client):
    response = client.put("/api/sql-logs?id=1", json={"status": "error"})

    assert response.status_code == 405


def test_manual_log_entry_validation(client):
    bad_status = client.post("/api/sql-logs", json={"status": "done"})
    bad_operation = client.post("/api/sql-logs", json={"operationType": "MERGE"})

    assert bad_status.json()["code"] == "INVALID_STATUS"
    assert bad_operation.json()["code"] == "INVALID_OPERATION_TYPE"
    assert client.get("/api/sql-logs?status=done").json()["code"] == "INVALID_STATUS"
    assert client.get("/api/sql-logs?operationType=MERGE").json()["code"] == "INVALID_OPERATION_TYPE"


def test_sql_logs_limit_ceiling(client):
    for i in range(25):
        client.post("/api/sql-logs", json={"tableName": f"t{i}"})

    assert len(client.get("/api/sql-logs").json()) == 20
    assert len(client.get("/api/sql-logs?limit=1000").json()) == 25
