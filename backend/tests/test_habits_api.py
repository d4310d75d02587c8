"""HTTP surface tests for /habits."""

from __future__ import annotations

from habit_tracker.core.dependencies import habit_repository


def test_end_to_end_flow(client, fixed_now) -> None:
    created = client.post("/habits", json={"name": "Exercise", "dailyGoal": "30min"})
    assert created.status_code == 201
    assert created.json() == {
        "status": "success",
        "data": {"id": 1, "name": "Exercise", "dailyGoal": "30min", "progress": []},
    }

    completed = client.put("/habits/1")
    assert completed.status_code == 200
    assert completed.json()["data"]["progress"] == ["2026-10-17"]

    listed = client.get("/habits")
    assert listed.status_code == 200
    assert listed.json() == {
        "status": "success",
        "data": [{"id": 1, "name": "Exercise", "dailyGoal": "30min", "progress": ["2026-10-17"]}],
    }

    report = client.get("/habits/report")
    assert report.status_code == 200
    assert report.json() == {
        "status": "success",
        "data": [{"name": "Exercise", "weeklyCompletion": 1, "dailyGoal": "30min"}],
    }


def test_create_assigns_next_id(client) -> None:
    client.post("/habits", json={"name": "Read", "dailyGoal": "20 pages"})
    response = client.post("/habits", json={"name": "Meditate", "dailyGoal": 10})

    assert response.status_code == 201
    assert response.json()["data"]["id"] == 2
    assert response.json()["data"]["dailyGoal"] == 10


def test_create_missing_fields_is_rejected(client) -> None:
    for body in ({"name": "Exercise"}, {"dailyGoal": "30min"}, {"name": "", "dailyGoal": "30min"}, {}):
        response = client.post("/habits", json=body)
        assert response.status_code == 400
        assert response.json() == {"status": "error", "error": "Name and daily goal are required."}

    assert habit_repository.count() == 0


def test_create_without_body_is_rejected(client) -> None:
    response = client.post("/habits")

    assert response.status_code == 400
    assert response.json()["status"] == "error"
    assert habit_repository.count() == 0


def test_create_with_malformed_json_is_rejected(client) -> None:
    response = client.post(
        "/habits",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"status": "error", "error": "Invalid request body."}
    assert habit_repository.count() == 0


def test_complete_twice_same_day_is_idempotent(client, fixed_now) -> None:
    client.post("/habits", json={"name": "Exercise", "dailyGoal": "30min"})

    client.put("/habits/1")
    response = client.put("/habits/1")

    assert response.status_code == 200
    assert response.json()["data"]["progress"] == ["2026-10-17"]


def test_complete_unknown_habit_returns_404(client) -> None:
    response = client.put("/habits/999")

    assert response.status_code == 404
    assert response.json() == {"status": "error", "error": "Habit not found."}
    assert habit_repository.count() == 0


def test_complete_non_numeric_id_returns_404(client) -> None:
    client.post("/habits", json={"name": "Exercise", "dailyGoal": "30min"})

    response = client.put("/habits/abc")

    assert response.status_code == 404
    assert response.json()["error"] == "Habit not found."
    assert client.get("/habits").json()["data"][0]["progress"] == []


def test_list_empty(client) -> None:
    response = client.get("/habits")

    assert response.status_code == 200
    assert response.json() == {"status": "success", "data": []}


def test_report_keeps_creation_order(client, fixed_now) -> None:
    client.post("/habits", json={"name": "Exercise", "dailyGoal": "30min"})
    client.post("/habits", json={"name": "Read", "dailyGoal": "20 pages"})
    client.put("/habits/2")

    data = client.get("/habits/report").json()["data"]

    assert [entry["name"] for entry in data] == ["Exercise", "Read"]
    assert [entry["weeklyCompletion"] for entry in data] == [0, 1]


def test_unknown_route_uses_error_envelope(client) -> None:
    response = client.get("/nope")

    assert response.status_code == 404
    assert response.json()["status"] == "error"


def test_health(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "message": "Server is alive"}
