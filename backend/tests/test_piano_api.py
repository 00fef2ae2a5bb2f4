def log_piano(client, day, minutes):
    r = client.post("/api/piano", json={"date": day, "minutes": minutes})
    assert r.status_code == 200, r.text
    return r.json()


def test_goal_met_in_one_session(client):
    res = log_piano(client, "2026-02-02", 150)
    assert res == {"success": True, "awarded": True, "weekMinutes": 150}

    data = client.get("/api/data").json()
    assert data["balance"] == 50
    assert len(data["transactions"]) == 1
    tx = data["transactions"][0]
    assert tx["type"] == "piano"
    assert tx["amount"] == 50
    assert tx["description"] == "Weekly piano goal met! (150 min)"
    assert len(data["weeklyAwards"]) == 1
    award = data["weeklyAwards"][0]
    assert award["week_start"] == "2026-02-02"
    assert award["transaction_id"] == tx["id"]


def test_goal_accumulates_across_week(client):
    assert log_piano(client, "2026-02-03", 60) == {
        "success": True,
        "awarded": False,
        "weekMinutes": 60,
    }
    assert log_piano(client, "2026-02-05", 60)["weekMinutes"] == 120
    res = log_piano(client, "2026-02-08", 30)  # Sunday, same week
    assert res["awarded"] is True
    assert res["weekMinutes"] == 150

    data = client.get("/api/data").json()
    assert data["weeklyAwards"][0]["week_start"] == "2026-02-02"
    assert data["transactions"][0]["date"] == "2026-02-08"


def test_no_second_award_same_week(client):
    log_piano(client, "2026-02-02", 150)
    res = log_piano(client, "2026-02-04", 45)
    assert res["awarded"] is False
    assert res["weekMinutes"] == 195

    data = client.get("/api/data").json()
    assert len(data["transactions"]) == 1
    assert len(data["weeklyAwards"]) == 1
    assert data["balance"] == 50


def test_sessions_in_other_weeks_do_not_count(client):
    log_piano(client, "2026-02-01", 100)  # Sunday of the previous week
    res = log_piano(client, "2026-02-02", 100)
    assert res == {"success": True, "awarded": False, "weekMinutes": 100}

    res = log_piano(client, "2026-02-09", 150)  # next Monday
    assert res["awarded"] is True
    assert res["weekMinutes"] == 150


def test_deleting_award_allows_reaward(client):
    log_piano(client, "2026-02-02", 150)
    tx_id = client.get("/api/data").json()["transactions"][0]["id"]

    r = client.delete(f"/api/transaction/{tx_id}")
    assert r.status_code == 200
    assert r.json() == {"success": True}

    data = client.get("/api/data").json()
    assert data["weeklyAwards"] == []
    assert data["transactions"] == []
    assert data["balance"] == 0
    # the session itself stays
    assert len(data["pianoSessions"]) == 1

    res = log_piano(client, "2026-02-04", 150)
    assert res["awarded"] is True
    assert res["weekMinutes"] == 300

    data = client.get("/api/data").json()
    assert len(data["weeklyAwards"]) == 1
    assert data["balance"] == 50


def test_rejects_non_positive_minutes(client):
    r = client.post("/api/piano", json={"date": "2026-02-02", "minutes": 0})
    assert r.status_code == 422
    r = client.post("/api/piano", json={"date": "2026-02-02", "minutes": -30})
    assert r.status_code == 422
    r = client.post("/api/piano", json={"date": "not-a-date", "minutes": 30})
    assert r.status_code == 422

    assert client.get("/api/data").json()["pianoSessions"] == []


def test_session_in_last_calendar_week(client):
    res = log_piano(client, "9999-12-31", 10)
    assert res == {"success": True, "awarded": False, "weekMinutes": 10}
