def test_root_ok(client):
    r = client.get("/")
    assert r.status_code == 200
    data = r.json()
    assert "message" in data


def test_health_ok(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_empty_ledger_shape(client):
    r = client.get("/api/data")
    assert r.status_code == 200, r.text
    data = r.json()
    assert data == {
        "balance": 0,
        "pianoSessions": [],
        "weeklyAwards": [],
        "tests": [],
        "incidents": [],
        "transactions": [],
    }
