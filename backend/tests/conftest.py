import os

import pytest

# Use in-memory sqlite for tests; must be set before app.db creates its engine
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"


@pytest.fixture
def client():
    # Import after env is set so engine is created with sqlite
    from app.main import app  # noqa: WPS433
    from fastapi.testclient import TestClient  # noqa: WPS433

    with TestClient(app) as c:
        r = c.post("/api/reset")
        assert r.status_code == 200, r.text
        yield c


@pytest.fixture
def db():
    from app.main import app  # noqa: F401  (creates tables)
    from app.db import SessionLocal
    from app.services.rewards import reset_ledger

    session = SessionLocal()
    reset_ledger(session)
    try:
        yield session
    finally:
        session.close()
