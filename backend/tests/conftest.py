import os
import tempfile

# Settings are read at import time, so the environment must be in place before
# any company_api module is imported by the test modules.
_tmp_dir = tempfile.mkdtemp(prefix="company_api_tests_")
os.environ["DATABASE_URL"] = f"sqlite:///{_tmp_dir}/test.db"
os.environ["SIGNINKEY"] = "test-signing-key"
os.environ["ACCESS_TOKEN_TTL"] = "120s"
os.environ["LOG_DIR"] = os.path.join(_tmp_dir, "logs")
os.environ["ENV"] = "test"

import pytest
from fastapi.testclient import TestClient

from company_api.db.init_db import create_tables, drop_tables
from company_api.db.session import SessionLocal


@pytest.fixture(autouse=True)
def reset_database():
    # Drop all tables and recreate them before each test
    drop_tables()
    create_tables()


@pytest.fixture(scope="session")
def client():
    from company_api.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def auth_headers(client):
    client.post("/v1/users", json={"name": "bill", "password": "password"})
    r = client.post("/v1/login", json={"name": "bill", "password": "password"})
    assert r.status_code == 200, r.text
    return {"Authorization": f"Bearer {r.json()['hash']}"}
