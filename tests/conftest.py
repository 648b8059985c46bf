"""Pytest fixtures for the finance tracker.

The app is pointed at a throw-away SQLite file before anything imports
`config`, and every test starts from freshly created (and seeded) tables.
"""

import os
import re
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="kakeibo-tests-")
os.environ["FINANCE_DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}"
os.environ["FINANCE_SECRET_KEY"] = "test-secret-key"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from db import Base, SessionLocal, engine, init_db  # noqa: E402
from main import app  # noqa: E402

CSRF_RE = re.compile(r'name="csrf_token" value="([0-9a-f]+)"')


@pytest.fixture(autouse=True)
def fresh_database():
    Base.metadata.drop_all(bind=engine)
    init_db()
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def csrf_token(client) -> str:
    """CSRF token bound to the client's session cookie."""
    response = client.get("/dashboard")
    match = CSRF_RE.search(response.text)
    assert match, "dashboard should render a csrf_token field"
    return match.group(1)
