from __future__ import annotations

import os

import pytest
from fastapi.testclient import TestClient

# -----------------------------------------------------------------------------
# Environment defaults for tests (must be set before the app is imported)
# -----------------------------------------------------------------------------

os.environ["DATABASE_URL"] = f"sqlite:///{os.path.abspath('.test.db')}"
os.environ["API_KEY"] = ""
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "true")

from meeting_records.core.db import SessionLocal, engine  # noqa: E402
from meeting_records.main import app  # noqa: E402
from meeting_records.models import Base  # noqa: E402
from meeting_records.schemas.users import CurrentUser  # noqa: E402


# -----------------------------------------------------------------------------
# DB schema setup/teardown
# -----------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _fresh_schema():
    """Every test starts from empty tables."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture()
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


# -----------------------------------------------------------------------------
# Callers
# -----------------------------------------------------------------------------


@pytest.fixture()
def alice() -> CurrentUser:
    return CurrentUser(id="user-alice")


@pytest.fixture()
def bob() -> CurrentUser:
    return CurrentUser(id="user-bob")


# -----------------------------------------------------------------------------
# Test client + helpers
# -----------------------------------------------------------------------------


@pytest.fixture()
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def headers_for():
    def _headers(user_id: str) -> dict[str, str]:
        return {"X-User-Id": user_id}

    return _headers


@pytest.fixture()
def alice_headers(alice, headers_for):
    return headers_for(alice.id)


@pytest.fixture()
def bob_headers(bob, headers_for):
    return headers_for(bob.id)
