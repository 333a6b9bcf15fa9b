"""Pytest fixtures — in-memory SQLite database for fast, isolated tests."""
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from event_board.config import settings
from event_board.database import Base, get_db, init_db
from event_board.main import app

# Import all models so they register with Base.metadata
from event_board.models.event import Event          # noqa: F401
from event_board.models.id_counter import IdCounter  # noqa: F401

SQLITE_URL = "sqlite://"


@pytest.fixture(scope="function")
def db_engine():
    """Create a fresh in-memory engine for each test."""
    engine = create_engine(
        SQLITE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db(db_engine):
    """Yield a database session bound to the per-test engine."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db_engine):
    """FastAPI TestClient with the database dependency overridden."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def _override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def as_caller(caller: str) -> dict:
    """Headers identifying the request as coming from ``caller``."""
    return {settings.CALLER_HEADER: caller}


def make_payload(title: str = "A", description: str = "d", imgurl: str = "u", location: str = "L") -> dict:
    return {
        "event_title": title,
        "event_description": description,
        "event_card_imgurl": imgurl,
        "event_location": location,
    }


def create_test_event(client: TestClient, caller: str = "X", **fields) -> dict:
    """Helper — POST /api/events as ``caller`` and return response JSON."""
    resp = client.post("/api/events/", json=make_payload(**fields), headers=as_caller(caller))
    assert resp.status_code == 201, resp.text
    return resp.json()
