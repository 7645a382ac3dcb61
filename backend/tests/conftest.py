"""Pytest configuration and shared fixtures."""

import os
import tempfile
from datetime import date
from unittest.mock import MagicMock

# Settings are read at import time: point them at a throwaway database first
_TEST_DIR = tempfile.mkdtemp(prefix="teesheet-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TEST_DIR, 'teesheet.db')}"
os.environ["REDIS_URL"] = "redis://localhost:6399/15"
os.environ["RESET_ENABLED"] = "false"

import pytest
from fastapi.testclient import TestClient

from teesheet import main
from teesheet.database import SessionLocal, engine
from teesheet.models import Base
from teesheet.services import booking_reset, events
from teesheet.services.teetimes import ensure_slots_for_date, list_slots_by_date

TEST_DATE = date(2025, 6, 1)


@pytest.fixture(autouse=True)
def fake_redis(monkeypatch):
    """Replace the shared Redis client everywhere it is imported."""
    fake = MagicMock()
    fake.exists.return_value = 0
    fake.ping.return_value = True
    for module in (events, booking_reset, main):
        monkeypatch.setattr(module, "redis_client", fake)
    return fake


@pytest.fixture(autouse=True)
def clean_schema():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
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
    with TestClient(main.app) as c:
        yield c


@pytest.fixture
def slot_id(db):
    """Id of the 7:00 AM slot on TEST_DATE, generated on demand."""
    ensure_slots_for_date(db, TEST_DATE)
    first = list_slots_by_date(db, TEST_DATE)[0]
    slot_id = first.id
    db.commit()
    return slot_id
