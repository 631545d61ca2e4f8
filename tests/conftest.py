"""Shared fixtures for the test-suite."""

from __future__ import annotations

import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path

import pytest

TEST_DB_PATH = Path(tempfile.gettempdir()) / f"proposal_notifications_test_{os.getpid()}.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ.setdefault("APP_TIMEZONE", "UTC")
os.environ.setdefault("PROPOSAL_NOTIFICATION_MINIMUM_INTERVAL_IN_DAYS", "3")

from app.config import get_settings  # noqa: E402

get_settings.cache_clear()

from app.domain.entities import Proposal  # noqa: E402
from app.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)


class FakeProposalLookup:
    """In-memory stand-in for the proposal repository."""

    def __init__(self, *proposals: Proposal) -> None:
        self.proposals = {proposal.id: proposal for proposal in proposals}
        self.calls: list[int] = []

    def get(self, proposal_id: int) -> Proposal | None:
        self.calls.append(proposal_id)
        return self.proposals.get(proposal_id)


@pytest.fixture()
def now() -> datetime:
    return datetime(2024, 5, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def fake_lookup():
    return FakeProposalLookup


@pytest.fixture()
def reset_database():
    """Give each database test a clean schema."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session(reset_database):
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def pytest_sessionfinish(session, exitstatus):
    if TEST_DB_PATH.exists():
        TEST_DB_PATH.unlink()
