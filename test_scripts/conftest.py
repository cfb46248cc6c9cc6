# Shared fixtures: deterministic ids/clock and an in-memory state database
from __future__ import annotations

import itertools
import logging
from datetime import datetime, timezone

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from riceboard.db.base import Base
from riceboard.schemas.feature import Feature

logger = logging.getLogger(__name__)

FIXED_NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def clock(fixed_now):
    return lambda: fixed_now


@pytest.fixture
def id_factory():
    counter = itertools.count(1)
    return lambda: f"feat-{next(counter)}"


@pytest.fixture
def make_feature(fixed_now):
    """Build a Feature with sensible defaults; kwargs override any field."""
    counter = itertools.count(1)

    def _make(**kwargs) -> Feature:
        data = {
            "id": f"f{next(counter)}",
            "name": "Feature",
            "created_at": fixed_now,
            "updated_at": fixed_now,
        }
        data.update(kwargs)
        return Feature(**data)

    return _make


@pytest.fixture
def db_session():
    """Fresh in-memory SQLite database per test.
    Test-only bootstrap; the app creates its table via init_db().
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(bind=engine)
    Session = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    session = Session()
    logger.info("test-bootstrap: state schema ensured")
    try:
        yield session
    finally:
        session.close()
        engine.dispose()
