# riceboard/db/models/app_state.py

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, Integer, String

from riceboard.db.base import Base


class AppState(Base):
    """One persisted working-set snapshot per storage key."""

    __tablename__ = "app_state"

    id = Column(Integer, primary_key=True, index=True)

    storage_key = Column(String(100), unique=True, index=True, nullable=False)

    # Schema version of payload_json; callers decide what to do on mismatch
    version = Column(Integer, nullable=False)
    payload_json = Column(JSON, nullable=False)

    last_saved_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
