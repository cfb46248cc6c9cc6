# riceboard/services/state_store.py

"""Local persistence for the working set.

A key/value snapshot store: one JSON payload ({version, features,
lastSavedAt}) per storage key. Loading is forgiving: a missing or unreadable
payload comes back as None, and a payload from another schema version is
returned unchanged so the caller can decide whether to reset.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.orm import Session

from riceboard.config import settings
from riceboard.db.models.app_state import AppState
from riceboard.schemas.feature import Feature, PersistedState
from riceboard.utils.clock import Clock, utc_now

logger = logging.getLogger("riceboard.services.state_store")


def build_state(
    features: Sequence[Feature],
    *,
    version: Optional[int] = None,
    now: Clock = utc_now,
) -> PersistedState:
    return PersistedState(
        version=settings.STATE_SCHEMA_VERSION if version is None else version,
        features=list(features),
        last_saved_at=now(),
    )


def is_current_version(state: PersistedState, version: Optional[int] = None) -> bool:
    expected = settings.STATE_SCHEMA_VERSION if version is None else version
    return state.version == expected


def _get_row(db: Session, key: str) -> Optional[AppState]:
    return db.execute(select(AppState).where(AppState.storage_key == key)).scalar_one_or_none()


def save_state(db: Session, state: PersistedState, key: Optional[str] = None) -> AppState:
    """Upsert the snapshot under ``key`` and commit."""
    key = key or settings.STATE_STORAGE_KEY
    row = _get_row(db, key)
    payload = state.to_payload()
    if row is None:
        row = AppState(storage_key=key)
        db.add(row)
    row.version = state.version  # type: ignore[assignment]
    row.payload_json = payload  # type: ignore[assignment]
    row.last_saved_at = state.last_saved_at  # type: ignore[assignment]
    db.commit()
    logger.info(
        "state.saved",
        extra={"key": key, "version": state.version, "count": len(state.features)},
    )
    return row


def load_state(db: Session, key: Optional[str] = None) -> Optional[PersistedState]:
    key = key or settings.STATE_STORAGE_KEY
    row = _get_row(db, key)
    if row is None:
        return None
    try:
        state = PersistedState.model_validate(row.payload_json)
    except ValidationError as e:
        logger.warning("state.load_failed", extra={"key": key, "reason": str(e.errors()[0]["msg"])})
        return None
    if not is_current_version(state):
        logger.warning(
            "state.version_mismatch",
            extra={"key": key, "version": state.version},
        )
    return state


def clear_state(db: Session, key: Optional[str] = None) -> bool:
    """Delete the snapshot; returns False when nothing was stored."""
    key = key or settings.STATE_STORAGE_KEY
    row = _get_row(db, key)
    if row is None:
        return False
    db.delete(row)
    db.commit()
    logger.info("state.cleared", extra={"key": key})
    return True


__all__ = [
    "build_state",
    "is_current_version",
    "save_state",
    "load_state",
    "clear_state",
]
