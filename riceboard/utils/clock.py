# riceboard/utils/clock.py

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Callable

IdFactory = Callable[[], str]
Clock = Callable[[], datetime]


def new_id() -> str:
    """Default identifier generator for new features."""
    return uuid.uuid4().hex


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


__all__ = ["IdFactory", "Clock", "new_id", "utc_now"]
