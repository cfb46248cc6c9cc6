# riceboard/db/models/__init__.py

from .app_state import AppState

__all__ = [
    "AppState",
]
