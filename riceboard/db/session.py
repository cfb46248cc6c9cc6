# riceboard/db/session.py

from sqlalchemy import create_engine

from riceboard.config import settings  # expects DATABASE_URL

engine = create_engine(settings.DATABASE_URL, future=True)


def init_db() -> None:
    """Create the local state table if it does not exist yet."""
    from riceboard.db.base import Base

    Base.metadata.create_all(bind=engine)
