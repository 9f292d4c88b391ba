"""Database session management."""

import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from contextlib import contextmanager
from pathlib import Path

from .models import Base

logger = logging.getLogger(__name__)

_engine = None
_SessionLocal = None


def init_db(db_path: str):
    """Initialize the database."""
    global _engine, _SessionLocal

    if db_path != ":memory:":
        # Ensure directory exists
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    _engine = create_engine(f"sqlite:///{db_path}", echo=False)
    _SessionLocal = sessionmaker(bind=_engine)

    # Create tables
    Base.metadata.create_all(_engine)

    logger.debug(f"Database initialized at {db_path}")
    return _engine


def close_db():
    """Dispose of the engine created by init_db()."""
    global _engine, _SessionLocal

    if _engine is not None:
        _engine.dispose()
        logger.debug("Database connection closed")

    _engine = None
    _SessionLocal = None


@contextmanager
def get_session():
    """Get a database session as a context manager."""
    if _SessionLocal is None:
        raise RuntimeError("Database not initialized. Call init_db() first.")

    session = _SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
