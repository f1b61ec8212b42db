"""Database connection and session management."""

import logging
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session as OrmSession

from ..paths import APP_DATA_DIR
from .models import Base, Exercise

DB_PATH = APP_DATA_DIR / "hiit.db"

# Seeded on first launch so the sidebar is never empty
DEFAULT_EXERCISE = {
    "name": "Jumping jacks",
    "exercise_seconds": 30,
    "rest_seconds": 10,
    "sets": 8,
}

_log = logging.getLogger(__name__)

# ── engine & session factory (created lazily) ─────────────────────────────

_engine = None
_SessionFactory = None


def _get_engine():
    global _engine
    if _engine is None:
        DB_PATH.parent.mkdir(parents=True, exist_ok=True)
        _engine = create_engine(
            f"sqlite:///{DB_PATH}",
            connect_args={"check_same_thread": False},
            echo=False,
        )
    return _engine


def _get_session_factory():
    global _SessionFactory
    if _SessionFactory is None:
        _SessionFactory = sessionmaker(bind=_get_engine(), expire_on_commit=False)
    return _SessionFactory


# ── public API ────────────────────────────────────────────────────────────


def configure_engine(url: str) -> None:
    """Override the database connection URL.  Tests point this at an
    in-memory SQLite database instead of the real one on disk."""
    global _engine, _SessionFactory
    _SessionFactory = None
    _engine = create_engine(
        url,
        connect_args={"check_same_thread": False},
        echo=False,
    )


def init_db(*, seed: bool = True) -> None:
    """Create all tables and seed the default exercise on first run."""
    engine = _get_engine()
    Base.metadata.create_all(engine)
    if not seed:
        return

    factory = _get_session_factory()
    with factory() as session:
        if session.query(Exercise).count() == 0:
            session.add(Exercise(position=0, **DEFAULT_EXERCISE))
            session.commit()
            _log.info("Seeded default exercise: %s", DEFAULT_EXERCISE["name"])


@contextmanager
def get_session():
    """Yield a SQLAlchemy session; commit on success, rollback on error."""
    factory = _get_session_factory()
    session: OrmSession = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
