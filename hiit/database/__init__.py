"""Database package."""

from .db import configure_engine, get_session, init_db
from .library import ExerciseLibrary
from .models import Exercise

__all__ = ["configure_engine", "get_session", "init_db", "ExerciseLibrary", "Exercise"]
