"""The persisted, ordered exercise list."""

from __future__ import annotations

import logging

from sqlalchemy import func

from ..timer.definition import ExerciseSetup
from .db import get_session
from .models import Exercise

_log = logging.getLogger(__name__)


def _to_setup(row: Exercise) -> ExerciseSetup:
    return ExerciseSetup(
        name=row.name,
        exercise_seconds=row.exercise_seconds,
        rest_seconds=row.rest_seconds,
        sets=row.sets,
        id=row.id,
    )


class ExerciseLibrary:
    """CRUD over the ``exercises`` table, returning ``ExerciseSetup`` values."""

    def list_exercises(self) -> list[ExerciseSetup]:
        with get_session() as db:
            rows = db.query(Exercise).order_by(Exercise.position, Exercise.id).all()
            return [_to_setup(row) for row in rows]

    def get(self, exercise_id: int) -> ExerciseSetup | None:
        with get_session() as db:
            row = db.get(Exercise, exercise_id)
            return _to_setup(row) if row else None

    def add(self, setup: ExerciseSetup) -> ExerciseSetup:
        """Append *setup* to the end of the list and return it with its id."""
        with get_session() as db:
            last = db.query(func.max(Exercise.position)).scalar()
            row = Exercise(
                name=setup.name,
                exercise_seconds=setup.exercise_seconds,
                rest_seconds=setup.rest_seconds,
                sets=setup.sets,
                position=0 if last is None else last + 1,
            )
            db.add(row)
            db.flush()
            _log.info("Exercise added: %r", row)
            return _to_setup(row)

    def update(self, setup: ExerciseSetup) -> ExerciseSetup:
        if setup.id is None:
            raise LookupError("cannot update an exercise without an id")
        with get_session() as db:
            row = db.get(Exercise, setup.id)
            if row is None:
                raise LookupError(f"no exercise with id {setup.id}")
            row.name = setup.name
            row.exercise_seconds = setup.exercise_seconds
            row.rest_seconds = setup.rest_seconds
            row.sets = setup.sets
            _log.info("Exercise updated: %r", row)
            return _to_setup(row)

    def remove(self, exercise_id: int) -> bool:
        """Delete an exercise.  Returns False if it did not exist."""
        with get_session() as db:
            row = db.get(Exercise, exercise_id)
            if row is None:
                return False
            db.delete(row)
            _log.info("Exercise removed: id=%s", exercise_id)
            return True
