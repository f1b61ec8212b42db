"""Exercise definitions: the immutable input of one interval run.

``ExerciseSetup`` is what the editor produces and the library stores (a
named exercise without warm-up).  ``ExerciseDefinition`` is what the
timer consumes: the setup combined with the global warm-up length.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

MAX_NAME_LENGTH = 60


class InvalidDefinitionError(ValueError):
    """Raised when durations or set counts are out of range."""


def _require_int(name: str, value: object) -> None:
    # bool is an int subclass; "True sets" is never meant
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")


def _require_at_least(name: str, value: int, minimum: int) -> None:
    _require_int(name, value)
    if value < minimum:
        raise InvalidDefinitionError(f"{name} must be >= {minimum}, got {value}")


@dataclass(frozen=True)
class ExerciseDefinition:
    """Durations (seconds) and set count for one interval run."""

    warmup_seconds: int
    exercise_seconds: int
    rest_seconds: int
    sets: int

    def __post_init__(self) -> None:
        _require_at_least("warmup_seconds", self.warmup_seconds, 0)
        _require_at_least("exercise_seconds", self.exercise_seconds, 1)
        _require_at_least("rest_seconds", self.rest_seconds, 0)
        _require_at_least("sets", self.sets, 1)

    @property
    def longest_phase(self) -> int:
        return max(self.warmup_seconds, self.exercise_seconds, self.rest_seconds)

    @property
    def total_ticks(self) -> int:
        """Ticks from construction to completion.

        A zero-length warm-up or rest still shows ``0`` for one tick
        before advancing, so each counts as at least one tick.
        """
        return (
            max(self.warmup_seconds, 1)
            + self.sets * self.exercise_seconds
            + (self.sets - 1) * max(self.rest_seconds, 1)
        )


def compact_name(name: str) -> str:
    return " ".join(name.split())[:MAX_NAME_LENGTH]


@dataclass(frozen=True)
class ExerciseSetup:
    """A named exercise as shown in the sidebar and stored on disk."""

    name: str
    exercise_seconds: int = 30
    rest_seconds: int = 10
    sets: int = 8
    id: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(f"name must be a string, got {type(self.name).__name__}")
        name = compact_name(self.name)
        if not name:
            raise InvalidDefinitionError("name must not be blank")
        object.__setattr__(self, "name", name)
        _require_at_least("exercise_seconds", self.exercise_seconds, 1)
        _require_at_least("rest_seconds", self.rest_seconds, 0)
        _require_at_least("sets", self.sets, 1)

    def to_definition(self, warmup_seconds: int) -> ExerciseDefinition:
        return ExerciseDefinition(
            warmup_seconds=warmup_seconds,
            exercise_seconds=self.exercise_seconds,
            rest_seconds=self.rest_seconds,
            sets=self.sets,
        )

    def with_id(self, exercise_id: int | None) -> ExerciseSetup:
        return replace(self, id=exercise_id)

    @property
    def summary(self) -> str:
        """Short one-line description, e.g. ``8 × 30s / 10s rest``."""
        return f"{self.sets} × {self.exercise_seconds}s / {self.rest_seconds}s rest"
