"""Timer package."""

from .definition import ExerciseDefinition, ExerciseSetup, InvalidDefinitionError
from .engine import IntervalTimer, Phase, TimerSnapshot
from .ticks import ManualTickSource, QtTickSource, TickHandle, TickSource, TICK_INTERVAL_MS

__all__ = [
    "ExerciseDefinition",
    "ExerciseSetup",
    "InvalidDefinitionError",
    "IntervalTimer",
    "Phase",
    "TimerSnapshot",
    "ManualTickSource",
    "QtTickSource",
    "TickHandle",
    "TickSource",
    "TICK_INTERVAL_MS",
]
