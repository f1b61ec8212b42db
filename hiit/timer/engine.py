"""Interval timer state machine for HIIT.

Phases
------
WARMUP      Counting down the warm-up (at most once, at the start).
EXERCISE    Counting down one set of work.
REST        Counting down the rest between two sets.

Transitions (on the tick that brings the countdown to 0)
---------------------------------------------------------
WARMUP   → EXERCISE
EXERCISE → REST               (sets left after this one)
EXERCISE → terminal           (that was the last set)
REST     → EXERCISE

Pause is not a phase: ``stop()`` drops the tick stream and ``start()``
asks the tick source for a new one, so the countdown resumes on a fresh
one-second cadence.  Ticks from a stream that is no longer current are
ignored.  The tick source holds the timer weakly, so discarding the
timer also ends its stream.

Zero-length warm-up or rest
---------------------------
The countdown is decremented (floored at 0) and then checked, so a phase
entered with 0 seconds shows ``0`` for one tick and advances on the next.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal

from .definition import ExerciseDefinition
from .ticks import QtTickSource, TickHandle, TickSource


class Phase(Enum):
    WARMUP = "warmup"
    EXERCISE = "exercise"
    REST = "rest"


@dataclass(frozen=True)
class TimerSnapshot:
    """Read-only view of the timer handed to the UI and tests."""

    phase: Phase
    remaining_seconds: int
    remaining_sets: int
    running: bool

    @property
    def completed(self) -> bool:
        return not self.running and self.remaining_sets == 0


class IntervalTimer(QObject):
    """Warm-up / exercise / rest countdown driven by one-second ticks.

    The timer starts itself on construction.  All commands are safe to
    repeat: ``start()`` while running, ``stop()`` while stopped and
    ``tick()`` while stopped are ignored.

    Signals
    -------
    snapshot_changed(snapshot: TimerSnapshot)
        Emitted after every command or tick that changed the snapshot.
    phase_changed(phase: Phase)
        Emitted when a tick or reset moves to a different phase.
    running_changed(running: bool)
        Emitted when the timer starts or stops (including completion).
    completed()
        Emitted once when the last exercise set finishes.
    """

    snapshot_changed = pyqtSignal(object)
    phase_changed = pyqtSignal(object)
    running_changed = pyqtSignal(bool)
    completed = pyqtSignal()

    def __init__(
        self,
        definition: ExerciseDefinition,
        *,
        tick_source: Optional[TickSource] = None,
        parent: QObject | None = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        super().__init__(parent)
        if not isinstance(definition, ExerciseDefinition):
            raise TypeError(
                f"definition must be an ExerciseDefinition, got {type(definition).__name__}"
            )
        self._definition = definition
        self._tick_source: TickSource = tick_source or QtTickSource(self)
        self._logger = logger or logging.getLogger("hiit.timer")

        self._phase: Phase = Phase.WARMUP
        self._remaining_seconds: int = definition.warmup_seconds
        self._remaining_sets: int = definition.sets
        self._tick_handle: TickHandle | None = None

        self._acquire_handle()
        self._logger.info(
            "Interval timer started: warmup=%ss exercise=%ss rest=%ss sets=%s",
            definition.warmup_seconds,
            definition.exercise_seconds,
            definition.rest_seconds,
            definition.sets,
        )

    # ── read-only state ───────────────────────────────────────────────

    @property
    def definition(self) -> ExerciseDefinition:
        return self._definition

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def remaining_seconds(self) -> int:
        return self._remaining_seconds

    @property
    def remaining_sets(self) -> int:
        return self._remaining_sets

    @property
    def running(self) -> bool:
        return self._tick_handle is not None

    @property
    def tick_handle(self) -> TickHandle | None:
        return self._tick_handle

    @property
    def is_terminal(self) -> bool:
        return self._remaining_sets == 0

    @property
    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            phase=self._phase,
            remaining_seconds=self._remaining_seconds,
            remaining_sets=self._remaining_sets,
            running=self.running,
        )

    @property
    def current_set(self) -> int:
        """1-based number of the current or upcoming exercise set."""
        if self.is_terminal:
            return self._definition.sets
        return self._definition.sets - self._remaining_sets + 1

    # ── commands ──────────────────────────────────────────────────────

    def start(self) -> None:
        """Resume counting.  Ignored while running or once complete."""
        if self.running:
            self._logger.debug("start() ignored: already running")
            return
        if self.is_terminal:
            self._logger.debug("start() ignored: workout complete")
            return
        self._acquire_handle()
        self._logger.info("Interval timer resumed: phase=%s", self._phase.value)
        self.running_changed.emit(True)
        self._emit_snapshot()

    def stop(self) -> None:
        """Pause counting without touching phase or countdown."""
        if not self.running:
            self._logger.debug("stop() ignored: not running")
            return
        self._release_handle()
        self._logger.info(
            "Interval timer paused: phase=%s remaining=%ss",
            self._phase.value,
            self._remaining_seconds,
        )
        self.running_changed.emit(False)
        self._emit_snapshot()

    def reset(self) -> None:
        """Back to the start of the warm-up, running on a fresh tick stream."""
        was_running = self.running
        previous_phase = self._phase
        self._release_handle()

        self._phase = Phase.WARMUP
        self._remaining_seconds = self._definition.warmup_seconds
        self._remaining_sets = self._definition.sets
        self._acquire_handle()
        self._logger.info("Interval timer reset")

        if previous_phase != self._phase:
            self.phase_changed.emit(self._phase)
        if not was_running:
            self.running_changed.emit(True)
        self._emit_snapshot()

    def tick(self) -> None:
        """Advance the countdown by one second.

        Normally called by the tick source; tests may call it directly.
        """
        if not self.running:
            self._logger.debug("tick ignored: not running")
            return

        self._remaining_seconds = max(0, self._remaining_seconds - 1)
        if self._remaining_seconds == 0:
            self._advance_phase()
        self._emit_snapshot()

    def close(self) -> None:
        """Release the tick stream now.

        A timer that is simply dropped releases its stream when it is
        collected; ``close()`` does it deterministically.
        """
        if self.running:
            self._release_handle()
            self.running_changed.emit(False)

    # ── internal ──────────────────────────────────────────────────────

    def _advance_phase(self) -> None:
        defn = self._definition
        if self._phase == Phase.WARMUP:
            self._enter(Phase.EXERCISE, defn.exercise_seconds)
        elif self._phase == Phase.EXERCISE:
            self._remaining_sets -= 1
            if self._remaining_sets == 0:
                self._finish()
            else:
                self._enter(Phase.REST, defn.rest_seconds)
        elif self._phase == Phase.REST:
            self._enter(Phase.EXERCISE, defn.exercise_seconds)

    def _enter(self, phase: Phase, seconds: int) -> None:
        self._phase = phase
        self._remaining_seconds = seconds
        self._logger.info(
            "Phase changed: %s (%ss, %s sets left)",
            phase.value,
            seconds,
            self._remaining_sets,
        )
        self.phase_changed.emit(phase)

    def _finish(self) -> None:
        self._remaining_seconds = 0
        self._release_handle()
        self._logger.info("Workout complete: %s sets", self._definition.sets)
        self.running_changed.emit(False)
        self.completed.emit()

    def _on_source_tick(self, handle: TickHandle) -> None:
        if handle is not self._tick_handle:
            self._logger.debug("Discarding tick from stale stream %r", handle)
            return
        self.tick()

    def _acquire_handle(self) -> None:
        self._tick_handle = self._tick_source.start(self._on_source_tick)

    def _release_handle(self) -> None:
        handle = self._tick_handle
        self._tick_handle = None
        if handle is not None:
            self._tick_source.stop(handle)

    def _emit_snapshot(self) -> None:
        self.snapshot_changed.emit(self.snapshot)
