"""Timer page: phase, countdown, set counter and the two controls.

Layout (top → bottom):
    - Exercise name
    - Phase label ("WARM UP", "EXERCISE", "REST", "PAUSED", "DONE!")
    - Countdown (MM:SS)
    - "Set x of n"
    - Reset / Start-Stop buttons
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QFrame,
)

from ..timer.engine import IntervalTimer, Phase, TimerSnapshot
from .styles import colors_for


PHASE_LABELS: dict[Phase, str] = {
    Phase.WARMUP:   "WARM UP",
    Phase.EXERCISE: "EXERCISE",
    Phase.REST:     "REST",
}


def format_seconds(seconds: int) -> str:
    minutes, seconds = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{seconds:02d}"


class TimerWidget(QWidget):
    """Renders an :class:`IntervalTimer` snapshot and forwards button clicks."""

    def __init__(
        self,
        timer: IntervalTimer,
        title: str = "",
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._timer = timer
        self._build_ui(title)
        self._connect_signals()
        self._render(timer.snapshot)

    @property
    def timer(self) -> IntervalTimer:
        return self._timer

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self, title: str) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        self._card = QFrame(self)
        self._card.setObjectName("timerCard")
        root.addWidget(self._card)

        layout = QVBoxLayout(self._card)
        layout.setContentsMargins(32, 24, 32, 28)
        layout.setSpacing(8)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._title_label = QLabel(title, self._card)
        self._title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._title_label.setStyleSheet("font-size: 16px; font-weight: 600;")
        layout.addWidget(self._title_label)

        self._phase_label = QLabel(self._card)
        self._phase_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._phase_label)

        self._time_label = QLabel(self._card)
        self._time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._time_label)

        self._sets_label = QLabel(self._card)
        self._sets_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._sets_label)

        layout.addSpacing(16)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(12)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._reset_btn = QPushButton("Reset", self._card)
        self._reset_btn.setObjectName("dangerButton")

        self._start_stop_btn = QPushButton("Stop", self._card)
        self._start_stop_btn.setObjectName("primaryButton")

        btn_row.addWidget(self._reset_btn)
        btn_row.addWidget(self._start_stop_btn)
        layout.addLayout(btn_row)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._start_stop_btn.clicked.connect(self.toggle)
        self._reset_btn.clicked.connect(self._timer.reset)
        self._timer.snapshot_changed.connect(self._render)

    # ── slots ─────────────────────────────────────────────────────────────

    def toggle(self) -> None:
        """Stop a running timer, start a stopped one."""
        if self._timer.running:
            self._timer.stop()
        else:
            self._timer.start()

    def _render(self, snap: TimerSnapshot) -> None:
        accent, tint = colors_for(
            snap.phase, running=snap.running, completed=snap.completed,
        )
        self._card.setStyleSheet(
            f"QFrame#timerCard {{ background-color: {tint}; border-radius: 16px; }}"
        )

        if snap.completed:
            phase_text = "DONE!"
        elif not snap.running:
            phase_text = "PAUSED"
        else:
            phase_text = PHASE_LABELS[snap.phase]
        self._phase_label.setText(phase_text)
        self._phase_label.setStyleSheet(
            f"font-size: 22px; font-weight: 700; letter-spacing: 2px; color: {accent};"
        )

        self._time_label.setText(format_seconds(snap.remaining_seconds))
        self._time_label.setStyleSheet(
            f"font-size: 96px; font-weight: 300; color: {accent};"
        )

        total = self._timer.definition.sets
        self._sets_label.setText(f"Set {self._timer.current_set} of {total}")

        self._start_stop_btn.setText("Stop" if snap.running else "Start")
        self._start_stop_btn.setEnabled(not snap.completed)
