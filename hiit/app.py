"""Main application window for HIIT."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QLabel, QStackedWidget,
)

from .audio.sounds import SoundManager
from .database.library import ExerciseLibrary
from .settings import Settings, load_settings, save_settings
from .timer.definition import ExerciseSetup
from .timer.engine import IntervalTimer, Phase, TimerSnapshot
from .timer.ticks import TickSource
from .ui.exercise_editor import EditorRole, ExerciseEditor
from .ui.exercise_list import ExerciseList
from .ui.settings_dialog import SettingsDialog
from .ui.styles import build_stylesheet
from .ui.timer_widget import TimerWidget

COUNTDOWN_BEEPS = (3, 2, 1)

_log = logging.getLogger(__name__)


class HiitApp(QMainWindow):
    """Exercise list on the left, the running timer on the right."""

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        library: ExerciseLibrary | None = None,
        sound_manager: SoundManager | None = None,
        tick_source_factory: Optional[Callable[[], TickSource]] = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("HIIT")
        self.setMinimumSize(300, 300)

        self._settings = settings if settings is not None else load_settings()
        self._library = library or ExerciseLibrary()
        self._tick_source_factory = tick_source_factory

        self._sound_manager = sound_manager or SoundManager(parent=self)
        self._sound_manager.set_volume(self._settings.sound_volume)
        self._sound_manager.set_enabled(self._settings.sound_enabled)

        self._timer: IntervalTimer | None = None
        self._timer_widget: TimerWidget | None = None
        self._last_countdown: tuple | None = None

        self.setStyleSheet(build_stylesheet())
        self._build_ui()
        self._build_menu_bar()
        self._restore_geometry()
        self.reload_exercises()

    # ── build ─────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        central = QWidget(self)
        self.setCentralWidget(central)
        layout = QHBoxLayout(central)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(12)

        self._exercise_list = ExerciseList(central)
        self._exercise_list.setFixedWidth(240)
        self._exercise_list.new_requested.connect(self.prompt_new_exercise)
        self._exercise_list.load_requested.connect(self.load_exercise)
        self._exercise_list.edit_requested.connect(self.prompt_edit_exercise)
        self._exercise_list.remove_requested.connect(self.remove_exercise)
        layout.addWidget(self._exercise_list)

        self._stack = QStackedWidget(central)
        self._placeholder = QLabel("No exercise selected", self._stack)
        self._placeholder.setObjectName("placeholder")
        self._placeholder.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._stack.addWidget(self._placeholder)
        layout.addWidget(self._stack, stretch=1)

        self.statusBar().showMessage("Pick an exercise to begin")

    def _build_menu_bar(self) -> None:
        menu = self.menuBar().addMenu("&File")

        new_action = QAction("New Exercise…", self)
        new_action.setShortcut(QKeySequence("Ctrl+N"))
        new_action.triggered.connect(self.prompt_new_exercise)
        menu.addAction(new_action)

        settings_action = QAction("Settings…", self)
        settings_action.setShortcut(QKeySequence("Ctrl+,"))
        settings_action.triggered.connect(self.open_settings)
        menu.addAction(settings_action)

        menu.addSeparator()

        quit_action = QAction("Quit", self)
        quit_action.setShortcut(QKeySequence("Ctrl+Q"))
        quit_action.triggered.connect(self.close)
        menu.addAction(quit_action)

    # ── public properties ─────────────────────────────────────────────

    @property
    def timer(self) -> IntervalTimer | None:
        return self._timer

    @property
    def exercise_list(self) -> ExerciseList:
        return self._exercise_list

    # ══════════════════════════════════════════════════════════════════
    #  EXERCISE LIST
    # ══════════════════════════════════════════════════════════════════

    def reload_exercises(self) -> None:
        self._exercise_list.set_exercises(self._library.list_exercises())

    def prompt_new_exercise(self) -> None:
        # The editor is modal, so don't let the workout run on behind it
        self.pause_timer()
        setup = self._run_editor(EditorRole.NEW, None)
        if setup is not None:
            self._library.add(setup)
            self.reload_exercises()

    def prompt_edit_exercise(self, setup: ExerciseSetup) -> None:
        self.pause_timer()
        edited = self._run_editor(EditorRole.EDIT, setup)
        if edited is not None:
            self._library.update(edited)
            self.reload_exercises()

    def remove_exercise(self, setup: ExerciseSetup) -> None:
        if setup.id is not None:
            self._library.remove(setup.id)
        self.reload_exercises()

    def _run_editor(
        self, role: EditorRole, setup: ExerciseSetup | None,
    ) -> ExerciseSetup | None:
        editor = ExerciseEditor(role, setup, parent=self)
        if not editor.exec():
            return None
        return editor.setup()

    # ══════════════════════════════════════════════════════════════════
    #  TIMER
    # ══════════════════════════════════════════════════════════════════

    def load_exercise(self, setup: ExerciseSetup) -> IntervalTimer:
        """Replace the current timer with a fresh one for *setup*."""
        self._discard_timer()

        definition = setup.to_definition(self._settings.warmup_seconds)
        tick_source = self._tick_source_factory() if self._tick_source_factory else None
        timer = IntervalTimer(definition, tick_source=tick_source, parent=self)
        timer.phase_changed.connect(self._on_phase_changed)
        timer.snapshot_changed.connect(self._on_snapshot_changed)
        timer.completed.connect(self._on_completed)
        self._timer = timer

        self._timer_widget = TimerWidget(timer, setup.name, self._stack)
        self._stack.addWidget(self._timer_widget)
        self._stack.setCurrentWidget(self._timer_widget)
        self._last_countdown = None

        _log.info("Loaded exercise %r", setup.name)
        self.statusBar().showMessage(f"{setup.name}: {setup.summary}")
        return timer

    def pause_timer(self) -> None:
        if self._timer is not None:
            self._timer.stop()

    def toggle_timer(self) -> None:
        if self._timer_widget is not None:
            self._timer_widget.toggle()

    def reset_timer(self) -> None:
        if self._timer is not None:
            self._timer.reset()

    def _discard_timer(self) -> None:
        if self._timer is None:
            return
        self._timer.close()
        self._timer.phase_changed.disconnect(self._on_phase_changed)
        self._timer.snapshot_changed.disconnect(self._on_snapshot_changed)
        self._timer.completed.disconnect(self._on_completed)
        self._timer.deleteLater()
        self._timer = None

        if self._timer_widget is not None:
            self._stack.removeWidget(self._timer_widget)
            self._timer_widget.deleteLater()
            self._timer_widget = None
        self._stack.setCurrentWidget(self._placeholder)

    # ── cue sounds ────────────────────────────────────────────────────

    def _on_phase_changed(self, phase: Phase) -> None:
        if phase == Phase.EXERCISE:
            self._sound_manager.play("exercise_start")
        elif phase == Phase.REST:
            self._sound_manager.play("rest_start")

    def _on_snapshot_changed(self, snap: TimerSnapshot) -> None:
        if not snap.running or snap.remaining_seconds not in COUNTDOWN_BEEPS:
            return
        key = (snap.phase, snap.remaining_sets, snap.remaining_seconds)
        if key == self._last_countdown:
            return
        self._last_countdown = key
        self._sound_manager.play("countdown")

    def _on_completed(self) -> None:
        self._sound_manager.play("workout_complete")
        self.statusBar().showMessage("Workout complete. Nice work!")

    # ══════════════════════════════════════════════════════════════════
    #  SETTINGS
    # ══════════════════════════════════════════════════════════════════

    def open_settings(self) -> None:
        def _preview_click():
            self._apply_settings()
            self._sound_manager.play("click")

        dlg = SettingsDialog(
            self._settings, self, sound_preview_callback=_preview_click,
        )
        dlg.exec()
        self._apply_settings()

    def _apply_settings(self) -> None:
        """Push sound settings live; warm-up applies to the next load."""
        self._sound_manager.set_volume(self._settings.sound_volume)
        self._sound_manager.set_enabled(self._settings.sound_enabled)

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW STATE
    # ══════════════════════════════════════════════════════════════════

    def _restore_geometry(self) -> None:
        s = self._settings
        if s.window_width and s.window_height:
            self.resize(s.window_width, s.window_height)

    def show_restored(self) -> None:
        """Show the window, maximized if it was when last closed."""
        if self._settings.window_maximized:
            self.showMaximized()
        else:
            self.show()

    def _save_geometry(self) -> None:
        s = self._settings
        s.window_maximized = self.isMaximized()
        if not s.window_maximized:
            s.window_width = self.width()
            s.window_height = self.height()
        save_settings(s)

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._save_geometry()
        self._discard_timer()
        event.accept()

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        """Space starts/stops, R resets."""
        key = event.key()
        if key == Qt.Key.Key_Space and not event.modifiers():
            self.toggle_timer()
            event.accept()
            return
        if key == Qt.Key.Key_R and not event.modifiers():
            self.reset_timer()
            event.accept()
            return
        super().keyPressEvent(event)
