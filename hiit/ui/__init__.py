"""UI package."""

from .timer_widget import TimerWidget
from .exercise_editor import EditorRole, ExerciseEditor
from .exercise_list import ExerciseList
from .settings_dialog import SettingsDialog

__all__ = [
    "TimerWidget",
    "EditorRole",
    "ExerciseEditor",
    "ExerciseList",
    "SettingsDialog",
]
