"""Modal editor for one exercise.

Used both to create a new exercise and to edit an existing one.  The
dialog never touches the library itself: the caller reads ``setup()``
after ``exec()`` returns ``Accepted`` and decides what to do with it.
"""

from __future__ import annotations

from enum import Enum

from PyQt6.QtWidgets import (
    QDialog, QDialogButtonBox, QFormLayout, QLineEdit, QSpinBox,
    QVBoxLayout, QWidget,
)

from ..timer.definition import ExerciseSetup, MAX_NAME_LENGTH, compact_name

MAX_PHASE_SECONDS = 3600
MAX_SETS = 100


class EditorRole(Enum):
    NEW = "new"
    EDIT = "edit"


_TITLES = {
    EditorRole.NEW: ("New Exercise", "Create"),
    EditorRole.EDIT: ("Edit Exercise", "Save"),
}


class ExerciseEditor(QDialog):
    """Name, exercise seconds, rest seconds and sets for one exercise."""

    def __init__(
        self,
        role: EditorRole = EditorRole.NEW,
        setup: ExerciseSetup | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._role = role
        self._original = setup
        title, accept_text = _TITLES[role]
        self.setWindowTitle(title)
        self.setMinimumWidth(360)
        self.setModal(True)

        self._build_ui(accept_text)
        self._populate(setup or ExerciseSetup(name="New exercise"))

    def _build_ui(self, accept_text: str) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(24, 20, 24, 20)
        root.setSpacing(16)

        form = QFormLayout()
        form.setHorizontalSpacing(20)
        form.setVerticalSpacing(10)

        self._name_edit = QLineEdit()
        self._name_edit.setMaxLength(MAX_NAME_LENGTH)
        self._name_edit.textChanged.connect(self._update_accept_enabled)
        form.addRow("Name:", self._name_edit)

        self._exercise_spin = QSpinBox()
        self._exercise_spin.setRange(1, MAX_PHASE_SECONDS)
        self._exercise_spin.setSuffix(" s")
        form.addRow("Exercise:", self._exercise_spin)

        self._rest_spin = QSpinBox()
        self._rest_spin.setRange(0, MAX_PHASE_SECONDS)
        self._rest_spin.setSuffix(" s")
        form.addRow("Rest:", self._rest_spin)

        self._sets_spin = QSpinBox()
        self._sets_spin.setRange(1, MAX_SETS)
        form.addRow("Sets:", self._sets_spin)

        root.addLayout(form)

        self._buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        self._accept_btn = self._buttons.button(QDialogButtonBox.StandardButton.Ok)
        self._accept_btn.setText(accept_text)
        self._accept_btn.setObjectName("primaryButton")
        self._buttons.accepted.connect(self.accept)
        self._buttons.rejected.connect(self.reject)
        root.addWidget(self._buttons)

    def _populate(self, setup: ExerciseSetup) -> None:
        self._name_edit.setText(setup.name)
        self._exercise_spin.setValue(setup.exercise_seconds)
        self._rest_spin.setValue(setup.rest_seconds)
        self._sets_spin.setValue(setup.sets)
        self._update_accept_enabled()

    def _update_accept_enabled(self) -> None:
        self._accept_btn.setEnabled(bool(compact_name(self._name_edit.text())))

    # ── public ────────────────────────────────────────────────────────

    @property
    def role(self) -> EditorRole:
        return self._role

    def setup(self) -> ExerciseSetup:
        """The edited exercise; keeps the id of the one being edited."""
        return ExerciseSetup(
            name=self._name_edit.text(),
            exercise_seconds=self._exercise_spin.value(),
            rest_seconds=self._rest_spin.value(),
            sets=self._sets_spin.value(),
            id=self._original.id if self._original is not None else None,
        )
