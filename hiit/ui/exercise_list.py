"""Sidebar listing the stored exercises."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QListWidget, QListWidgetItem,
    QPushButton,
)

from ..timer.definition import ExerciseSetup


class ExerciseList(QWidget):
    """List of exercises with New / Load / Edit / Remove buttons.

    Signals
    -------
    new_requested()
    load_requested(setup: ExerciseSetup)
        Also emitted on double-click.
    edit_requested(setup: ExerciseSetup)
    remove_requested(setup: ExerciseSetup)
    """

    new_requested = pyqtSignal()
    load_requested = pyqtSignal(object)
    edit_requested = pyqtSignal(object)
    remove_requested = pyqtSignal(object)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._build_ui()
        self._update_buttons()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        self._new_btn = QPushButton("New", self)
        self._new_btn.setObjectName("primaryButton")
        self._new_btn.clicked.connect(self.new_requested)
        layout.addWidget(self._new_btn)

        self._list = QListWidget(self)
        self._list.itemDoubleClicked.connect(lambda _item: self._emit_for(self.load_requested))
        self._list.currentRowChanged.connect(lambda _row: self._update_buttons())
        layout.addWidget(self._list)

        row = QHBoxLayout()
        row.setSpacing(6)
        self._load_btn = QPushButton("Load", self)
        self._edit_btn = QPushButton("Edit", self)
        self._remove_btn = QPushButton("Remove", self)
        self._remove_btn.setObjectName("dangerButton")
        self._load_btn.clicked.connect(lambda: self._emit_for(self.load_requested))
        self._edit_btn.clicked.connect(lambda: self._emit_for(self.edit_requested))
        self._remove_btn.clicked.connect(lambda: self._emit_for(self.remove_requested))
        for btn in (self._load_btn, self._edit_btn, self._remove_btn):
            row.addWidget(btn)
        layout.addLayout(row)

    # ── public ────────────────────────────────────────────────────────

    def set_exercises(self, exercises: list[ExerciseSetup]) -> None:
        """Replace the list contents, keeping the selection by id if possible."""
        current = self.current_exercise()
        self._list.clear()
        for setup in exercises:
            item = QListWidgetItem(f"{setup.name}\n{setup.summary}")
            item.setData(Qt.ItemDataRole.UserRole, setup)
            self._list.addItem(item)
            if current is not None and setup.id == current.id:
                self._list.setCurrentItem(item)
        if self._list.currentRow() < 0 and self._list.count():
            self._list.setCurrentRow(0)
        self._update_buttons()

    def exercises(self) -> list[ExerciseSetup]:
        return [
            self._list.item(i).data(Qt.ItemDataRole.UserRole)
            for i in range(self._list.count())
        ]

    def current_exercise(self) -> ExerciseSetup | None:
        item = self._list.currentItem()
        return item.data(Qt.ItemDataRole.UserRole) if item else None

    def select_row(self, row: int) -> None:
        self._list.setCurrentRow(row)

    # ── internal ──────────────────────────────────────────────────────

    def _emit_for(self, signal) -> None:
        setup = self.current_exercise()
        if setup is not None:
            signal.emit(setup)

    def _update_buttons(self) -> None:
        has_selection = self._list.currentItem() is not None
        for btn in (self._load_btn, self._edit_btn, self._remove_btn):
            btn.setEnabled(has_selection)
