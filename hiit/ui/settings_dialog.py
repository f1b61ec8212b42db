"""Settings dialog for HIIT.

A modal dialog for the warm-up length and sound preferences.  Changes
are saved immediately to disk; the caller applies them after the dialog
closes.
"""

from __future__ import annotations

from typing import Callable, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QFormLayout,
    QLabel, QSpinBox, QSlider, QCheckBox, QPushButton, QWidget,
)

from ..settings import MAX_WARMUP_SECONDS, Settings, save_settings


class SettingsDialog(QDialog):
    """Modal dialog for all user preferences."""

    def __init__(
        self,
        settings: Settings,
        parent: QWidget | None = None,
        *,
        sound_preview_callback: Optional[Callable[[], None]] = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setMinimumWidth(380)
        self.setModal(True)

        self._settings = settings
        self._sound_preview = sound_preview_callback

        self._build_ui()
        self._populate()
        self._connect_signals()

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(24, 20, 24, 20)
        root.setSpacing(16)

        form = QFormLayout()
        form.setHorizontalSpacing(20)
        form.setVerticalSpacing(10)

        self._warmup_spin = QSpinBox()
        self._warmup_spin.setRange(0, MAX_WARMUP_SECONDS)
        self._warmup_spin.setSuffix(" s")
        form.addRow("Warm-up:", self._warmup_spin)

        self._sound_cb = QCheckBox("Sound cues")
        form.addRow("", self._sound_cb)

        vol_row = QHBoxLayout()
        vol_row.setSpacing(10)
        self._vol_slider = QSlider(Qt.Orientation.Horizontal)
        self._vol_slider.setRange(0, 100)
        self._vol_label = QLabel()
        self._vol_label.setMinimumWidth(36)
        vol_row.addWidget(self._vol_slider)
        vol_row.addWidget(self._vol_label)
        vol_wrapper = QWidget()
        vol_wrapper.setLayout(vol_row)
        form.addRow("Volume:", vol_wrapper)

        root.addLayout(form)
        root.addStretch()

        btn_row = QHBoxLayout()
        btn_row.addStretch()
        close_btn = QPushButton("Close")
        close_btn.clicked.connect(self.accept)
        btn_row.addWidget(close_btn)
        root.addLayout(btn_row)

    def _populate(self) -> None:
        s = self._settings
        self._warmup_spin.setValue(s.warmup_seconds)
        self._sound_cb.setChecked(s.sound_enabled)
        self._vol_slider.setValue(s.sound_volume)
        self._vol_label.setText(f"{s.sound_volume}%")

    def _connect_signals(self) -> None:
        self._warmup_spin.valueChanged.connect(self._on_warmup_changed)
        self._sound_cb.toggled.connect(self._on_sound_toggled)
        self._vol_slider.valueChanged.connect(self._on_volume_changed)
        self._vol_slider.sliderReleased.connect(self._on_volume_released)

    # ── change handlers: save immediately ────────────────────────────

    def _on_warmup_changed(self, value: int) -> None:
        self._settings.warmup_seconds = value
        save_settings(self._settings)

    def _on_sound_toggled(self, checked: bool) -> None:
        self._settings.sound_enabled = checked
        save_settings(self._settings)

    def _on_volume_changed(self, value: int) -> None:
        self._vol_label.setText(f"{value}%")
        self._settings.sound_volume = value
        save_settings(self._settings)

    def _on_volume_released(self) -> None:
        """Play a click so the user hears the new level."""
        if self._sound_preview:
            self._sound_preview()

    @property
    def settings(self) -> Settings:
        return self._settings
