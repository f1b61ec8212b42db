"""Cue sounds synthesised with numpy and played through QSoundEffect.

Every cue is a short sequence of sine tones shaped by an ADSR envelope,
rendered once to a WAV file in the sounds cache directory.

Cue names
---------
- ``exercise_start``   — two rising tones, "go"
- ``rest_start``       — soft low bell
- ``countdown``        — short beep for the last three seconds of a phase
- ``workout_complete`` — four-note major arpeggio
- ``click``            — subtle preview click for the volume slider
"""

from __future__ import annotations

import io
import logging
import wave
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtMultimedia import QSoundEffect

from ..paths import APP_DATA_DIR

SOUNDS_DIR = APP_DATA_DIR / "sounds"
SAMPLE_RATE = 44100

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tone:
    """One note of a cue; envelope times are in seconds."""

    freq: float
    duration: float
    amplitude: float = 0.5
    attack: float = 0.005
    decay: float = 0.02
    sustain: float = 0.6
    release: float = 0.04
    overtone: float = 0.0          # relative level of the octave above
    gap_after: float = 0.0


def _envelope(n: int, tone: Tone) -> np.ndarray:
    """ADSR gain curve of *n* samples."""
    a = min(int(tone.attack * SAMPLE_RATE), n)
    d = min(int(tone.decay * SAMPLE_RATE), n - a)
    r = min(int(tone.release * SAMPLE_RATE), n - a - d)
    s = n - a - d - r
    return np.concatenate([
        np.linspace(0.0, 1.0, a, endpoint=False),
        np.linspace(1.0, tone.sustain, d, endpoint=False),
        np.full(s, tone.sustain),
        np.linspace(tone.sustain, 0.0, r),
    ])


def render_tone(tone: Tone) -> np.ndarray:
    n = int(SAMPLE_RATE * tone.duration)
    t = np.arange(n) / SAMPLE_RATE
    carrier = np.sin(2 * np.pi * tone.freq * t)
    if tone.overtone:
        carrier = carrier + tone.overtone * np.sin(4 * np.pi * tone.freq * t)
    samples = tone.amplitude * carrier * _envelope(n, tone)
    return np.concatenate([samples, np.zeros(int(SAMPLE_RATE * tone.gap_after))])


def render_cue(tones: tuple[Tone, ...], tail: float = 0.05) -> bytes:
    """Render *tones* back to back into 16-bit mono WAV bytes."""
    samples = np.concatenate([render_tone(t) for t in tones] + [np.zeros(int(SAMPLE_RATE * tail))])
    pcm = (np.clip(samples, -1.0, 1.0) * 32767).astype(np.int16)

    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(SAMPLE_RATE)
        wf.writeframes(pcm.tobytes())
    return buf.getvalue()


CUES: dict[str, tuple[Tone, ...]] = {
    "exercise_start": (
        Tone(659.25, 0.12, gap_after=0.03),                   # E5
        Tone(987.77, 0.25, overtone=0.15, release=0.12),      # B5
    ),
    "rest_start": (
        Tone(392.00, 0.9, amplitude=0.35, attack=0.06, decay=0.25,
             sustain=0.3, release=0.5, overtone=0.2),         # G4 bell
    ),
    "countdown": (
        Tone(880.00, 0.08, amplitude=0.4, sustain=0.5, release=0.03),
    ),
    "workout_complete": (
        Tone(523.25, 0.10, gap_after=0.02),                   # C5
        Tone(659.25, 0.10, gap_after=0.02),                   # E5
        Tone(783.99, 0.10, gap_after=0.02),                   # G5
        Tone(1046.50, 0.40, sustain=0.5, release=0.25, overtone=0.1),
    ),
    "click": (
        Tone(1200.0, 0.015, amplitude=0.2, attack=0.0005, decay=0.001,
             sustain=0.0, release=0.0),
    ),
}

SOUND_NAMES = tuple(CUES)


class SoundManager(QObject):
    """Synthesises, caches and plays the cue sounds.

    Usage::

        mgr = SoundManager(parent=self)
        mgr.set_volume(70)
        mgr.play("exercise_start")
    """

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        sounds_dir: Path | None = None,
    ) -> None:
        super().__init__(parent)
        self._enabled = True
        self._volume = 0.7  # 0.0–1.0
        self._sounds_dir = sounds_dir or SOUNDS_DIR
        self._effects: dict[str, QSoundEffect] = {}

        self._ensure_wav_files()
        self._load_effects()

    # ── public API ────────────────────────────────────────────────────

    def set_volume(self, level: int) -> None:
        """Set volume (0-100).  Updates all loaded effects."""
        self._volume = max(0, min(level, 100)) / 100.0
        for effect in self._effects.values():
            effect.setVolume(self._volume)

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    def play(self, name: str) -> None:
        """Play a cue by name.  No-op if disabled or name unknown."""
        if not self._enabled:
            return
        effect = self._effects.get(name)
        if effect is None:
            _log.debug("Unknown sound: %s", name)
            return
        effect.play()

    @property
    def volume(self) -> int:
        return round(self._volume * 100)

    @property
    def enabled(self) -> bool:
        return self._enabled

    # ── internal ──────────────────────────────────────────────────────

    def _ensure_wav_files(self) -> None:
        self._sounds_dir.mkdir(parents=True, exist_ok=True)
        for name, tones in CUES.items():
            path = self._sounds_dir / f"{name}.wav"
            if not path.exists():
                path.write_bytes(render_cue(tones))
                _log.debug("Rendered cue %s", path)

    def _load_effects(self) -> None:
        for name in SOUND_NAMES:
            path = self._sounds_dir / f"{name}.wav"
            effect = QSoundEffect(self)
            effect.setSource(QUrl.fromLocalFile(str(path)))
            effect.setVolume(self._volume)
            self._effects[name] = effect
