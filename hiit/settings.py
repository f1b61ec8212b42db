"""Application settings with JSON persistence.

Settings are stored at ``<APP_DATA_DIR>/settings.json``.

Usage::

    settings = load_settings()
    settings.warmup_seconds = 15
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields

from .paths import APP_DATA_DIR

SETTINGS_PATH = APP_DATA_DIR / "settings.json"
MAX_WARMUP_SECONDS = 600

_log = logging.getLogger(__name__)


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    warmup_seconds: int = 10               # shared by every exercise

    # ── audio ─────────────────────────────────────────────────────────
    sound_enabled: bool = True
    sound_volume: int = 70                 # 0-100

    # ── window ────────────────────────────────────────────────────────
    window_width: int = 720
    window_height: int = 520
    window_maximized: bool = False


# Inclusive bounds for numeric fields; None leaves that side open
_LIMITS: dict[str, tuple[int, int | None]] = {
    "warmup_seconds": (0, MAX_WARMUP_SECONDS),
    "sound_volume": (0, 100),
    "window_width": (1, None),
    "window_height": (1, None),
}


def _is_valid(name: str, value, default) -> bool:
    if isinstance(default, bool):
        return isinstance(value, bool)
    if not isinstance(value, int) or isinstance(value, bool):
        return False
    low, high = _LIMITS.get(name, (None, None))
    if low is not None and value < low:
        return False
    if high is not None and value > high:
        return False
    return True


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults.

    A value of the wrong type or out of range is replaced by its default
    and logged; the rest of the file is still used.
    """
    if not SETTINGS_PATH.exists():
        return Settings()
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        defaults = Settings()
        values = {}
        # Only use keys that exist in the dataclass
        for f in fields(Settings):
            if f.name not in data:
                continue
            value = data[f.name]
            default = getattr(defaults, f.name)
            if _is_valid(f.name, value, default):
                values[f.name] = value
            else:
                _log.warning(
                    "Ignoring invalid setting %s=%r in %s, using %r",
                    f.name, value, SETTINGS_PATH, default,
                )
        return Settings(**values)
    except (OSError, ValueError) as error:
        _log.warning("Ignoring unreadable settings file %s: %s", SETTINGS_PATH, error)
        return Settings()


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
