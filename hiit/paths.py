"""Where HIIT keeps its files.

Everything lives under ``~/.config/hiit`` unless ``HIIT_HOME`` points
somewhere else.
"""

from __future__ import annotations

import os
from pathlib import Path

APP_DATA_DIR = Path(
    os.environ.get("HIIT_HOME") or Path.home() / ".config" / "hiit"
).expanduser()
