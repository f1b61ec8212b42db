"""QSS stylesheet and phase colours for HIIT."""

from __future__ import annotations

from ..timer.engine import Phase

# ── phase colours (accent, background tint) ──────────────────────────────

PHASE_COLORS: dict[Phase, tuple[str, str]] = {
    Phase.WARMUP:   ("#F9E2AF", "#3A3526"),   # amber
    Phase.EXERCISE: ("#F38BA8", "#3E2631"),   # hot pink
    Phase.REST:     ("#89DCEB", "#22363B"),   # cool cyan
}

PAUSED_COLORS = ("#7A7A9A", "#2A2A3A")
DONE_COLORS = ("#A6E3A1", "#26382A")

PALETTE: dict[str, str] = {
    "bg":           "#1A1A2E",
    "bg_secondary": "#232340",
    "surface":      "#2A2A4A",
    "accent":       "#CBA6F7",
    "text":         "#E2E2F0",
    "text_muted":   "#7A7A9A",
    "danger":       "#F38BA8",
    "border":       "#313154",
}


def colors_for(phase: Phase, *, running: bool, completed: bool) -> tuple[str, str]:
    if completed:
        return DONE_COLORS
    if not running:
        return PAUSED_COLORS
    return PHASE_COLORS[phase]


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    p = palette or PALETTE
    return f"""
    QMainWindow, QDialog, QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-size: 14px;
    }}

    QListWidget {{
        background-color: {p['bg_secondary']};
        border: 1px solid {p['border']};
        border-radius: 8px;
        padding: 4px;
    }}

    QListWidget::item:selected {{
        background-color: {p['surface']};
        color: {p['accent']};
    }}

    QPushButton {{
        background-color: {p['surface']};
        color: {p['text']};
        border: 1px solid {p['border']};
        border-radius: 8px;
        padding: 8px 18px;
    }}

    QPushButton:hover {{
        border-color: {p['accent']};
    }}

    QPushButton:disabled {{
        color: {p['text_muted']};
    }}

    QPushButton#primaryButton {{
        background-color: {p['accent']};
        color: {p['bg']};
        font-weight: 700;
    }}

    QPushButton#dangerButton {{
        background-color: transparent;
        color: {p['danger']};
        border-color: {p['danger']};
    }}

    QLabel#placeholder {{
        color: {p['text_muted']};
        font-size: 18px;
    }}
    """
