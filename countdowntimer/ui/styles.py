"""QSS stylesheets, palettes, and countdown colours."""

from __future__ import annotations

from ..timer.engine import ButtonState, ThresholdState

# ── fixed ring colours ──────────────────────────────────────────────────

RING_TRACK = "#D3D3D3"   # light grey full circle behind the arc
RING_ARC = "#4CAF50"     # green 500

# ── button colours (background, foreground) ─────────────────────────────

PLAY_COLORS: tuple[str, str] = ("#E8F5E9", "#2E7D32")    # soft green
PAUSE_COLORS: tuple[str, str] = ("#FFF3E0", "#EF6C00")   # soft amber
STOP_TEXT = "#D32F2F"

BUTTON_COLORS: dict[ButtonState, tuple[str, str]] = {
    ButtonState.PLAY:   PLAY_COLORS,
    ButtonState.PAUSE:  PAUSE_COLORS,
    ButtonState.RESUME: PLAY_COLORS,
}

BUTTON_LABELS: dict[ButtonState, str] = {
    ButtonState.PLAY:   "Start",
    ButtonState.PAUSE:  "Pause",
    ButtonState.RESUME: "Resume",
}

BUTTON_ICONS: dict[ButtonState, str] = {
    ButtonState.PLAY:   "▶",
    ButtonState.PAUSE:  "❚❚",
    ButtonState.RESUME: "▶",
}

# ── palettes ─────────────────────────────────────────────────────────────

PALETTES: dict[str, dict[str, str]] = {
    "dark": {
        "bg":           "#121212",
        "bg_secondary": "#1E1E1E",
        "surface":      "#2A2A2A",
        "primary":      "#6200EE",
        "on_primary":   "#FFFFFF",
        "text":         "#ECECEC",
        "text_muted":   "#9E9E9E",
        "border":       "#333333",
    },
    "light": {
        "bg":           "#FAFAFA",
        "bg_secondary": "#FFFFFF",
        "surface":      "#F0F0F0",
        "primary":      "#6200EE",
        "on_primary":   "#FFFFFF",
        "text":         "#1C1B1F",
        "text_muted":   "#6F6F6F",
        "border":       "#DDDDDD",
    },
}


def get_palette(theme_key: str) -> dict[str, str]:
    """Return the colour palette for *theme_key* (dark for unknown keys)."""
    return dict(PALETTES.get(theme_key, PALETTES["dark"]))


def threshold_color(threshold: ThresholdState, palette: dict[str, str]) -> str:
    """Text colour for the clock digits in the given band."""
    if threshold == ThresholdState.WARNING:
        return PAUSE_COLORS[1]
    if threshold == ThresholdState.ALERT:
        return STOP_TEXT
    return palette["text"]


def button_style(state: ButtonState) -> str:
    """Per-state inline style for the primary button."""
    bg, fg = BUTTON_COLORS[state]
    return (
        f"background-color: {bg}; color: {fg}; border: 1px solid {fg};"
        " border-radius: 22px; padding: 10px 28px;"
        " font-size: 16px; font-weight: 700;"
    )


def build_stylesheet(palette: dict[str, str]) -> str:
    p = palette
    return f"""
    /* ── global ─────────────────────────────────── */
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-family: "Helvetica Neue", Arial;
        font-size: 14px;
    }}

    QMainWindow {{
        background-color: {p['bg']};
    }}

    /* ── app bar ─────────────────────────────────── */
    QFrame#appBar {{
        background-color: {p['primary']};
        border: none;
    }}

    QLabel#appBarTitle, QLabel#appBarIcon {{
        background-color: transparent;
        color: {p['on_primary']};
        font-size: 18px;
        font-weight: 600;
    }}

    /* ── clock digits ────────────────────────────── */
    QLabel#digitBox {{
        background-color: transparent;
        border: 2px solid #D3D3D3;
        border-radius: 6px;
        padding: 4px;
        font-size: 24px;
        font-weight: 500;
    }}

    /* ── buttons ─────────────────────────────────── */
    QPushButton {{
        background-color: {p['bg_secondary']};
        color: {p['text']};
        border: 1px solid {p['border']};
        border-radius: 22px;
        padding: 10px 24px;
        font-size: 14px;
        font-weight: 600;
    }}

    QPushButton#resetButton {{
        background-color: #D3D3D3;
        color: #808080;
        border: none;
    }}

    QPushButton#resetButton:hover {{
        background-color: #C0C0C0;
    }}

    /* ── status bar ──────────────────────────────── */
    QStatusBar {{
        background-color: {p['bg']};
        color: {p['text_muted']};
        font-size: 12px;
        border-top: 1px solid {p['border']};
    }}
    """
