"""QSS stylesheet and clock colours for IntervalTimer."""

from __future__ import annotations

# ── clock face ──────────────────────────────────────────────────────

TEXT_COLOR = "#FFFFFF"
DARKEN_COLOR = "#808080"
TRACK_COLOR = "#FFFFFF"

# ── default palette (dark "cover" look) ───────────────────────────────

DEFAULT_PALETTE: dict[str, str] = {
    "bg":           "#333333",
    "bg_secondary": "#3D3D3D",
    "surface":      "#484848",
    "accent":       "#0D6EFD",
    "text":         "#FFFFFF",
    "text_muted":   "#AAAAAA",
    "warning":      "#FFC107",
    "border":       "#5A5A5A",
}


def get_palette(accent: str | None = None) -> dict[str, str]:
    """Return a copy of the palette, optionally with a custom accent."""
    palette = dict(DEFAULT_PALETTE)
    if accent:
        palette["accent"] = accent
    return palette


# ── QSS builder ───────────────────────────────────────────────────────


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

    QLabel#messageLabel {{
        font-size: 20px;
        font-weight: 300;
    }}

    QLabel#sectionLabel {{
        font-size: 18px;
        font-weight: 700;
    }}

    /* ── buttons (outline style) ─────────────────── */
    QPushButton {{
        background-color: transparent;
        color: {p['text']};
        border: 1px solid {p['border']};
        border-radius: 6px;
        padding: 8px 22px;
        font-size: 15px;
    }}

    QPushButton#primaryButton {{
        color: {p['accent']};
        border-color: {p['accent']};
    }}

    QPushButton#primaryButton:hover {{
        background-color: {p['accent']};
        color: {p['text']};
    }}

    QPushButton#secondaryButton {{
        color: {p['text_muted']};
        border-color: {p['text_muted']};
    }}

    QPushButton#secondaryButton:hover {{
        background-color: {p['text_muted']};
        color: {p['bg']};
    }}

    QPushButton#warningButton {{
        color: {p['warning']};
        border-color: {p['warning']};
    }}

    QPushButton#warningButton:hover {{
        background-color: {p['warning']};
        color: {p['bg']};
    }}

    /* ── sliders ──────────────────────────────────── */
    QSlider::groove:horizontal {{
        height: 6px;
        background: {p['surface']};
        border-radius: 3px;
    }}

    QSlider::handle:horizontal {{
        background: {p['accent']};
        width: 16px;
        margin: -6px 0;
        border-radius: 8px;
    }}
    """
