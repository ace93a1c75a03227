"""Circular progress clock rendered with QPainter.

- White background track with an accent-coloured arc on top.
- The arc fills clockwise from 12 o'clock as cycles complete.
- Display text (lead-in digit or HH:MM:SS) centred, greyed out while
  resting.
- Arc changes animate over 450 ms.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from PyQt6.QtCore import Qt, QRectF, QVariantAnimation, QEasingCurve
from PyQt6.QtGui import QPainter, QPen, QColor, QFont
from PyQt6.QtWidgets import QWidget

from ..timer.engine import Snapshot
from .styles import TEXT_COLOR, DARKEN_COLOR, TRACK_COLOR


# ── geometry ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class RingGeometry:
    size: float
    stroke_width: float
    radius: float
    circumference: float

    @property
    def center(self) -> tuple[float, float]:
        return (self.size / 2, self.size / 2)


def ring_geometry(size: float, stroke_width: float) -> RingGeometry:
    """Radius leaves two stroke widths of margin inside a *size* square."""
    radius = max(0.0, size / 2 - stroke_width * 2)
    return RingGeometry(
        size=size,
        stroke_width=stroke_width,
        radius=radius,
        circumference=radius * 2 * math.pi,
    )


def dash_offset(progress: float, circumference: float) -> float:
    """Length of the ring left unfilled at *progress* (0..1)."""
    progress = max(0.0, min(1.0, progress))
    return circumference - progress * circumference


def arc_span(progress: float) -> int:
    """Qt span angle (1/16 degree, clockwise is negative)."""
    progress = max(0.0, min(1.0, progress))
    return -int(progress * 360 * 16)


# ── widget ───────────────────────────────────────────────────────────────


class ProgressRing(QWidget):
    """Custom-painted circular timer clock."""

    RING_SIZE = 500
    STROKE_WIDTH = 21
    ANIMATION_MS = 450

    def __init__(
        self,
        parent: QWidget | None = None,
        *,
        color: str = "#0D6EFD",
    ) -> None:
        super().__init__(parent)
        self.setMinimumSize(200, 200)

        self._percent: float = 0.0
        self._display_percent: float = 0.0
        self._text: str = "00:00:00"
        self._darken: bool = False
        self._color = QColor(color)

        self._arc_anim = QVariantAnimation(self)
        self._arc_anim.setDuration(self.ANIMATION_MS)
        self._arc_anim.setEasingCurve(QEasingCurve.Type.OutCubic)
        self._arc_anim.valueChanged.connect(self._on_arc_anim)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC API
    # ══════════════════════════════════════════════════════════════════

    @property
    def percent(self) -> float:
        return self._percent

    @property
    def text(self) -> str:
        return self._text

    @property
    def darken(self) -> bool:
        return self._darken

    @property
    def color(self) -> str:
        return self._color.name()

    def set_percent(self, pct: float) -> None:
        """Update the arc fill (0..1). Smoothly animates."""
        pct = max(0.0, min(1.0, pct))
        if pct == self._percent:
            return
        self._percent = pct
        self._arc_anim.stop()
        self._arc_anim.setStartValue(self._display_percent)
        self._arc_anim.setEndValue(pct)
        self._arc_anim.start()

    def set_text(self, text: str) -> None:
        self._text = text
        self.update()

    def set_darken(self, darken: bool) -> None:
        self._darken = darken
        self.update()

    def set_color(self, color: str) -> None:
        self._color = QColor(color)
        self.update()

    def apply_snapshot(self, snapshot: Snapshot) -> None:
        self.set_percent(snapshot.progress_fraction)
        self._text = snapshot.display_text
        self._darken = snapshot.darken
        self.update()

    # ══════════════════════════════════════════════════════════════════
    #  ANIMATION SLOTS
    # ══════════════════════════════════════════════════════════════════

    def _on_arc_anim(self, value: object) -> None:
        self._display_percent = float(value)  # type: ignore[arg-type]
        self.update()

    # ══════════════════════════════════════════════════════════════════
    #  PAINTING
    # ══════════════════════════════════════════════════════════════════

    def paintEvent(self, event) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        side = min(self.width(), self.height())
        # Scale the reference stroke to the actual widget size
        stroke = self.STROKE_WIDTH * side / self.RING_SIZE
        geo = ring_geometry(side, stroke)
        cx = self.width() / 2
        cy = self.height() / 2
        ring_rect = QRectF(
            cx - geo.radius, cy - geo.radius,
            geo.radius * 2, geo.radius * 2,
        )

        # ── background track ─────────────────────────────────────────
        track_pen = QPen(QColor(TRACK_COLOR), stroke, Qt.PenStyle.SolidLine)
        painter.setPen(track_pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawEllipse(ring_rect)

        # ── progress arc ─────────────────────────────────────────────
        if self._display_percent > 0.001:
            arc_pen = QPen(self._color, stroke, Qt.PenStyle.SolidLine)
            arc_pen.setCapStyle(Qt.PenCapStyle.FlatCap)
            painter.setPen(arc_pen)
            # Qt arcs: start at 12 o'clock (90*16), go clockwise (negative)
            painter.drawArc(ring_rect, 90 * 16, arc_span(self._display_percent))

        # ── centre text ──────────────────────────────────────────────
        font = QFont()
        font.setPixelSize(max(12, int(side * 0.16)))
        painter.setFont(font)
        painter.setPen(QColor(DARKEN_COLOR if self._darken else TEXT_COLOR))
        painter.drawText(ring_rect, Qt.AlignmentFlag.AlignCenter, self._text)

        painter.end()
