"""Main timer display widget.

Layout (top → bottom):
    - Status message
    - ProgressRing (large, centred)
    - Start / Resume / Stop and Reset buttons
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QSizePolicy,
)

from ..timer.driver import TimerDriver
from ..timer.engine import Phase, Snapshot
from .progress_ring import ProgressRing


BUTTON_LABELS: dict[Phase, str] = {
    Phase.IDLE:   "Start",
    Phase.PAUSED: "Resume",
    Phase.START:  "Stop",
    Phase.ON:     "Stop",
    Phase.OFF:    "Stop",
}


class TimerWidget(QWidget):
    """Status line, clock and controls bound to a ``TimerDriver``."""

    def __init__(
        self,
        driver: TimerDriver,
        parent: QWidget | None = None,
        *,
        color: str = "#0D6EFD",
    ) -> None:
        super().__init__(parent)
        self._driver = driver
        self._build_ui(color)
        self._connect_signals()
        self._on_snapshot(driver.snapshot)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self, color: str) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 16, 24, 16)
        layout.setSpacing(12)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._message = QLabel(self)
        self._message.setObjectName("messageLabel")
        self._message.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._message)

        ring_row = QHBoxLayout()
        ring_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._ring = ProgressRing(self, color=color)
        self._ring.setSizePolicy(
            QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed,
        )
        self._ring.setFixedSize(340, 340)
        ring_row.addWidget(self._ring)
        layout.addLayout(ring_row)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(12)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._start_stop_btn = QPushButton("Start", self)
        self._start_stop_btn.setObjectName("primaryButton")

        self._reset_btn = QPushButton("Reset", self)
        self._reset_btn.setObjectName("warningButton")

        btn_row.addWidget(self._start_stop_btn)
        btn_row.addWidget(self._reset_btn)
        layout.addLayout(btn_row)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._start_stop_btn.clicked.connect(self._driver.toggle)
        self._reset_btn.clicked.connect(self._driver.reset)
        self._driver.snapshot_changed.connect(self._on_snapshot)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_snapshot(self, snapshot: Snapshot) -> None:
        self._message.setText(snapshot.message)
        self._ring.apply_snapshot(snapshot)

        label = BUTTON_LABELS[snapshot.phase]
        self._start_stop_btn.setText(label)
        self._start_stop_btn.setObjectName(
            "secondaryButton" if label == "Stop" else "primaryButton"
        )
        # Re-polish so the objectName change picks up its QSS rule
        style = self._start_stop_btn.style()
        if style is not None:
            style.unpolish(self._start_stop_btn)
            style.polish(self._start_stop_btn)

    # ── accessors ─────────────────────────────────────────────────────────

    @property
    def ring(self) -> ProgressRing:
        return self._ring
