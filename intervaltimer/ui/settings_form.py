"""Settings form: on/off durations and cycle count.

``SettingsDraft`` is the input-parsing half and has no Qt dependency.
Every field is updated on its own from raw text; text that does not parse
(or is out of range) is dropped and the previous value is kept.  This is
the only place user input is validated, ``SetTimer`` trusts its caller.

``SettingsForm`` lays the seven fields out as sliders and emits
``timer_set(on, off, cycles)`` after each edit.
"""

from __future__ import annotations

import re

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QHBoxLayout, QVBoxLayout, QLabel, QSlider,
)

from ..settings import MIN_CYCLES, MAX_CYCLES
from ..timer.engine import (
    DEFAULT_DURATION_ON, DEFAULT_DURATION_OFF, DEFAULT_CYCLES,
)
from ..timer.helpers import hours, minutes, seconds, join_hms


# ── field ranges ─────────────────────────────────────────────────────────

HOURS_RANGE = (0, 23)
MINUTES_RANGE = (0, 59)
SECONDS_RANGE = (0, 59)
CYCLES_RANGE = (MIN_CYCLES, MAX_CYCLES)
_DIGITS = re.compile(r"[0-9]+")

SIDES = ("on", "off")
UNITS = ("hours", "minutes", "seconds")

_UNIT_RANGES = {
    "hours": HOURS_RANGE,
    "minutes": MINUTES_RANGE,
    "seconds": SECONDS_RANGE,
}


def parse_field(text: str, bounds: tuple[int, int]) -> int | None:
    """Parse a plain run of ASCII digits within *bounds*, or return None."""
    if not _DIGITS.fullmatch(text):
        return None
    value = int(text)
    lo, hi = bounds
    if value < lo or value > hi:
        return None
    return value


class SettingsDraft:
    """Pending timer settings built up one field at a time."""

    def __init__(
        self,
        on: int = DEFAULT_DURATION_ON,
        off: int = DEFAULT_DURATION_OFF,
        cycles: int = DEFAULT_CYCLES,
    ) -> None:
        self.on = on
        self.off = off
        self.cycles = cycles

    def values(self) -> tuple[int, int, int]:
        return (self.on, self.off, self.cycles)

    def parts(self, side: str) -> tuple[int, int, int]:
        """``(hours, minutes, seconds)`` of the on or off duration."""
        total = self._total(side)
        return (hours(total), minutes(total), seconds(total))

    def update(self, side: str, unit: str, text: str) -> bool:
        """Replace one component of a duration.  Returns False if dropped."""
        if side not in SIDES or unit not in UNITS:
            raise KeyError(f"unknown field: {side}.{unit}")
        value = parse_field(text, _UNIT_RANGES[unit])
        if value is None:
            return False
        h, m, s = self.parts(side)
        if unit == "hours":
            h = value
        elif unit == "minutes":
            m = value
        else:
            s = value
        setattr(self, side, join_hms(h, m, s))
        return True

    def update_cycles(self, text: str) -> bool:
        value = parse_field(text, CYCLES_RANGE)
        if value is None:
            return False
        self.cycles = value
        return True

    def _total(self, side: str) -> int:
        return self.on if side == "on" else self.off


# ── widget ───────────────────────────────────────────────────────────────


class SettingsForm(QWidget):
    """Slider form for the on time, off time and number of cycles."""

    timer_set = pyqtSignal(int, int, int)

    def __init__(
        self,
        draft: SettingsDraft | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._draft = draft or SettingsDraft()
        self._sliders: dict[str, QSlider] = {}
        self._labels: dict[str, QLabel] = {}
        self._build_ui()
        self._populate()

    @property
    def draft(self) -> SettingsDraft:
        return self._draft

    # ══════════════════════════════════════════════════════════════════
    #  BUILD UI
    # ══════════════════════════════════════════════════════════════════

    def _build_ui(self) -> None:
        row = QHBoxLayout(self)
        row.setContentsMargins(0, 0, 0, 0)
        row.setSpacing(24)

        for side, title in (("on", "On Time"), ("off", "Off Time")):
            col = QVBoxLayout()
            col.setSpacing(6)
            col.addWidget(self._section_label(title))
            for unit in UNITS:
                key = f"{side}.{unit}"
                lo, hi = _UNIT_RANGES[unit]
                col.addWidget(self._add_label(key))
                col.addWidget(self._add_slider(key, lo, hi))
            col.addStretch()
            row.addLayout(col)

        col = QVBoxLayout()
        col.setSpacing(6)
        col.addWidget(self._section_label("Cycles"))
        col.addWidget(self._add_label("cycles"))
        col.addWidget(self._add_slider("cycles", *CYCLES_RANGE))
        col.addStretch()
        row.addLayout(col)

    def _section_label(self, text: str) -> QLabel:
        lbl = QLabel(text, self)
        lbl.setObjectName("sectionLabel")
        lbl.setAlignment(Qt.AlignmentFlag.AlignCenter)
        return lbl

    def _add_label(self, key: str) -> QLabel:
        lbl = QLabel(self)
        self._labels[key] = lbl
        return lbl

    def _add_slider(self, key: str, lo: int, hi: int) -> QSlider:
        slider = QSlider(Qt.Orientation.Horizontal, self)
        slider.setRange(lo, hi)
        slider.valueChanged.connect(lambda v, k=key: self.set_field(k, str(v)))
        self._sliders[key] = slider
        return slider

    # ══════════════════════════════════════════════════════════════════
    #  VALUES
    # ══════════════════════════════════════════════════════════════════

    def set_field(self, key: str, text: str) -> None:
        """Apply raw text to one field and emit the resulting settings."""
        if key == "cycles":
            changed = self._draft.update_cycles(text)
        else:
            side, unit = key.split(".", 1)
            changed = self._draft.update(side, unit, text)
        if changed:
            self._populate()
        self.timer_set.emit(*self._draft.values())

    def _populate(self) -> None:
        """Sync sliders and labels to the draft without re-emitting."""
        for side in SIDES:
            for unit, value in zip(UNITS, self._draft.parts(side)):
                key = f"{side}.{unit}"
                self._set_slider(key, value)
                self._labels[key].setText(f"{unit.capitalize()}: {value}")
        self._set_slider("cycles", self._draft.cycles)
        self._labels["cycles"].setText(str(self._draft.cycles))

    def _set_slider(self, key: str, value: int) -> None:
        slider = self._sliders[key]
        slider.blockSignals(True)
        slider.setValue(value)
        slider.blockSignals(False)
