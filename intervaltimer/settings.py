"""Application settings with JSON persistence.

Settings are stored at:
    ~/Library/Application Support/IntervalTimer/settings.json

Usage::

    settings = load_settings()
    settings.cycles = 10
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path

from .timer.engine import (
    TimerConfig,
    DEFAULT_DURATION_ON,
    DEFAULT_DURATION_OFF,
    DEFAULT_CYCLES,
)

logger = logging.getLogger(__name__)

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "IntervalTimer"
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"

MIN_CYCLES = 1
MAX_CYCLES = 100


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    duration_on: int = DEFAULT_DURATION_ON     # seconds
    duration_off: int = DEFAULT_DURATION_OFF   # seconds
    cycles: int = DEFAULT_CYCLES

    # ── audio ─────────────────────────────────────────────────────────
    sound_enabled: bool = True
    sound_volume: int = 70                     # 0-100

    # ── appearance ────────────────────────────────────────────────────
    accent_color: str = "#0D6EFD"

    # ── window ────────────────────────────────────────────────────────
    window_x: int | None = None
    window_y: int | None = None
    window_width: int = 560
    window_height: int = 860

    def timer_config(self) -> TimerConfig:
        return TimerConfig(
            duration_on=self.duration_on,
            duration_off=self.duration_off,
            cycles=self.cycles,
        )

    def apply_timer(self, on: int, off: int, cycles: int) -> None:
        self.duration_on = on
        self.duration_off = off
        self.cycles = cycles


def _sanitize(settings: Settings) -> Settings:
    settings.duration_on = max(0, int(settings.duration_on))
    settings.duration_off = max(0, int(settings.duration_off))
    settings.cycles = max(MIN_CYCLES, min(int(settings.cycles), MAX_CYCLES))
    settings.sound_volume = max(0, min(int(settings.sound_volume), 100))
    return settings


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults."""
    if not SETTINGS_PATH.exists():
        return Settings()
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
        # Only use keys that exist in the dataclass
        valid_keys = {f.name for f in fields(Settings)}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return _sanitize(Settings(**filtered))
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("ignoring unreadable settings at %s: %s", SETTINGS_PATH, exc)
    return Settings()


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    APP_SUPPORT_DIR.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
