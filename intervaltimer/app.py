"""Main application window for IntervalTimer."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QTimer
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QFrame

from .audio.sounds import SoundManager
from .settings import Settings, load_settings, save_settings
from .timer.driver import TimerDriver
from .timer.engine import IntervalTimerEngine
from .ui.settings_form import SettingsForm, SettingsDraft
from .ui.styles import build_stylesheet, get_palette
from .ui.timer_widget import TimerWidget

logger = logging.getLogger(__name__)


class IntervalTimerApp(QMainWindow):
    """Main application window.

    Everything the window talks to is built here (or passed in) and handed
    down explicitly; there is no global timer instance.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        driver: TimerDriver | None = None,
        sound_manager: SoundManager | None = None,
        persist: bool = True,
    ) -> None:
        super().__init__()
        self.setWindowTitle("IntervalTimer")
        self.setMinimumSize(480, 720)

        self._persist = persist
        self._geometry_save_timer = QTimer(self)
        self._geometry_save_timer.setSingleShot(True)
        self._geometry_save_timer.setInterval(500)
        self._geometry_save_timer.timeout.connect(self._save_geometry)

        # ── settings ──────────────────────────────────────────────────
        self._settings: Settings = settings or load_settings()

        # ── engine + driver ───────────────────────────────────────────
        self._driver = driver or TimerDriver(
            self, engine=IntervalTimerEngine(self._settings.timer_config()),
        )
        if self._driver.engine.config != self._settings.timer_config():
            s = self._settings
            self._driver.set_timer(s.duration_on, s.duration_off, s.cycles)

        # ── audio ─────────────────────────────────────────────────────
        self._sounds = sound_manager or SoundManager(self)
        self._sounds.set_volume(self._settings.sound_volume)
        self._sounds.set_enabled(self._settings.sound_enabled)
        self._driver.cue.connect(self._sounds.play)

        self._build_ui()
        self._build_menu()
        self.setStyleSheet(
            build_stylesheet(get_palette(self._settings.accent_color))
        )
        self._restore_geometry()

    # ── accessors ─────────────────────────────────────────────────────

    @property
    def driver(self) -> TimerDriver:
        return self._driver

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def timer_widget(self) -> TimerWidget:
        return self._timer_widget

    @property
    def settings_form(self) -> SettingsForm:
        return self._form

    # ══════════════════════════════════════════════════════════════════
    #  BUILD
    # ══════════════════════════════════════════════════════════════════

    def _build_ui(self) -> None:
        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(16)

        self._timer_widget = TimerWidget(
            self._driver, central, color=self._settings.accent_color,
        )
        layout.addWidget(self._timer_widget)

        separator = QFrame(central)
        separator.setFrameShape(QFrame.Shape.HLine)
        layout.addWidget(separator)

        s = self._settings
        self._form = SettingsForm(
            SettingsDraft(s.duration_on, s.duration_off, s.cycles),
            central,
        )
        self._form.timer_set.connect(self._on_timer_set)
        layout.addWidget(self._form)

        self.setCentralWidget(central)

    def _build_menu(self) -> None:
        menu = self.menuBar().addMenu("Timer")

        toggle = QAction("Start / Stop", self)
        toggle.setShortcut(QKeySequence("Space"))
        toggle.triggered.connect(self._driver.toggle)
        menu.addAction(toggle)

        reset = QAction("Reset", self)
        reset.setShortcut(QKeySequence("Esc"))
        reset.triggered.connect(self._driver.reset)
        menu.addAction(reset)

        menu.addSeparator()

        self._sound_action = QAction("Sound", self)
        self._sound_action.setCheckable(True)
        self._sound_action.setChecked(self._settings.sound_enabled)
        self._sound_action.toggled.connect(self._on_sound_toggled)
        menu.addAction(self._sound_action)

    # ══════════════════════════════════════════════════════════════════
    #  SLOTS
    # ══════════════════════════════════════════════════════════════════

    def _on_timer_set(self, on: int, off: int, cycles: int) -> None:
        logger.debug("new timer: on=%ds off=%ds cycles=%d", on, off, cycles)
        self._driver.set_timer(on, off, cycles)
        self._settings.apply_timer(on, off, cycles)
        self._save()

    def _on_sound_toggled(self, enabled: bool) -> None:
        self._settings.sound_enabled = enabled
        self._sounds.set_enabled(enabled)
        self._save()

    def _save(self) -> None:
        if self._persist:
            save_settings(self._settings)

    # ══════════════════════════════════════════════════════════════════
    #  GEOMETRY
    # ══════════════════════════════════════════════════════════════════

    def _restore_geometry(self) -> None:
        """Restore window position and size from settings."""
        s = self._settings
        if s.window_x is not None and s.window_y is not None:
            self.move(s.window_x, s.window_y)
        if s.window_width and s.window_height:
            self.resize(s.window_width, s.window_height)

    def _save_geometry(self) -> None:
        """Persist current window geometry to settings."""
        if not self.isVisible():
            return
        pos = self.pos()
        size = self.size()
        self._settings.window_x = pos.x()
        self._settings.window_y = pos.y()
        self._settings.window_width = size.width()
        self._settings.window_height = size.height()
        self._save()

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._save_geometry()
        self._driver.reset()
        event.accept()

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        self._geometry_save_timer.start()

    def moveEvent(self, event) -> None:  # type: ignore[override]
        super().moveEvent(event)
        self._geometry_save_timer.start()
