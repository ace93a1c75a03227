"""Shared pytest fixtures for IntervalTimer tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from intervaltimer.timer.driver import TimerDriver
from intervaltimer.timer.engine import IntervalTimerEngine

from helpers import FakeTickSource


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def app_support_dir(tmp_path, monkeypatch):
    """Keep settings and cached sounds out of the real home directory."""
    support = tmp_path / "support"
    monkeypatch.setattr("intervaltimer.settings.APP_SUPPORT_DIR", support)
    monkeypatch.setattr(
        "intervaltimer.settings.SETTINGS_PATH", support / "settings.json",
    )
    monkeypatch.setattr("intervaltimer.audio.sounds.SOUNDS_DIR", support / "sounds")
    yield support


@pytest.fixture
def engine():
    """Fresh engine with the default 20/10 x 8 configuration."""
    return IntervalTimerEngine()


@pytest.fixture
def ticks():
    return FakeTickSource()


@pytest.fixture
def driver(qapp, ticks):
    """Driver wired to a hand-cranked tick source."""
    return TimerDriver(parent=None, tick_source=ticks)
