"""UI package."""

from .progress_ring import ProgressRing
from .settings_form import SettingsForm, SettingsDraft
from .timer_widget import TimerWidget

__all__ = [
    "ProgressRing",
    "SettingsForm",
    "SettingsDraft",
    "TimerWidget",
]
