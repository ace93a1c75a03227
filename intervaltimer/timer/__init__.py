"""Timer package."""

from .engine import (
    IntervalTimerEngine,
    TimerConfig,
    TimerState,
    Snapshot,
    Phase,
    CueKind,
    Start,
    Stop,
    Reset,
    SetTimer,
    Tick,
    step,
    LEAD_IN_SECONDS,
)
from .driver import TimerDriver, QtTickSource, Subscription

__all__ = [
    "IntervalTimerEngine",
    "TimerConfig",
    "TimerState",
    "Snapshot",
    "Phase",
    "CueKind",
    "Start",
    "Stop",
    "Reset",
    "SetTimer",
    "Tick",
    "step",
    "LEAD_IN_SECONDS",
    "TimerDriver",
    "QtTickSource",
    "Subscription",
]
