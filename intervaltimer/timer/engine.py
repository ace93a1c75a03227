"""Interval timer state machine for IntervalTimer.

Phases
------
IDLE     Not running, waiting for the user to start.
START    Five second lead-in before the first work interval.
ON       Work interval counting down.
OFF      Rest interval counting down.
PAUSED   Timer frozen (remembers what it was doing before).

Transitions
-----------
IDLE → START                          (start)
START | ON | OFF → PAUSED             (stop)
PAUSED → {whatever was paused}        (start)
START → ON                            (lead-in reaches 0)
ON → OFF, OFF → ON                    (interval reaches 0, cycles left)
ON → IDLE                             (last cycle finished)
Any → IDLE                            (reset / set timer)

A cycle is one ON + OFF pair and is counted when its ON part finishes, so
the run ends straight after the last ON interval without a trailing rest.

Everything here is pure: ``step`` maps ``(config, state, command)`` to a
new ``(config, state, cue)`` and never touches a clock.  ``TimerDriver``
owns the tick source and feeds ``Tick`` commands in.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

from .helpers import format_hms


# ── enums ─────────────────────────────────────────────────────────────────


class Phase(Enum):
    IDLE = "idle"
    START = "start"
    ON = "on"
    OFF = "off"
    PAUSED = "paused"


class CueKind(Enum):
    BEEP = "beep"
    LONG_BEEP = "long-beep"


# ── constants ─────────────────────────────────────────────────────────────

DEFAULT_DURATION_ON = 20
DEFAULT_DURATION_OFF = 10
DEFAULT_CYCLES = 8
LEAD_IN_SECONDS = 5
BEEP_WINDOW = 4  # short beeps on the last four seconds of every phase

ACTIVE_PHASES = frozenset({Phase.START, Phase.ON, Phase.OFF})

MSG_READY = "Get ready!"
MSG_STARTED = "Timer started"
MSG_RESUMED = "Timer resumed"
MSG_STOPPED = "Timer stopped"
MSG_RESET = "Reset"
MSG_SETTINGS = "Settings updated"
MSG_GO = "Go!"
MSG_REST = "Rest"
MSG_DONE = "Done, nice work!"


# ── commands ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Start:
    """Start from IDLE, or resume from PAUSED."""


@dataclass(frozen=True)
class Stop:
    """Pause the running phase."""


@dataclass(frozen=True)
class Reset:
    """Drop the current run and go back to IDLE."""


@dataclass(frozen=True)
class SetTimer:
    """Replace the whole configuration, then reset.

    Values are trusted; ``SettingsDraft`` validates user input.
    """

    on: int
    off: int
    cycles: int


@dataclass(frozen=True)
class Tick:
    """One elapsed second."""


Command = Union[Start, Stop, Reset, SetTimer, Tick]


# ── state ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class TimerConfig:
    duration_on: int = DEFAULT_DURATION_ON    # seconds
    duration_off: int = DEFAULT_DURATION_OFF  # seconds
    cycles: int = DEFAULT_CYCLES


@dataclass(frozen=True)
class TimerState:
    phase: Phase = Phase.IDLE
    saved_phase: Phase = Phase.IDLE  # only meaningful while PAUSED
    remaining: int = DEFAULT_DURATION_ON
    completed_cycles: int = 0
    countdown_start_value: int = LEAD_IN_SECONDS
    message: str = MSG_READY

    @property
    def tick_active(self) -> bool:
        return self.phase in ACTIVE_PHASES

    @property
    def effective_phase(self) -> Phase:
        """The phase being timed, looking through PAUSED."""
        if self.phase == Phase.PAUSED:
            return self.saved_phase
        return self.phase


@dataclass(frozen=True)
class Snapshot:
    """Read-only projection of the engine handed to the UI."""

    phase: Phase
    remaining: int
    completed_cycles: int
    cycles: int
    display_text: str
    progress_fraction: float
    darken: bool
    cue: CueKind | None
    tick_active: bool
    message: str


def initial_state(config: TimerConfig) -> TimerState:
    return TimerState(remaining=config.duration_on)


# ── transitions ───────────────────────────────────────────────────────────


def step(
    config: TimerConfig, state: TimerState, command: Command,
) -> tuple[TimerConfig, TimerState, CueKind | None]:
    """Apply one command.  Returns the new config, state and cue to fire."""
    if isinstance(command, Tick):
        new_state, cue = _tick(config, state)
        return config, new_state, cue
    if isinstance(command, Start):
        return config, _start(state), None
    if isinstance(command, Stop):
        return config, _stop(state), None
    if isinstance(command, Reset):
        return config, _reset(config, MSG_RESET), None
    if isinstance(command, SetTimer):
        new_config = TimerConfig(
            duration_on=command.on,
            duration_off=command.off,
            cycles=command.cycles,
        )
        return new_config, _reset(new_config, MSG_SETTINGS), None
    raise TypeError(f"unknown command: {command!r}")


def _start(state: TimerState) -> TimerState:
    if state.phase == Phase.IDLE:
        return replace(
            state,
            phase=Phase.START,
            completed_cycles=0,
            remaining=state.countdown_start_value,
            message=MSG_STARTED,
        )
    if state.phase == Phase.PAUSED:
        return replace(
            state,
            phase=state.saved_phase,
            saved_phase=Phase.IDLE,
            message=MSG_RESUMED,
        )
    # Already running: keep the single subscription as it is.
    return state


def _stop(state: TimerState) -> TimerState:
    if not state.tick_active:
        return state
    return replace(
        state,
        saved_phase=state.phase,
        phase=Phase.PAUSED,
        message=MSG_STOPPED,
    )


def _reset(config: TimerConfig, message: str) -> TimerState:
    return TimerState(
        phase=Phase.IDLE,
        saved_phase=Phase.IDLE,
        remaining=config.duration_on,
        completed_cycles=0,
        countdown_start_value=LEAD_IN_SECONDS,
        message=message,
    )


def _cue_for(remaining: int) -> CueKind | None:
    if remaining == 0:
        return CueKind.LONG_BEEP
    if 1 <= remaining <= BEEP_WINDOW:
        return CueKind.BEEP
    return None


def _tick(
    config: TimerConfig, state: TimerState,
) -> tuple[TimerState, CueKind | None]:
    if not state.tick_active:
        return state, None

    remaining = max(0, state.remaining - 1)
    cue = _cue_for(remaining)
    if remaining > 0:
        return replace(state, remaining=remaining), cue

    if state.phase == Phase.START:
        return replace(
            state,
            phase=Phase.ON,
            remaining=config.duration_on,
            countdown_start_value=LEAD_IN_SECONDS,
            message=MSG_GO,
        ), cue

    completed = state.completed_cycles
    if state.phase == Phase.ON:
        completed += 1

    if completed >= config.cycles:
        # Run complete: keep the finished count so the ring stays full.
        return TimerState(
            phase=Phase.IDLE,
            saved_phase=Phase.IDLE,
            remaining=config.duration_on,
            completed_cycles=completed,
            countdown_start_value=LEAD_IN_SECONDS,
            message=MSG_DONE,
        ), cue

    if state.phase == Phase.ON:
        return replace(
            state,
            phase=Phase.OFF,
            remaining=config.duration_off,
            completed_cycles=completed,
            message=MSG_REST,
        ), cue
    return replace(
        state,
        phase=Phase.ON,
        remaining=config.duration_on,
        completed_cycles=completed,
        message=MSG_GO,
    ), cue


def make_snapshot(
    config: TimerConfig, state: TimerState, cue: CueKind | None = None,
) -> Snapshot:
    if state.effective_phase == Phase.START:
        display_text = str(state.remaining)
    else:
        display_text = format_hms(state.remaining)

    if config.cycles > 0:
        progress = min(1.0, state.completed_cycles / config.cycles)
    else:
        progress = 0.0

    return Snapshot(
        phase=state.phase,
        remaining=state.remaining,
        completed_cycles=state.completed_cycles,
        cycles=config.cycles,
        display_text=display_text,
        progress_fraction=progress,
        darken=state.phase == Phase.OFF,
        cue=cue,
        tick_active=state.tick_active,
        message=state.message,
    )


# ── engine ────────────────────────────────────────────────────────────────


class IntervalTimerEngine:
    """Holds the current config and state and applies commands one at a time.

    Single-threaded: ``handle`` runs to completion before the next command
    is accepted.  The engine never schedules ticks itself.
    """

    def __init__(self, config: TimerConfig | None = None) -> None:
        self._config: TimerConfig = config or TimerConfig()
        self._state: TimerState = initial_state(self._config)

    # ── properties ────────────────────────────────────────────────────

    @property
    def config(self) -> TimerConfig:
        return self._config

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def remaining(self) -> int:
        return self._state.remaining

    @property
    def completed_cycles(self) -> int:
        return self._state.completed_cycles

    @property
    def is_running(self) -> bool:
        return self._state.tick_active

    # ── commands ──────────────────────────────────────────────────────

    def handle(self, command: Command) -> Snapshot:
        self._config, self._state, cue = step(
            self._config, self._state, command,
        )
        return make_snapshot(self._config, self._state, cue)

    def snapshot(self) -> Snapshot:
        """Current projection without a cue."""
        return make_snapshot(self._config, self._state)
