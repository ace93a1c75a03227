"""Qt glue between the pure engine and the one-second tick source.

The engine only declares whether it wants ticks (``Snapshot.tick_active``);
``TimerDriver`` turns that flag into exactly one live subscription on a
``TickSource`` and forwards every tick back in as a ``Tick`` command.
"""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from .engine import (
    IntervalTimerEngine,
    Command,
    Phase,
    Snapshot,
    Start,
    Stop,
    Reset,
    SetTimer,
    Tick,
)

logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 1000


# ── tick sources ──────────────────────────────────────────────────────────


class Subscription:
    """Handle returned by ``TickSource.subscribe``.

    ``active`` is cleared synchronously on cancel; a source must check it
    before calling the handler so a pending tick is never delivered late.
    """

    __slots__ = ("handler", "active", "timer")

    def __init__(self, handler: Callable[[], None]) -> None:
        self.handler = handler
        self.active = True
        self.timer: QTimer | None = None


class TickSource(Protocol):
    def subscribe(self, handler: Callable[[], None]) -> Subscription: ...

    def cancel(self, subscription: Subscription) -> None: ...


class QtTickSource(QObject):
    """Fires each subscription's handler once per second via ``QTimer``."""

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        self._interval_ms = interval_ms

    def subscribe(self, handler: Callable[[], None]) -> Subscription:
        sub = Subscription(handler)
        timer = QTimer(self)
        timer.setInterval(self._interval_ms)
        timer.timeout.connect(lambda: self._fire(sub))
        sub.timer = timer
        timer.start()
        return sub

    def cancel(self, subscription: Subscription) -> None:
        subscription.active = False
        if subscription.timer is not None:
            subscription.timer.stop()
            subscription.timer.deleteLater()
            subscription.timer = None

    def _fire(self, subscription: Subscription) -> None:
        if subscription.active:
            subscription.handler()


# ── driver ────────────────────────────────────────────────────────────────


class TimerDriver(QObject):
    """Runs an ``IntervalTimerEngine`` on the Qt event loop.

    Signals
    -------
    snapshot_changed(snapshot: Snapshot)
        Emitted after every command, ticks included.
    cue(kind: CueKind)
        Emitted when a command produced an audio cue.
    phase_changed(new_phase: Phase)
        Emitted when the phase differs from the previous snapshot.
    run_completed()
        Emitted once when the last cycle finishes naturally.
    """

    snapshot_changed = pyqtSignal(object)
    cue = pyqtSignal(object)
    phase_changed = pyqtSignal(object)
    run_completed = pyqtSignal()

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        engine: IntervalTimerEngine | None = None,
        tick_source: TickSource | None = None,
    ) -> None:
        super().__init__(parent)
        self._engine = engine or IntervalTimerEngine()
        self._ticks: TickSource = tick_source or QtTickSource(self)
        self._subscription: Subscription | None = None
        self._token: object | None = None
        self._snapshot: Snapshot = self._engine.snapshot()

    # ── properties ────────────────────────────────────────────────────

    @property
    def engine(self) -> IntervalTimerEngine:
        return self._engine

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    @property
    def is_subscribed(self) -> bool:
        return self._subscription is not None

    # ── controls ──────────────────────────────────────────────────────

    def start(self) -> None:
        self.dispatch(Start())

    def stop(self) -> None:
        self.dispatch(Stop())

    def reset(self) -> None:
        self.dispatch(Reset())

    def toggle(self) -> None:
        """Stop when running, otherwise start or resume."""
        if self._engine.is_running:
            self.stop()
        else:
            self.start()

    def set_timer(self, on: int, off: int, cycles: int) -> None:
        self.dispatch(SetTimer(on=on, off=off, cycles=cycles))

    def dispatch(self, command: Command) -> Snapshot:
        previous = self._snapshot
        snapshot = self._engine.handle(command)
        self._snapshot = snapshot
        self._sync_subscription(snapshot.tick_active)

        self.snapshot_changed.emit(snapshot)
        if snapshot.cue is not None:
            self.cue.emit(snapshot.cue)
        if snapshot.phase != previous.phase:
            logger.debug("phase %s -> %s", previous.phase.value, snapshot.phase.value)
            self.phase_changed.emit(snapshot.phase)
            if isinstance(command, Tick) and snapshot.phase == Phase.IDLE:
                logger.info(
                    "run complete: %d/%d cycles",
                    snapshot.completed_cycles, snapshot.cycles,
                )
                self.run_completed.emit()
        return snapshot

    # ── internal ──────────────────────────────────────────────────────

    def _sync_subscription(self, want_ticks: bool) -> None:
        if want_ticks and self._subscription is None:
            self._subscription = self._ticks.subscribe(self._make_handler())
            logger.debug("tick subscription started")
        elif not want_ticks and self._subscription is not None:
            sub = self._subscription
            self._subscription = None
            self._ticks.cancel(sub)
            logger.debug("tick subscription cancelled")

    def _make_handler(self) -> Callable[[], None]:
        # Bind a token so a tick from an old subscription can be told apart.
        token = object()
        self._token = token

        def handler() -> None:
            self._on_tick(token)

        return handler

    def _on_tick(self, token: object) -> None:
        if self._subscription is None or token is not self._token:
            logger.debug("dropped tick from a cancelled subscription")
            return
        self.dispatch(Tick())
