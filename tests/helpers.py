"""Shared test helpers for IntervalTimer."""

from intervaltimer.timer.driver import Subscription
from intervaltimer.timer.engine import IntervalTimerEngine, Snapshot, Tick


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class FakeTickSource:
    """Tick source driven by the test instead of a clock."""

    def __init__(self):
        self.subscriptions: list[Subscription] = []
        self.cancelled: list[Subscription] = []

    def subscribe(self, handler):
        sub = Subscription(handler)
        self.subscriptions.append(sub)
        return sub

    def cancel(self, subscription):
        subscription.active = False
        self.cancelled.append(subscription)

    @property
    def live(self) -> list[Subscription]:
        return [s for s in self.subscriptions if s.active]

    def fire(self, count: int = 1) -> None:
        """Deliver *count* ticks to whichever subscription is live."""
        for _ in range(count):
            for sub in self.live:
                sub.handler()

    def fire_stale(self, subscription: Subscription) -> None:
        """Call a handler even if cancelled, like a timeout already queued."""
        subscription.handler()


def run_ticks(engine: IntervalTimerEngine, count: int) -> list[Snapshot]:
    """Feed *count* ticks to *engine* and return every snapshot."""
    return [engine.handle(Tick()) for _ in range(count)]
