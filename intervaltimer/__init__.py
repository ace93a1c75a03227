"""IntervalTimer: an on/off interval (tabata) timer."""

__version__ = "0.1.0"
