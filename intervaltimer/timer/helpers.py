"""Splitting a span of seconds into clock-face parts."""

from __future__ import annotations


def hours(t: int) -> int:
    """Whole hours in *t* seconds."""
    return t // 3600


def minutes(t: int) -> int:
    """Minutes part of *t* seconds (0-59)."""
    return (t % 3600) // 60


def seconds(t: int) -> int:
    """Seconds part of *t* seconds (0-59)."""
    return t % 60


def join_hms(h: int, m: int, s: int) -> int:
    return h * 3600 + m * 60 + s


def format_hms(t: int) -> str:
    """``HH:MM:SS``; hours are not wrapped at 24."""
    t = max(0, t)
    return f"{hours(t):02d}:{minutes(t):02d}:{seconds(t):02d}"
