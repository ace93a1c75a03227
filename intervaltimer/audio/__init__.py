"""Audio package."""

from .sounds import SoundManager

__all__ = ["SoundManager"]
