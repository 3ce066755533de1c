"""Settings package for the swaps core."""

from swaps.settings.config import Settings, settings

__all__ = ["Settings", "settings"]
