"""Configuration for the roulette disk."""

from roulette_disk.config.settings import (
    BoardSettings,
    DisplaySettings,
    Settings,
    SpinSettings,
    get_settings,
)

__all__ = [
    "BoardSettings",
    "DisplaySettings",
    "Settings",
    "SpinSettings",
    "get_settings",
]
