"""Configuration package."""

from simplebot.config.settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
]
