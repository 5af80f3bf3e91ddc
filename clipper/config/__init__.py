"""Configuration package."""

from clipper.config.settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
]
