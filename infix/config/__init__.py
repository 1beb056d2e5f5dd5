"""Settings and logging setup."""

from .settings import Settings, load_settings, settings_summary
from .logging import configure_logging

__all__ = [
    "Settings",
    "load_settings",
    "settings_summary",
    "configure_logging",
]
