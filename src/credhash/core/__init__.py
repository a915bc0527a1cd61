"""Configuration and logging for credhash."""

from credhash.core.config import Settings, get_settings
from credhash.core.logging import configure_logging, configure_logging_from_settings

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "configure_logging_from_settings",
]
