"""Configuration system for SemSearch."""

from .log import configure_logging
from .settings import Settings, load_settings, settings

__all__ = ["Settings", "load_settings", "settings", "configure_logging"]
