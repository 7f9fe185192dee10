"""
Dicer Configuration.

Environment variables, settings, and logging configuration.
"""

from dicer.config.log_setup import configure_logging
from dicer.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
