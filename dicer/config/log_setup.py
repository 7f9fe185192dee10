"""Root logger configuration driven by Settings."""

import logging

from dicer.config.settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> int:
    """Configure the root logger and return the effective level.

    ``debug`` forces DEBUG; otherwise ``log_level`` is used, falling back
    to INFO for names the logging module does not know.
    """
    if settings.debug:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(settings.log_level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
    # Streamlit's watcher is chatty at DEBUG
    logging.getLogger("watchdog").setLevel(logging.WARNING)
    return level
