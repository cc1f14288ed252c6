"""Standard library logging for the API process.

Domain code reports through Logfire. Route modules, uvicorn and SQLAlchemy
log through ``logging``, configured here.
"""

import logging
import sys

from ideapool.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Chatty libraries kept at WARNING unless debugging
_QUIET_LOGGERS = ("sqlalchemy.engine", "uvicorn.access", "passlib")


def _level_for(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure the root logger for ``settings.environment``."""
    level = _level_for(settings)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stdout, force=True)

    if not settings.debug:
        for name in _QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
