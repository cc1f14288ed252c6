#!/usr/bin/env python3
"""Serve the Idea Pool API with uvicorn."""

import sys

import logfire
import uvicorn

from ideapool.config import Settings
from ideapool.util.logging import setup_logging
from ideapool.util.observability import configure_logfire

APP_FACTORY = "ideapool.interface.api.app:create_app"


def main() -> int:
    settings = Settings()

    # Before anything else so startup failures are traced too
    configure_logfire(settings)
    setup_logging(settings)

    logfire.info(
        "Starting Idea Pool API",
        host=settings.api.host,
        port=settings.api.port,
        environment=settings.environment,
    )
    try:
        uvicorn.run(
            APP_FACTORY,
            factory=True,
            host=settings.api.host,
            port=settings.api.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Idea Pool API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
